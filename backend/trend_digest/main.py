import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from trend_digest.api.routes import preflight_response, router
from trend_digest.config.settings import settings
from trend_digest.utils.errors import register_error_handlers

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.APP_NAME,
    description="YouTube hashtag and posting-time digest for catalog marketing channels",
    version=settings.APP_VERSION
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


# Registered after CORSMiddleware, so it is the outer layer and answers preflights first
@app.middleware("http")
async def short_circuit_preflight(request: Request, call_next):
    if request.method == "OPTIONS" and request.url.path.startswith(settings.API_PREFIX):
        return preflight_response()
    return await call_next(request)


register_error_handlers(app)

# Routers
app.include_router(router, prefix=settings.API_PREFIX, tags=["Trends"])


@app.get("/")
def root():
    return {"message": "Trend Digest API running 🚀"}
