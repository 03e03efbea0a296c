from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from trend_digest.config.settings import settings

logger = logging.getLogger(__name__)


def handle_error(e: Exception, status_code: int = 500) -> HTTPException:
    """
    Wrap an unexpected exception as an HTTPException.
    Logs the original error and keeps its message for the client.
    """
    logger.error(f"Error occurred: {str(e)}", exc_info=True)
    return HTTPException(status_code=status_code, detail=str(e) or e.__class__.__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """JSON error body in the {"error": message} shape, with the CORS headers."""
    headers = dict(settings.cors_headers)
    headers["Cache-Control"] = settings.CACHE_CONTROL
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def get_validation_message(exc: RequestValidationError) -> str:
    """First validation problem as a short 'field: message' string."""
    errors = exc.errors()
    if not errors:
        return "Invalid input. Please check your data and try again."
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("query", "body")]
    field = ".".join(location)
    return f"{field}: {first.get('msg')}" if field else str(first.get("msg"))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected request to %s: %s", request.url.path, exc.errors())
    return error_response(400, get_validation_message(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Render every HTTP and validation error as {"error": ...}."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
