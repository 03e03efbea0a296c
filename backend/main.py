"""
Entry point - serves the Trend Digest API with uvicorn.
"""
import uvicorn

from trend_digest.config.settings import settings
from trend_digest.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
