"""
Application settings and environment configuration.
Centralized configuration management for the Trend Digest backend.
"""
import os
from dotenv import load_dotenv
from typing import Dict, List

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application Settings
    APP_NAME: str = "Trend Digest API"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # Server Configuration
    HOST: str = "0.0.0.0"
    PORT: int = int(os.getenv("PORT", "8000"))
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"

    # CORS Settings
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_METHODS: List[str] = ["GET", "POST", "OPTIONS"]
    CORS_ALLOW_HEADERS: List[str] = ["Content-Type", "Authorization"]
    CACHE_CONTROL: str = "s-maxage=60, stale-while-revalidate=120"

    # YouTube API Settings
    YOUTUBE_DEFAULT_COUNTRY: str = "MX"
    YOUTUBE_DEFAULT_MAX_RESULTS: int = 12
    YOUTUBE_MAX_RESULTS_LIMIT: int = 50
    YOUTUBE_RELEVANCE_LANGUAGE: str = "es"

    # Digest Settings
    PUBLISH_HOUR_UTC_OFFSET: int = -6
    FALLBACK_BEST_HOURS: List[int] = [19, 20]
    BEST_HOURS_LIMIT: int = 3
    MAX_HASHTAGS_PER_CHANNEL: int = 7

    # Channel identities
    CHANNEL_A_NAME: str = "Vende Más por Catálogo"
    CHANNEL_A_HASHTAG: str = "#vendemasporcatalogo"
    CHANNEL_B_NAME: str = "Catálogos Virtuales LATAM"
    CHANNEL_B_HASHTAG: str = "#catalogosvirtualeslatam"

    @property
    def YOUTUBE_API_KEY(self) -> str:
        """Read on every access so a rotated key is picked up without a restart."""
        return os.getenv("YOUTUBE_API_KEY", "")

    @property
    def cors_headers(self) -> Dict[str, str]:
        """Headers attached to every digest response."""
        return {
            "Access-Control-Allow-Origin": ", ".join(self.CORS_ORIGINS),
            "Access-Control-Allow-Methods": ", ".join(self.CORS_ALLOW_METHODS),
            "Access-Control-Allow-Headers": ", ".join(self.CORS_ALLOW_HEADERS),
        }

    def validate(self) -> None:
        """Validate required settings."""
        if not self.YOUTUBE_API_KEY:
            raise ValueError("Missing YOUTUBE_API_KEY in env")


# Global settings instance
settings = Settings()
