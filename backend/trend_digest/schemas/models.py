"""
Pydantic models for API request and response validation.
"""
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

from trend_digest.config.settings import settings


class DigestRequest(BaseModel):
    """Request model for building a trend digest."""
    model_config = ConfigDict(populate_by_name=True)

    brand: str = Field("", description="Brand to search for (required)")
    campaign: str = Field("", description="Campaign name appended to the search query")
    summary: str = Field(
        "",
        description="Comma-separated keywords, also prepended to the descriptions"
    )
    country: str = Field(
        settings.YOUTUBE_DEFAULT_COUNTRY,
        description="Region code used for the YouTube search"
    )
    max_results: int = Field(
        settings.YOUTUBE_DEFAULT_MAX_RESULTS,
        alias="max",
        ge=1,
        le=settings.YOUTUBE_MAX_RESULTS_LIMIT,
        description="Maximum number of videos to sample"
    )

    @field_validator("brand", "campaign", "summary", "country", mode="before")
    @classmethod
    def _strip_text(cls, value):
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("country")
    @classmethod
    def _default_country(cls, value: str) -> str:
        return value or settings.YOUTUBE_DEFAULT_COUNTRY

    @property
    def search_query(self) -> str:
        return f"{self.brand} {self.campaign}".strip()


class VideoRecord(BaseModel):
    """Per-video data kept from the YouTube details lookup."""
    id: str
    tags: List[str] = Field(default_factory=list)
    description: str = ""
    published_at: Optional[datetime] = None


class ChannelCopy(BaseModel):
    """Generated copy for one marketing channel."""
    name: str
    title: str
    description: str
    hashtags: List[str]


class DigestResponse(BaseModel):
    """Response model for the trend digest endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    brand: str
    campaign: str
    summary: str
    country: str
    channel_a: ChannelCopy = Field(..., alias="channelA")
    channel_b: ChannelCopy = Field(..., alias="channelB")
    tags: List[str]
    best_hours: List[int] = Field(..., alias="bestHours")
    sample_count: int = Field(..., alias="sampleCount")


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""
    error: str
