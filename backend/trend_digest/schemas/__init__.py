"""
Pydantic schemas for request/response models.
"""
from .models import (
    DigestRequest,
    VideoRecord,
    ChannelCopy,
    DigestResponse,
    ErrorResponse,
)

__all__ = [
    "DigestRequest",
    "VideoRecord",
    "ChannelCopy",
    "DigestResponse",
    "ErrorResponse",
]
