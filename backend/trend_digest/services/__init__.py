"""
Services package for external API access.
"""
from .youtube_service import sample_videos, get_youtube_service

__all__ = [
    "sample_videos",
    "get_youtube_service",
]
