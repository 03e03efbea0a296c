"""
YouTube API service for sampling videos that match a brand/campaign query.
"""
import logging
import re
from datetime import datetime
from fastapi import HTTPException
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from typing import Any, Dict, List, Optional

from trend_digest.config.settings import settings
from trend_digest.schemas.models import VideoRecord

logger = logging.getLogger(__name__)

HASHTAG_PATTERN = re.compile(r"#\w+")


def get_youtube_service():
    """Build a YouTube API client for one request; httplib2.Http is not thread-safe."""
    api_key = settings.YOUTUBE_API_KEY
    if not api_key:
        raise HTTPException(status_code=500, detail="Missing YOUTUBE_API_KEY in env")
    return build("youtube", "v3", developerKey=api_key, cache_discovery=False)


def _upstream_error(call: str, e: HttpError) -> HTTPException:
    logger.error("YouTube %s request failed: %s", call, e)
    return HTTPException(
        status_code=500,
        detail=f"YouTube {call} request failed with status {e.resp.status}: {e.reason}",
    )


def extract_hashtags(description: str) -> List[str]:
    """Extract lower-cased hashtags (with their '#') from a description."""
    if not description:
        return []
    return [tag.lower() for tag in HASHTAG_PATTERN.findall(description)]


def parse_published_at(value: Any) -> Optional[datetime]:
    """Parse an RFC 3339 publishedAt timestamp, returning None when unusable."""
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        logger.warning("Could not parse publishedAt %r: %s", value, e)
        return None


def search_videos(youtube, query: str, max_results: int, region_code: str) -> List[Dict]:
    """
    Run search.list for the query.

    Returns:
        Raw search items (possibly empty)
    """
    try:
        response = youtube.search().list(
            q=query,
            part="snippet",
            type="video",
            maxResults=max_results,
            relevanceLanguage=settings.YOUTUBE_RELEVANCE_LANGUAGE,
            regionCode=region_code,
        ).execute()
    except HttpError as e:
        raise _upstream_error("search", e)

    items = (response or {}).get("items") or []
    logger.info("Search API returned %d items for query: %s", len(items), query)
    return items


def collect_video_ids(items: List[Dict]) -> List[str]:
    """Pull the video ids out of search items, skipping malformed entries."""
    video_ids = []
    for item in items:
        item_id = item.get("id") if isinstance(item, dict) else None
        if isinstance(item_id, dict) and item_id.get("videoId"):
            video_ids.append(item_id["videoId"])
    return video_ids


def to_video_record(item: Dict) -> VideoRecord:
    """Convert a videos.list item into a VideoRecord, tolerating missing fields."""
    snippet = item.get("snippet") or {}
    tags = snippet.get("tags") or []
    if not isinstance(tags, list):
        tags = []
    description = snippet.get("description") or ""
    return VideoRecord(
        id=str(item.get("id") or ""),
        tags=[str(tag) for tag in tags if tag],
        description=str(description),
        published_at=parse_published_at(snippet.get("publishedAt")),
    )


def fetch_video_details(youtube, video_ids: List[str]) -> List[VideoRecord]:
    """Batch fetch snippet and statistics for the given ids."""
    if not video_ids:
        return []
    try:
        response = youtube.videos().list(
            part="snippet,statistics",
            id=",".join(video_ids),
        ).execute()
    except HttpError as e:
        raise _upstream_error("videos", e)

    items = (response or {}).get("items") or []
    return [to_video_record(item) for item in items if isinstance(item, dict)]


def sample_videos(query: str, max_results: int, region_code: str) -> Dict[str, Any]:
    """
    Search YouTube and look up the matching videos.

    Args:
        query: Search text (brand and campaign)
        max_results: Maximum number of search results
        region_code: Region code for the search

    Returns:
        Dictionary with "sample_count" (number of search results) and
        "videos" (list of VideoRecord)
    """
    youtube = get_youtube_service()
    items = search_videos(youtube, query, max_results, region_code)
    videos = fetch_video_details(youtube, collect_video_ids(items))
    return {"sample_count": len(items), "videos": videos}
