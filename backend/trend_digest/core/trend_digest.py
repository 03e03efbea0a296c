"""
Trend Digest Builder - Aggregates sampled videos into marketing assets.
"""
import logging
from collections import Counter
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from trend_digest.config.settings import settings
from trend_digest.core.creative_builder import build_channel_copy, build_studio_tags
from trend_digest.core.hashtags import (
    backfill_hashtags,
    derived_hashtags,
    distribute_hashtags,
    rank_tags,
)
from trend_digest.schemas.models import DigestRequest, VideoRecord
from trend_digest.services.youtube_service import extract_hashtags, sample_videos

logger = logging.getLogger(__name__)


def local_publish_hour(published_at: datetime, offset_hours: int = settings.PUBLISH_HOUR_UTC_OFFSET) -> int:
    """Hour of day at a fixed UTC offset."""
    utc_hour = published_at.hour
    if published_at.utcoffset() is not None:
        utc_hour = (published_at - published_at.utcoffset()).hour
    return (utc_hour + offset_hours) % 24


def collect_tags(videos: Iterable[VideoRecord]) -> List[str]:
    """Declared tags plus description hashtags, lower-cased, in video order."""
    tags = []
    for video in videos:
        tags.extend(tag.lower() for tag in video.tags)
        tags.extend(extract_hashtags(video.description))
    return tags


def collect_publish_hours(videos: Iterable[VideoRecord]) -> List[int]:
    return [local_publish_hour(v.published_at) for v in videos if v.published_at is not None]


def best_hours(hours: List[int], limit: int = settings.BEST_HOURS_LIMIT) -> List[int]:
    """
    Most frequent publish hours, ties broken by the earlier hour.

    Falls back to the configured default hours when nothing was observed.
    """
    if not hours:
        return list(settings.FALLBACK_BEST_HOURS)
    counts = Counter(hours)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [hour for hour, _ in ranked[:limit]]


def build_digest(
    request: DigestRequest,
    videos: List[VideoRecord],
    sample_count: int,
    year: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Build the digest document from already-fetched videos.

    Args:
        request: Validated digest request
        videos: Video records from the details lookup
        sample_count: Number of search results
        year: Year used in copy and hashtags (defaults to the current year)

    Returns:
        Dictionary matching DigestResponse
    """
    year = year or datetime.now().year
    limit = settings.MAX_HASHTAGS_PER_CHANNEL

    ranked = rank_tags(collect_tags(videos))
    hashtags_a, hashtags_b = distribute_hashtags(
        ranked, settings.CHANNEL_A_HASHTAG, settings.CHANNEL_B_HASHTAG, limit
    )
    backfill_hashtags(
        hashtags_a,
        hashtags_b,
        derived_hashtags(request.brand, request.campaign, year),
        limit,
    )

    copy = build_channel_copy(request.brand, request.campaign, request.summary, year)

    return {
        "brand": request.brand,
        "campaign": request.campaign,
        "summary": request.summary,
        "country": request.country,
        "channelA": {**copy["channel_a"], "hashtags": hashtags_a[:limit]},
        "channelB": {**copy["channel_b"], "hashtags": hashtags_b[:limit]},
        "tags": build_studio_tags(request.brand, request.campaign, request.summary, year),
        "bestHours": best_hours(collect_publish_hours(videos)),
        "sampleCount": sample_count,
    }


def generate_trend_digest(request: DigestRequest, year: Optional[int] = None) -> Dict[str, Any]:
    """Sample YouTube for the request and build its digest."""
    sample = sample_videos(request.search_query, request.max_results, request.country)
    logger.info(
        "Building digest for brand=%s campaign=%s (%d results, %d videos)",
        request.brand, request.campaign, sample["sample_count"], len(sample["videos"]),
    )
    return build_digest(request, sample["videos"], sample["sample_count"], year=year)
