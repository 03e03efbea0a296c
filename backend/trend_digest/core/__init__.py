"""
Core modules for the Trend Digest
"""
from .hashtags import normalize_tag, to_hashtag, rank_tags, distribute_hashtags
from .creative_builder import build_channel_copy, build_studio_tags
from .trend_digest import build_digest, generate_trend_digest

__all__ = [
    'normalize_tag',
    'to_hashtag',
    'rank_tags',
    'distribute_hashtags',
    'build_channel_copy',
    'build_studio_tags',
    'build_digest',
    'generate_trend_digest',
]
