"""
Creative Builder - Templates channel titles, descriptions and studio tags.
"""
from typing import Dict, List

from trend_digest.config.settings import settings


def campaign_label(brand: str, campaign: str, year: int) -> str:
    """Brand, campaign and year joined by single spaces (empty campaign skipped)."""
    return " ".join(part for part in (brand, campaign, str(year)) if part)


def parse_keywords(summary: str) -> List[str]:
    """Split a comma-separated summary into trimmed, non-empty keywords."""
    if not summary:
        return []
    return [kw.strip() for kw in summary.split(",") if kw.strip()]


def build_channel_copy(brand: str, campaign: str, summary: str, year: int) -> Dict[str, Dict[str, str]]:
    """
    Build name, title and description for both channels.

    Returns:
        Dictionary with "channel_a" and "channel_b" entries
    """
    label = campaign_label(brand, campaign, year)
    intro = f"{summary}\n\n" if summary else ""

    return {
        "channel_a": {
            "name": settings.CHANNEL_A_NAME,
            "title": f"{label} | Ofertas y Novedades - Vende Más",
            "description": (
                f"{intro}Descubre lo nuevo de {label}. Ideal para vendedores por catálogo. "
                f"📲 Descarga la app y comparte. {settings.CHANNEL_A_HASHTAG}"
            ),
        },
        "channel_b": {
            "name": settings.CHANNEL_B_NAME,
            "title": f"{label} | Catálogo Virtual LATAM",
            "description": (
                f"{intro}Explora el catálogo virtual de {label} para toda LATAM. "
                f"{settings.CHANNEL_B_HASHTAG}"
            ),
        },
    }


def build_studio_tags(brand: str, campaign: str, summary: str, year: int) -> List[str]:
    """Generic marketing tags, extended with one tag per summary keyword."""
    tags = [
        f"catalogo {campaign_label(brand, campaign, year)}",
        f"{brand} {year}",
        f"{brand} mexico",
        f"ofertas {brand}",
    ]
    tags.extend(f"{keyword} {brand}" for keyword in parse_keywords(summary))
    return tags
