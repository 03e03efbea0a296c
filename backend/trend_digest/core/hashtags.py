"""
Hashtag helpers - normalization, ranking and per-channel distribution.
"""
import re
import unicodedata
from collections import Counter
from typing import Iterable, List, Tuple

# Anything that is not an ASCII word char, '#', whitespace, '-' or a Spanish accented letter
_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_#\sáéíóúüñ\-]")
_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_NON_ALNUM = re.compile(r"[^A-Za-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_tag(tag: str) -> str:
    """Lower-case a tag and strip it down to the allowed character set."""
    return _DISALLOWED_CHARS.sub("", str(tag).lower()).strip()


def to_hashtag(text: str) -> str:
    """
    Turn free text into a '#tag'.

    Accents are folded, anything outside [a-z0-9] is dropped and whitespace is
    removed. Case is preserved.
    """
    if text.startswith("#"):
        text = text[1:]
    folded = _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))
    folded = _NON_ALNUM.sub("", folded).strip()
    return "#" + _WHITESPACE.sub("", folded)


def rank_tags(tags: Iterable[str]) -> List[str]:
    """
    Normalize tags and order them by descending frequency.

    Ties keep the order in which the tags were first seen.
    """
    frequency = Counter(t for t in (normalize_tag(tag) for tag in tags) if t)
    return [tag for tag, _ in frequency.most_common()]


def distribute_hashtags(
    ranked_tags: Iterable[str],
    fixed_a: str,
    fixed_b: str,
    limit: int = 7,
) -> Tuple[List[str], List[str]]:
    """
    Greedily spread ranked tags over two channel lists.

    Each list starts with its fixed hashtag. A tag goes to the shorter list
    (A on ties) while there is room, duplicates and the fixed hashtags are
    skipped, and neither list grows past ``limit``.
    """
    result_a = [fixed_a]
    result_b = [fixed_b]

    for tag in ranked_tags:
        if len(result_a) >= limit and len(result_b) >= limit:
            break
        hashtag = tag if tag.startswith("#") else to_hashtag(tag)
        if hashtag == "#":
            continue
        if hashtag in result_a or hashtag in result_b or hashtag in (fixed_a, fixed_b):
            continue
        if len(result_a) <= len(result_b) and len(result_a) < limit:
            result_a.append(hashtag)
        elif len(result_b) < limit:
            result_b.append(hashtag)
        elif len(result_a) < limit:
            result_a.append(hashtag)

    return result_a, result_b


def derived_hashtags(brand: str, campaign: str, year: int) -> List[str]:
    """Brand/campaign/year hashtags used to top up short lists."""
    return [
        to_hashtag(f"catalogo {brand}"),
        to_hashtag(f"{brand} {campaign}"),
        to_hashtag(f"{brand} {year}"),
        to_hashtag(f"{brand} mexico"),
    ]


def backfill_hashtags(
    result_a: List[str],
    result_b: List[str],
    candidates: Iterable[str],
    limit: int = 7,
) -> Tuple[List[str], List[str]]:
    """
    Top up both lists with candidate hashtags.

    A candidate goes to A when A has room and lacks it, and to B only when B
    has room and neither list holds it yet. The lists are updated in place.
    """
    for candidate in candidates:
        if candidate == "#":
            continue
        if len(result_a) < limit and candidate not in result_a:
            result_a.append(candidate)
        if len(result_b) < limit and candidate not in result_b and candidate not in result_a:
            result_b.append(candidate)
    return result_a, result_b
