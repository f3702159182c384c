"""
Conversion of Google Books volume records into engine Books.

Volumes without an id, a title or at least one author are rejected (None), as
are volumes whose description does not read as English text.
"""

from __future__ import annotations

import html
import re
from typing import Any, Optional

import structlog

from bookswipe.domain import Book

logger = structlog.get_logger()

DEFAULT_GENRES = ("Fiction",)

# Sampled prefix must be plain ASCII prose
ENGLISH_SAMPLE_LENGTH = 100
COMMON_ENGLISH_WORDS = frozenset({"the", "and", "in", "of", "to", "a"})

_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")
_YEAR_RE = re.compile(r"^(\d{4})")
_ENGLISH_RE = re.compile(r"^[A-Za-z0-9\s.,!?'\"\-:;()&]+$")


def clean_description(raw: Optional[str]) -> str:
    if not raw:
        return ""
    text = html.unescape(_TAG_RE.sub(" ", raw))
    return _WS_RE.sub(" ", text).strip()


def is_english_text(text: str) -> bool:
    """Cheap heuristic: ASCII prose prefix plus at least one common English word."""
    if not _ENGLISH_RE.match(text[:ENGLISH_SAMPLE_LENGTH]):
        return False
    return not COMMON_ENGLISH_WORDS.isdisjoint(text.lower().split())


def parse_published_year(published_date: Optional[str], default_year: int) -> int:
    """Google dates come as YYYY, YYYY-MM or YYYY-MM-DD."""
    match = _YEAR_RE.match(published_date or "")
    return int(match.group(1)) if match else default_year


def convert_google_volume(volume: dict[str, Any], default_year: int) -> Optional[Book]:
    info = volume.get("volumeInfo") or {}
    authors = info.get("authors") or []
    if not volume.get("id") or not info.get("title") or not authors:
        logger.debug("google_volume_skipped", volume_id=volume.get("id"), reason="incomplete")
        return None

    description = clean_description(info.get("description"))
    if not is_english_text(description):
        logger.debug("google_volume_skipped", volume_id=volume["id"], reason="not_english")
        return None

    image_links = info.get("imageLinks") or {}
    isbn = next(
        (
            ident.get("identifier")
            for ident in info.get("industryIdentifiers") or []
            if ident.get("type") == "ISBN_13"
        ),
        None,
    )

    return Book(
        id=volume["id"],
        title=info["title"],
        author=authors[0],
        description=description,
        genres=tuple(info.get("categories") or DEFAULT_GENRES),
        published_year=parse_published_year(info.get("publishedDate"), default_year),
        cover_url=image_links.get("thumbnail"),
        rating=info.get("averageRating"),
        isbn=isbn,
    )
