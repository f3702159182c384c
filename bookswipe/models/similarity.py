"""
Book-to-book similarity on metadata.

Averages up to four factors, each only counted when both books carry the attribute:
genre Jaccard overlap, exact author match, publication-year proximity (0 at a
20-year gap) and description-length proximity (0 at a 1000-character gap).
"""

from __future__ import annotations

from typing import Iterable

from bookswipe.domain import Book, BookScore

YEAR_SPAN = 20
DESCRIPTION_SPAN = 1000


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def book_similarity(a: Book, b: Book) -> float:
    """Similarity in [0, 1]; 0 when no factor applies."""
    total = 0.0
    factors = 0

    if a.genres and b.genres:
        genres_a, genres_b = set(a.genres), set(b.genres)
        total += _clamp(len(genres_a & genres_b) / len(genres_a | genres_b))
        factors += 1

    # A differing author is skipped, not counted as 0
    if a.author and a.author == b.author:
        total += 1.0
        factors += 1

    if a.published_year and b.published_year:
        year_diff = abs(a.published_year - b.published_year)
        total += _clamp(1 - year_diff / YEAR_SPAN)
        factors += 1

    if a.description and b.description:
        length_diff = abs(len(a.description) - len(b.description))
        total += _clamp(1 - length_diff / DESCRIPTION_SPAN)
        factors += 1

    return total / factors if factors else 0.0


def get_similar_books(book: Book, candidates: Iterable[Book], limit: int = 10) -> list[BookScore]:
    """Rank candidates by similarity to `book` ("more like this")."""
    results = []
    for candidate in candidates:
        if candidate.id == book.id:
            continue
        score = book_similarity(book, candidate)
        if score <= 0:
            continue
        results.append(BookScore(book=candidate, score=score, reasons=[f"Similar to {book.title}"]))

    results.sort(key=lambda r: r.score, reverse=True)
    return results[:limit]
