"""
Cold-start handling for users with too little history to personalize.

Candidates are served in their incoming order with a random exploration score.
The random source is injected so callers (and tests) control it.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional, Protocol

from bookswipe.domain import Book, BookScore

EXPLORATION_REASON = "Exploring new content"


class RandomSource(Protocol):
    def random(self) -> float: ...


def explore(candidates: Iterable[Book], limit: int, rng: RandomSource) -> list[BookScore]:
    """Wrap the first `limit` candidates as unpersonalized exploration picks."""
    picks = list(candidates)[: max(limit, 0)]
    return [BookScore(book=book, score=rng.random(), reasons=[EXPLORATION_REASON]) for book in picks]


class ColdStartHandler:
    """Owns the random source handed to the selector for exploration picks."""

    def __init__(self, seed: Optional[int] = None):
        self.rng: RandomSource = random.Random(seed)
