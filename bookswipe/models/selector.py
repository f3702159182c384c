"""
Recommendation selector: ranks a candidate pool for a user.

Falls back to cold-start exploration when the interaction history is shorter
than MIN_INTERACTIONS.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional

import structlog

from bookswipe.cold_start import RandomSource, explore
from bookswipe.domain import Book, BookScore, UserProfile
from bookswipe.models.scorer import score_book

logger = structlog.get_logger()

MIN_INTERACTIONS = 3
DEFAULT_LIMIT = 20


def is_cold_start(profile: UserProfile, min_interactions: int = MIN_INTERACTIONS) -> bool:
    return len(profile.interaction_history) < min_interactions


def get_personalized_recommendations(
    candidates: Iterable[Book],
    profile: UserProfile,
    limit: int = DEFAULT_LIMIT,
    *,
    min_interactions: int = MIN_INTERACTIONS,
    rng: Optional[RandomSource] = None,
) -> list[BookScore]:
    """
    Return up to `limit` BookScores, best first.

    Previously seen books (sentinel score -1) are excluded. Ties keep the
    candidates' input order.
    """
    candidates = list(candidates)

    if is_cold_start(profile, min_interactions):
        logger.debug(
            "cold_start_exploration",
            n_interactions=len(profile.interaction_history),
            n_candidates=len(candidates),
        )
        return explore(candidates, limit, rng or random.Random())

    scored = [score_book(book, profile) for book in candidates]
    scored = [s for s in scored if s.score >= 0]

    # reverse=True keeps equal scores in input order
    scored.sort(key=lambda s: s.score, reverse=True)

    logger.debug(
        "recommendations_ranked",
        n_candidates=len(candidates),
        n_scored=len(scored),
        limit=limit,
    )
    return scored[: max(limit, 0)]
