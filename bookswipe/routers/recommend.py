"""
Recommendation engine internal API.

Stateless: every request carries the user's interaction log and the candidate
pool, so the engine never reads or writes a store.

Endpoints:
- POST /profile: aggregated taste profile for an interaction log
- POST /recommend/top: top-N for a user
- POST /recommend/score: score and reasons for a single book
- POST /recommend/similar: candidates most similar to a given book
"""

from __future__ import annotations

import time
from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends
from prometheus_client import Histogram

from bookswipe.cold_start import ColdStartHandler
from bookswipe.config import Settings, get_settings
from bookswipe.models.profile import build_user_profile
from bookswipe.models.scorer import score_book
from bookswipe.models.selector import get_personalized_recommendations, is_cold_start
from bookswipe.models.similarity import get_similar_books
from bookswipe.schemas.recommendation import (
    ProfileRequest,
    ProfileResponse,
    RecommendationResponse,
    ScoredBook,
    ScoreRequest,
    SimilarBooksResponse,
    SimilarRequest,
    TopRequest,
)

logger = structlog.get_logger()
router = APIRouter()

INFERENCE_LATENCY = Histogram(
    "recommendation_inference_seconds",
    "Time spent computing recommendations",
    ["strategy"],
)


@lru_cache()
def get_cold_start_handler() -> ColdStartHandler:
    return ColdStartHandler(seed=get_settings().cold_start_seed)


def _profile_for(request, settings: Settings):
    return build_user_profile(
        [i.to_domain() for i in request.interactions],
        recency_decay=settings.recency_decay,
    )


@router.post("/profile", response_model=ProfileResponse)
async def profile(request: ProfileRequest, settings: Settings = Depends(get_settings)):
    """Aggregate an interaction log into preference weights."""
    return ProfileResponse.from_domain(_profile_for(request, settings))


@router.post("/recommend/top", response_model=RecommendationResponse)
async def recommend_top(
    request: TopRequest,
    settings: Settings = Depends(get_settings),
    cold_start: ColdStartHandler = Depends(get_cold_start_handler),
):
    """Generate top-N recommendations from the supplied candidate pool."""
    start = time.time()

    user_profile = _profile_for(request, settings)
    limit = min(request.limit or settings.default_limit, settings.max_limit)
    strategy = "cold_start" if is_cold_start(user_profile, settings.min_interactions) else "personalized"

    results = get_personalized_recommendations(
        [c.to_domain() for c in request.candidates],
        user_profile,
        limit,
        min_interactions=settings.min_interactions,
        rng=cold_start.rng,
    )

    latency = time.time() - start
    INFERENCE_LATENCY.labels(strategy=strategy).observe(latency)
    logger.info(
        "recommendation_generated",
        n_interactions=len(request.interactions),
        n_candidates=len(request.candidates),
        n=len(results),
        strategy=strategy,
        latency_ms=round(latency * 1000, 2),
    )

    return RecommendationResponse(
        recommendations=[ScoredBook.from_domain(r) for r in results],
        strategy=strategy,
    )


@router.post("/recommend/score", response_model=ScoredBook)
async def recommend_score(request: ScoreRequest, settings: Settings = Depends(get_settings)):
    """Explain how a single book scores for the user."""
    scored = score_book(request.book.to_domain(), _profile_for(request, settings))
    return ScoredBook.from_domain(scored)


@router.post("/recommend/similar", response_model=SimilarBooksResponse)
async def recommend_similar(request: SimilarRequest):
    """Find candidates similar to a book."""
    start = time.time()

    results = get_similar_books(
        request.book.to_domain(),
        [c.to_domain() for c in request.candidates],
        request.limit,
    )

    INFERENCE_LATENCY.labels(strategy="similar").observe(time.time() - start)

    return SimilarBooksResponse(
        book_id=request.book.id,
        similar_books=[ScoredBook.from_domain(r) for r in results],
    )
