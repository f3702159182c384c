"""Recommendation request and response schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from bookswipe.domain import BookScore, UserProfile
from bookswipe.schemas.book import BookIn, BookOut
from bookswipe.schemas.interaction import InteractionIn


class ProfileRequest(BaseModel):
    interactions: list[InteractionIn] = []


class TopRequest(BaseModel):
    interactions: list[InteractionIn] = []
    candidates: list[BookIn] = []
    limit: Optional[int] = Field(None, ge=1)


class ScoreRequest(BaseModel):
    interactions: list[InteractionIn] = []
    book: BookIn


class SimilarRequest(BaseModel):
    book: BookIn
    candidates: list[BookIn] = []
    limit: int = Field(10, ge=1, le=50)


class ScoredBook(BaseModel):
    book: BookOut
    score: float
    reasons: list[str]

    @classmethod
    def from_domain(cls, scored: BookScore) -> "ScoredBook":
        return cls(
            book=BookOut.from_domain(scored.book),
            score=scored.score,
            reasons=list(scored.reasons),
        )


class RecommendationResponse(BaseModel):
    recommendations: list[ScoredBook]
    strategy: str  # "personalized" | "cold_start"


class SimilarBooksResponse(BaseModel):
    book_id: str
    similar_books: list[ScoredBook]


class ProfileResponse(BaseModel):
    genre_preferences: dict[str, float]
    author_preferences: dict[str, float]
    year_preferences: dict[str, float]
    length_preferences: dict[str, float]
    liked_book_ids: list[str]
    disliked_book_ids: list[str]
    interaction_count: int

    @classmethod
    def from_domain(cls, profile: UserProfile) -> "ProfileResponse":
        return cls(
            genre_preferences=profile.genre_preferences,
            author_preferences=profile.author_preferences,
            year_preferences=profile.year_preferences,
            length_preferences=profile.length_preferences,
            liked_book_ids=[b.id for b in profile.liked_books],
            disliked_book_ids=[b.id for b in profile.disliked_books],
            interaction_count=len(profile.interaction_history),
        )
