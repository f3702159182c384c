"""Swipe-driven book recommendation engine."""

from bookswipe.domain import Action, Book, BookScore, Interaction, MalformedBookError, UserProfile
from bookswipe.google_books import convert_google_volume
from bookswipe.models.profile import (
    build_user_profile,
    convert_swipes_to_interactions,
    update_profile_with_interaction,
)
from bookswipe.models.scorer import score_book
from bookswipe.models.selector import get_personalized_recommendations
from bookswipe.models.similarity import book_similarity, get_similar_books

__all__ = [
    "Action",
    "Book",
    "BookScore",
    "Interaction",
    "MalformedBookError",
    "UserProfile",
    "book_similarity",
    "build_user_profile",
    "convert_google_volume",
    "convert_swipes_to_interactions",
    "get_personalized_recommendations",
    "get_similar_books",
    "score_book",
    "update_profile_with_interaction",
]
