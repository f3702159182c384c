"""
Profile builder: folds a user's interaction log into weighted taste preferences.

Each interaction is weighted by its action (favorite > read > like > skip > dislike)
and by its rank in the log: the most recent interaction counts fully, every
older one is decayed by RECENCY_DECAY per position.
"""

from __future__ import annotations

from typing import Iterable, Optional

import structlog

from bookswipe.domain import Action, Book, Interaction, UserProfile

logger = structlog.get_logger()

RECENCY_DECAY = 0.95

ACTION_WEIGHTS: dict[str, float] = {
    Action.FAVORITE.value: 2.0,
    Action.READ.value: 1.5,
    Action.LIKE.value: 1.0,
    Action.SKIP.value: -0.3,
    Action.DISLIKE.value: -1.0,
}


def action_weight(action: Action | str) -> float:
    """Weight of a user action; unknown actions contribute nothing."""
    key = action.value if isinstance(action, Action) else action
    return ACTION_WEIGHTS.get(key, 0.0)


def decade_label(year: Optional[int]) -> Optional[str]:
    if not year:
        return None
    return f"{(year // 10) * 10}s"


def length_bucket(description: Optional[str]) -> Optional[str]:
    """Bucket a description by character count, used as a proxy for book length."""
    if not description:
        return None
    n = len(description)
    if n < 300:
        return "short"
    if n < 600:
        return "medium"
    if n < 1000:
        return "long"
    return "very-long"


def _accumulate(prefs: dict[str, float], key: Optional[str], weight: float) -> None:
    if key:
        prefs[key] = prefs.get(key, 0.0) + weight


def build_user_profile(
    interactions: Iterable[Interaction],
    *,
    recency_decay: float = RECENCY_DECAY,
) -> UserProfile:
    """Build a fresh UserProfile from an interaction log."""
    history = list(interactions)
    profile = UserProfile(interaction_history=history)

    # Most recent first; sorted() is stable so equal timestamps keep log order
    ordered = sorted(history, key=lambda i: i.timestamp, reverse=True)

    for index, interaction in enumerate(ordered):
        recency_weight = recency_decay**index
        weight = action_weight(interaction.action)
        final_weight = recency_weight * weight
        book = interaction.book

        for genre in book.genres:
            _accumulate(profile.genre_preferences, genre, final_weight)
        _accumulate(profile.author_preferences, book.author, final_weight)
        _accumulate(profile.year_preferences, decade_label(book.published_year), final_weight)
        _accumulate(profile.length_preferences, length_bucket(book.description), final_weight)

        if weight > 0:
            profile.liked_books.append(book)
        elif weight < 0:
            profile.disliked_books.append(book)

    logger.debug(
        "profile_built",
        n_interactions=len(history),
        n_liked=len(profile.liked_books),
        n_disliked=len(profile.disliked_books),
        n_genres=len(profile.genre_preferences),
    )
    return profile


def update_profile_with_interaction(
    profile: UserProfile,
    interaction: Interaction,
    *,
    recency_decay: float = RECENCY_DECAY,
) -> UserProfile:
    """Return a new profile rebuilt with one more interaction appended to the log."""
    return build_user_profile(
        [*profile.interaction_history, interaction],
        recency_decay=recency_decay,
    )


def convert_swipes_to_interactions(
    swipes: Iterable[dict],
    books: Iterable[Book],
) -> list[Interaction]:
    """
    Turn raw swipe records ({book_id, liked, timestamp}) into like/dislike interactions.
    Swipes on books missing from `books` are dropped.
    """
    book_map = {book.id: book for book in books}

    interactions = []
    for swipe in swipes:
        book = book_map.get(swipe["book_id"])
        if book is None:
            continue
        interactions.append(
            Interaction(
                book_id=swipe["book_id"],
                action=Action.LIKE if swipe["liked"] else Action.DISLIKE,
                timestamp=swipe["timestamp"],
                book=book,
            )
        )
    return interactions
