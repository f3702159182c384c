"""Shared test configuration and fixtures."""

from __future__ import annotations

import itertools
import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path so `bookswipe` resolves without an install
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from bookswipe.domain import Action, Book, Interaction  # noqa: E402

_ids = itertools.count(1)


def make_book(**overrides) -> Book:
    fields = {
        "id": f"book-{next(_ids)}",
        "title": "Untitled",
        "author": "",
        "description": "",
        "genres": (),
        "published_year": None,
    }
    fields.update(overrides)
    return Book(**fields)


def make_interaction(book: Book, action: Action | str, timestamp: int) -> Interaction:
    return Interaction(book_id=book.id, action=action, timestamp=timestamp, book=book)


def book_payload(book: Book) -> dict:
    return {
        "id": book.id,
        "title": book.title,
        "author": book.author,
        "description": book.description,
        "genres": list(book.genres),
        "published_year": book.published_year,
    }


def interaction_payload(interaction: Interaction) -> dict:
    action = interaction.action
    return {
        "book_id": interaction.book_id,
        "action": action.value if isinstance(action, Action) else action,
        "timestamp": interaction.timestamp,
        "book": book_payload(interaction.book),
    }


@pytest.fixture
def fantasy_book() -> Book:
    return make_book(
        title="The Hobbit",
        author="J.R.R. Tolkien",
        description="x" * 400,
        genres=("Fantasy", "Adventure"),
        published_year=1937,
    )


@pytest.fixture
def fantasy_log(fantasy_book) -> list[Interaction]:
    """Favorite + like on fantasy, dislike on romance (three interactions)."""
    liked = make_book(
        title="The Fellowship of the Ring",
        author="J.R.R. Tolkien",
        description="y" * 450,
        genres=("Fantasy",),
        published_year=1954,
    )
    disliked = make_book(
        title="Pride and Prejudice",
        author="Jane Austen",
        description="z" * 1200,
        genres=("Romance",),
        published_year=1813,
    )
    return [
        make_interaction(fantasy_book, Action.FAVORITE, 100),
        make_interaction(liked, Action.LIKE, 50),
        make_interaction(disliked, Action.DISLIKE, 10),
    ]
