"""
Core records shared by the recommendation engine.

Books arrive from the metadata source, interactions from the swipe UI.
Everything downstream (profile, scores) is derived from these and never
mutated in place.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional


class MalformedBookError(ValueError):
    """Raised when a book record is missing a required field such as its id."""


class Action(str, enum.Enum):
    LIKE = "like"
    DISLIKE = "dislike"
    FAVORITE = "favorite"
    READ = "read"
    SKIP = "skip"


@dataclass(frozen=True)
class Book:
    id: str
    title: str = ""
    author: str = ""
    description: str = ""
    genres: tuple[str, ...] = ()
    published_year: Optional[int] = None
    cover_url: Optional[str] = None
    rating: Optional[float] = None
    isbn: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise MalformedBookError(f"book is missing an id (title={self.title!r})")
        # Ordered set: keep first occurrence of each genre
        object.__setattr__(self, "genres", tuple(dict.fromkeys(self.genres or ())))


@dataclass(frozen=True)
class Interaction:
    book_id: str
    action: Action | str
    timestamp: int  # epoch ms
    book: Book


@dataclass
class UserProfile:
    genre_preferences: dict[str, float] = field(default_factory=dict)
    author_preferences: dict[str, float] = field(default_factory=dict)
    year_preferences: dict[str, float] = field(default_factory=dict)
    length_preferences: dict[str, float] = field(default_factory=dict)
    liked_books: list[Book] = field(default_factory=list)
    disliked_books: list[Book] = field(default_factory=list)
    interaction_history: list[Interaction] = field(default_factory=list)

    @property
    def seen_book_ids(self) -> set[str]:
        return {i.book_id for i in self.interaction_history}


@dataclass
class BookScore:
    book: Book
    score: float
    reasons: list[str] = field(default_factory=list)
