"""Book schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from bookswipe.domain import Book


class BookIn(BaseModel):
    id: str = Field(..., min_length=1)
    title: str = ""
    author: str = ""
    description: str = ""
    genres: list[str] = []
    published_year: Optional[int] = Field(None, ge=0, le=2100)
    cover_url: Optional[str] = None
    rating: Optional[float] = None
    isbn: Optional[str] = Field(None, max_length=20)

    def to_domain(self) -> Book:
        return Book(
            id=self.id,
            title=self.title,
            author=self.author,
            description=self.description,
            genres=tuple(self.genres),
            published_year=self.published_year,
            cover_url=self.cover_url,
            rating=self.rating,
            isbn=self.isbn,
        )


class BookOut(BaseModel):
    id: str
    title: str
    author: str
    genres: list[str]
    published_year: Optional[int]
    cover_url: Optional[str] = None

    @classmethod
    def from_domain(cls, book: Book) -> "BookOut":
        return cls(
            id=book.id,
            title=book.title,
            author=book.author,
            genres=list(book.genres),
            published_year=book.published_year,
            cover_url=book.cover_url,
        )
