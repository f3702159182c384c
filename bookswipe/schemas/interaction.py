"""Interaction schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from bookswipe.domain import Action, Interaction
from bookswipe.schemas.book import BookIn


class InteractionIn(BaseModel):
    book_id: Optional[str] = Field(None, min_length=1)  # defaults to book.id
    action: Action
    timestamp: int = Field(..., ge=0)  # epoch ms
    book: BookIn

    def to_domain(self) -> Interaction:
        return Interaction(
            book_id=self.book_id or self.book.id,
            action=self.action,
            timestamp=self.timestamp,
            book=self.book.to_domain(),
        )
