"""
Scores a single candidate book against a user profile.

The total is a weighted sum of profile lookups (genre, author, decade, length)
plus the best similarity to any liked book, minus a penalty when the book is
close to something the user disliked. Each component that fires adds a
human-readable reason.
"""

from __future__ import annotations

from bookswipe.domain import Book, BookScore, MalformedBookError, UserProfile
from bookswipe.models.profile import decade_label, length_bucket
from bookswipe.models.similarity import book_similarity

# Weight Definitions
W_GENRE = 0.30
W_AUTHOR = 0.20
W_YEAR = 0.15
W_LENGTH = 0.10
W_SIMILARITY = 0.25
W_DISLIKE_PENALTY = 0.5

REASON_THRESHOLD = 0.5
LIKED_SIMILARITY_THRESHOLD = 0.3
DISLIKED_SIMILARITY_THRESHOLD = 0.4

ALREADY_SEEN_SCORE = -1.0


def _max_similarity(book: Book, others: list[Book]) -> float:
    return max((book_similarity(book, other) for other in others), default=0.0)


def score_book(book: Book, profile: UserProfile) -> BookScore:
    """
    Score `book` for the user described by `profile`.

    Books already in the interaction history get the sentinel score -1 with the
    reason "Already seen" so the selector can drop them. Any other negative total
    is reported as 0.
    """
    if not getattr(book, "id", None):
        raise MalformedBookError("cannot score a book without an id")

    if book.id in profile.seen_book_ids:
        return BookScore(book=book, score=ALREADY_SEEN_SCORE, reasons=["Already seen"])

    reasons: list[str] = []
    total = 0.0

    genre_score = 0.0
    for genre in book.genres:
        preference = profile.genre_preferences.get(genre, 0.0)
        genre_score += preference
        if preference > REASON_THRESHOLD:
            reasons.append(f"You like {genre} books")
    total += genre_score * W_GENRE

    author_score = profile.author_preferences.get(book.author, 0.0) if book.author else 0.0
    if author_score:
        reasons.append(f"You've liked books by {book.author}")
    total += author_score * W_AUTHOR

    decade = decade_label(book.published_year)
    year_score = profile.year_preferences.get(decade, 0.0) if decade else 0.0
    if year_score > REASON_THRESHOLD:
        reasons.append(f"You enjoy books from the {decade}")
    total += year_score * W_YEAR

    bucket = length_bucket(book.description)
    length_score = profile.length_preferences.get(bucket, 0.0) if bucket else 0.0
    if length_score > REASON_THRESHOLD:
        reasons.append(f"You prefer {bucket} books")
    total += length_score * W_LENGTH

    liked_similarity = _max_similarity(book, profile.liked_books)
    if liked_similarity > LIKED_SIMILARITY_THRESHOLD:
        reasons.append("Similar to books you've liked")
    total += liked_similarity * W_SIMILARITY

    disliked_similarity = _max_similarity(book, profile.disliked_books)
    if disliked_similarity > DISLIKED_SIMILARITY_THRESHOLD:
        total -= disliked_similarity * W_DISLIKE_PENALTY
        # Wording kept for client compatibility although this is a penalty
        reasons.append("Different from books you disliked")

    return BookScore(book=book, score=max(0.0, total), reasons=reasons)
