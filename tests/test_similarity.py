"""Tests for book-to-book similarity."""

from __future__ import annotations

import pytest

from bookswipe.models.similarity import book_similarity, get_similar_books
from conftest import make_book


class TestBookSimilarity:
    def test_identical_attributes(self):
        attrs = dict(author="Ursula K. Le Guin", description="d" * 500,
                     genres=("Fantasy", "Classic"), published_year=1968)
        assert book_similarity(make_book(**attrs), make_book(**attrs)) == 1.0

    def test_nothing_in_common(self):
        a = make_book(author="A", description="a" * 100, genres=("Fantasy",), published_year=1950)
        b = make_book(author="B", description="b" * 1100, genres=("Romance",), published_year=1970)
        assert book_similarity(a, b) == 0.0

    def test_no_applicable_factors(self):
        assert book_similarity(make_book(), make_book()) == 0.0

    def test_different_author_is_skipped_not_zero(self):
        a = make_book(author="A", genres=("Fantasy",))
        b = make_book(author="B", genres=("Fantasy",))
        assert book_similarity(a, b) == 1.0

    def test_genre_jaccard(self):
        a = make_book(genres=("A", "B"))
        b = make_book(genres=("B", "C"))
        assert book_similarity(a, b) == pytest.approx(1 / 3)

    def test_year_proximity(self):
        a = make_book(published_year=2000)
        b = make_book(published_year=2010)
        assert book_similarity(a, b) == pytest.approx(0.5)

    def test_year_gap_beyond_span_floors_at_zero(self):
        a = make_book(published_year=1900)
        b = make_book(published_year=2000)
        assert book_similarity(a, b) == 0.0

    def test_description_length_proximity(self):
        a = make_book(description="a" * 200)
        b = make_book(description="b" * 450)
        assert book_similarity(a, b) == pytest.approx(0.75)

    def test_one_sided_attributes_ignored(self):
        a = make_book(genres=("Fantasy",), published_year=2000)
        b = make_book(genres=("Fantasy",))
        assert book_similarity(a, b) == 1.0

    def test_symmetric(self):
        a = make_book(author="X", genres=("A", "B"), published_year=1990, description="q" * 120)
        b = make_book(author="Y", genres=("B",), published_year=2001, description="r" * 800)
        assert book_similarity(a, b) == pytest.approx(book_similarity(b, a))
        assert 0.0 <= book_similarity(a, b) <= 1.0


class TestGetSimilarBooks:
    def test_ranks_and_excludes_self(self):
        base = make_book(title="Dune", genres=("Sci-Fi", "Classic"), published_year=1965)
        close = make_book(genres=("Sci-Fi", "Classic"), published_year=1966)
        far = make_book(genres=("Sci-Fi",), published_year=1990)
        unrelated = make_book(genres=("Cooking",), published_year=2020)

        results = get_similar_books(base, [far, base, unrelated, close])

        assert [r.book for r in results] == [close, far]
        assert results[0].reasons == ["Similar to Dune"]

    def test_limit(self):
        base = make_book(genres=("Sci-Fi",))
        candidates = [make_book(genres=("Sci-Fi",)) for _ in range(5)]
        results = get_similar_books(base, candidates, limit=2)
        assert [r.book for r in results] == candidates[:2]
