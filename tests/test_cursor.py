"""Tests for cursor infrastructure.

Validates the immutable cursor threaded through every matcher.
"""

from __future__ import annotations

import pytest

from combiparse.syntax.cursor import Cursor, MatchResult

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_create_cursor(self) -> None:
        """Initial cursor starts at position 0."""
        cursor = Cursor("hello")

        assert cursor.source == "hello"
        assert cursor.pos == 0
        assert not cursor.is_eof

    def test_create_cursor_at_offset(self) -> None:
        """Arbitrary offsets are accepted."""
        cursor = Cursor("hello", 2)

        assert cursor.pos == 2
        assert cursor.peek(1) == "l"

    def test_create_cursor_beyond_end(self) -> None:
        """Offsets past the end are not rejected."""
        cursor = Cursor("hello", 10)

        assert cursor.pos == 10
        assert cursor.is_eof

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("hello", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_equality_is_structural(self) -> None:
        """Cursors are equal iff source and position are equal."""
        assert Cursor("abc", 1) == Cursor("abc", 1)
        assert Cursor("abc", 1) != Cursor("abc", 2)
        assert Cursor("abc", 1) != Cursor("abd", 1)

    def test_hashable(self) -> None:
        """Equal cursors hash equal."""
        assert hash(Cursor("abc", 1)) == hash(Cursor("abc", 1))


# ============================================================================
# PEEK
# ============================================================================


class TestCursorPeek:
    """Test peek operations."""

    def test_peek_returns_n_characters(self) -> None:
        """peek(n) returns the next n characters."""
        cursor = Cursor("hellofoobar", 0)

        assert cursor.peek(5) == "hello"

    def test_peek_from_middle(self) -> None:
        """peek reads from the current position."""
        cursor = Cursor("hellofoobar", 5)

        assert cursor.peek(3) == "foo"

    def test_peek_exactly_to_end(self) -> None:
        """peek may read up to the last character."""
        cursor = Cursor("hello", 3)

        assert cursor.peek(2) == "lo"

    def test_peek_short_read_returns_empty(self) -> None:
        """Fewer than n characters left yields "" rather than a partial read."""
        cursor = Cursor("hello", 3)

        assert cursor.peek(3) == ""

    def test_peek_at_eof(self) -> None:
        """peek at end of input yields ""."""
        cursor = Cursor("hello", 5)

        assert cursor.peek(1) == ""

    def test_peek_beyond_end(self) -> None:
        """peek past the end never raises."""
        cursor = Cursor("hello", 100)

        assert cursor.peek(1) == ""
        assert cursor.peek(0) == ""

    def test_peek_zero(self) -> None:
        """peek(0) is the empty string."""
        assert Cursor("hello", 2).peek(0) == ""

    def test_peek_empty_source(self) -> None:
        """Empty source has nothing to peek."""
        assert Cursor("").peek(1) == ""

    def test_peek_is_idempotent(self) -> None:
        """Repeated peeks without advancing agree."""
        cursor = Cursor("hello", 1)

        assert cursor.peek(3) == cursor.peek(3)
        assert cursor.pos == 1

    def test_peek_unicode(self) -> None:
        """peek counts characters, not bytes."""
        cursor = Cursor("привет 👋", 6)

        assert cursor.peek(2) == " 👋"


# ============================================================================
# ADVANCE
# ============================================================================


class TestCursorAdvance:
    """Test cursor advancement."""

    def test_advance_default_is_one(self) -> None:
        """advance() moves by one position."""
        assert Cursor("hello").advance().pos == 1

    def test_advance_by_n(self) -> None:
        """advance(n) moves by n positions."""
        assert Cursor("hello").advance(3).pos == 3

    def test_advance_returns_new_cursor(self) -> None:
        """advance leaves the original cursor untouched."""
        cursor = Cursor("hello", 1)
        moved = cursor.advance(2)

        assert cursor.pos == 1
        assert moved.pos == 3
        assert moved.source is cursor.source

    def test_advance_does_not_clamp(self) -> None:
        """advance performs no bounds check."""
        cursor = Cursor("hi", 1).advance(5)

        assert cursor.pos == 6
        assert cursor.peek(1) == ""

    def test_advance_zero(self) -> None:
        """advance(0) yields an equal cursor."""
        cursor = Cursor("hi", 1)

        assert cursor.advance(0) == cursor


# ============================================================================
# EOF AND REMAINING
# ============================================================================


class TestCursorEOF:
    """Test EOF detection and remaining length."""

    def test_is_eof_at_end(self) -> None:
        """is_eof is True at end of source."""
        assert Cursor("hello", 5).is_eof

    def test_is_eof_empty_source(self) -> None:
        """is_eof is True for empty source at position 0."""
        assert Cursor("").is_eof

    def test_remaining(self) -> None:
        """remaining counts characters left."""
        assert Cursor("hello", 2).remaining == 3

    def test_remaining_never_negative(self) -> None:
        """remaining is 0 past the end."""
        assert Cursor("hello", 9).remaining == 0


# ============================================================================
# MATCH RESULT
# ============================================================================


class TestMatchResult:
    """Test MatchResult value object."""

    def test_fields(self) -> None:
        """MatchResult carries fragments and cursor."""
        cursor = Cursor("5 cookie", 8)
        result = MatchResult(("5", " ", "cookie"), cursor)

        assert result.fragments == ("5", " ", "cookie")
        assert result.cursor is cursor

    def test_text_joins_fragments(self) -> None:
        """text concatenates fragments."""
        result = MatchResult(("5", " ", "cookie"), Cursor("5 cookie", 8))

        assert result.text == "5 cookie"

    def test_text_of_empty_match(self) -> None:
        """An empty match has empty text."""
        assert MatchResult((), Cursor("abc")).text == ""

    def test_immutability(self) -> None:
        """MatchResult is frozen."""
        result = MatchResult(("a",), Cursor("a", 1))

        with pytest.raises(AttributeError):
            result.fragments = ()  # type: ignore[misc]

    def test_equality(self) -> None:
        """MatchResults compare by value."""
        assert MatchResult(("a",), Cursor("a", 1)) == MatchResult(("a",), Cursor("a", 1))
