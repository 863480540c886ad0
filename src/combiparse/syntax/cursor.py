"""Immutable cursor infrastructure for combinator matching.

Implements the immutable cursor pattern threaded through every matcher.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Every advance() returns NEW cursor, backtracking is just reusing the old one
    - Reading past the end yields "no characters", never an exception
    - A successful match is a MatchResult; a non-match is None

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

__all__ = ["Cursor", "MatchResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable input position.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (one cursor per successful step)
        3. Simple position - Just an integer offset, no bounds enforcement
        4. Equality is structural - same source and same pos

    The source string is shared by reference between cursors, so advancing
    never copies the input.

    Example:
        >>> cursor = Cursor("hello")
        >>> cursor.peek(2)
        'he'
        >>> cursor.advance(2).peek(3)
        'llo'
        >>> cursor.pos  # Original unchanged (immutability)
        0
        >>> Cursor("hi", 5).peek(1)  # Past the end
        ''
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """Check if at (or beyond) end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def remaining(self) -> int:
        """Number of characters left to read (never negative)."""
        return max(0, len(self.source) - self.pos)

    def peek(self, n: int) -> str:
        """Get the next n characters without advancing.

        Args:
            n: Number of characters to read

        Returns:
            Exactly n characters starting at the current position, or ""
            if fewer than n characters remain.

        Note:
            All or nothing, unlike a plain slice: a short read at the end
            of input returns "" so that it can never equal a literal.

        Example:
            >>> cursor = Cursor("hello", 3)
            >>> cursor.peek(2)
            'lo'
            >>> cursor.peek(3)  # Only 2 characters left
            ''
        """
        if self.pos + n > len(self.source):
            return ""
        return self.source[self.pos : self.pos + n]

    def advance(self, n: int = 1) -> "Cursor":
        """Return new cursor advanced by n positions.

        Args:
            n: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at pos + n (original unchanged)

        Note:
            No bounds check and no clamping. Matchers only advance by the
            length of something they have just peeked.

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor2 = cursor.advance()
            >>> cursor.pos  # Original unchanged
            0
            >>> cursor2.pos  # New cursor advanced
            1
        """
        return Cursor(self.source, self.pos + n)


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Successful match: matched fragments and the cursor after them.

    Design:
        - Frozen for immutability
        - Fragments are flattened and in input order, one per terminal match
        - Matchers return MatchResult | None; None is the non-match

    Example:
        >>> result = MatchResult(("5", " ", "cookie"), Cursor("5 cookie", 8))
        >>> result.text
        '5 cookie'
        >>> result.cursor.is_eof
        True
    """

    fragments: tuple[str, ...]
    cursor: Cursor

    @property
    def text(self) -> str:
        """All fragments concatenated."""
        return "".join(self.fragments)
