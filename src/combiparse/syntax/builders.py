"""Shorthand builders and top-level entry points.

Builders keep grammar definitions readable:

    >>> number = many1(char("0-9"))
    >>> greeting = seq(alt(lit("hi"), lit("hello")), char(" "), number)
    >>> parse(greeting, "hello 42").fragments
    ('hello', ' ', '4', '2')

parse() and fullmatch() are the sanctioned way to start a match: they build
the initial cursor at offset 0.
"""

from .cursor import Cursor, MatchResult
from .matchers import Alternation, CharClass, Literal, Matcher, Repetition, Sequence

__all__ = [
    "alt",
    "char",
    "fullmatch",
    "lit",
    "many",
    "many1",
    "parse",
    "rep",
    "seq",
]


def lit(text: str) -> Literal:
    """Exact string matcher."""
    return Literal(text)


def char(pattern: str) -> CharClass:
    """Single-character class matcher. Raises ClassPatternError if invalid."""
    return CharClass(pattern)


def seq(*items: Matcher) -> Sequence:
    """Match all items back to back."""
    return Sequence(items)


def alt(*choices: Matcher) -> Alternation:
    """Match the first choice that succeeds."""
    return Alternation(choices)


def rep(item: Matcher, min_count: int = 0) -> Repetition:
    """Match item greedily, at least min_count times."""
    return Repetition(item, min_count)


def many(item: Matcher) -> Repetition:
    """Zero or more repetitions."""
    return Repetition(item, 0)


def many1(item: Matcher) -> Repetition:
    """One or more repetitions."""
    return Repetition(item, 1)


def parse(matcher: Matcher, text: str) -> MatchResult | None:
    """Match at the start of text.

    A prefix match: input left over after the match is not an error.

    Args:
        matcher: Root of the matcher tree
        text: Input to match

    Returns:
        MatchResult on success, None if the input does not match at offset 0

    Example:
        >>> parse(lit("hello"), "hellofoobar").cursor.pos
        5
    """
    return matcher.match(Cursor(text))


def fullmatch(matcher: Matcher, text: str) -> MatchResult | None:
    """Match the whole of text.

    Returns:
        MatchResult if the matcher consumed all of text, None otherwise

    Example:
        >>> fullmatch(lit("hello"), "hellofoobar") is None
        True
    """
    result = parse(matcher, text)
    if result is None or not result.cursor.is_eof:
        return None
    return result
