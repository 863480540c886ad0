"""Matcher contract and the built-in matcher kinds.

Every matcher implements one operation:

    match(cursor) -> MatchResult | None

A MatchResult carries the matched fragments (flattened, in input order) and
the cursor positioned right after the match. None means "no match at this
position"; it is an ordinary outcome, never an exception, and the caller's
cursor is still valid for trying something else.

Matcher kinds:
    Literal:     exact fixed string
    CharClass:   one character from a bracket-expression class
    Sequence:    children back to back, all or nothing
    Repetition:  greedy, unbounded, with a minimum count
    Alternation: first child that matches wins

All matchers are frozen dataclasses. A tree never changes after it is built,
so one tree can serve any number of concurrent matches, each with its own
cursor. Grammar defects (bad class pattern, repetition of something that can
match empty, over-deep trees) raise GrammarError subclasses from the
constructor.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field

from combiparse.core.depth_guard import check_grammar_depth
from combiparse.diagnostics import (
    ErrorTemplate,
    NullableRepetitionError,
    RepetitionCountError,
)

from .char_class import compile_char_class
from .cursor import Cursor, MatchResult

__all__ = [
    "Alternation",
    "CharClass",
    "Literal",
    "Matcher",
    "Repetition",
    "Sequence",
]

logger = logging.getLogger(__name__)


class Matcher(ABC):
    """Anything that can be matched against a Cursor.

    Subclass and implement match() to add a custom matcher kind. Custom
    matchers are assumed to consume input whenever they succeed; override
    nullable if that is not the case.
    """

    __slots__ = ()

    @abstractmethod
    def match(self, cursor: Cursor) -> MatchResult | None:
        """Match at the cursor position.

        Args:
            cursor: Position to match at (not modified)

        Returns:
            MatchResult on success, None if there is no match here
        """

    @property
    def nullable(self) -> bool:
        """True if this matcher can succeed without consuming input."""
        return False

    @property
    def depth(self) -> int:
        """Height of the matcher tree rooted here (terminals are 1)."""
        return 1


def _freeze_children(owner: str, children: Iterable[Matcher]) -> tuple[Matcher, ...]:
    """Turn a child iterable into a tuple, rejecting non-matchers."""
    frozen = tuple(children)
    for child in frozen:
        if not isinstance(child, Matcher):
            msg = f"{owner} children must be Matcher instances, got {type(child).__name__}"
            raise TypeError(msg)
    return frozen


def _describe(matcher: Matcher) -> str:
    """Short description of a matcher for diagnostics.

    Composite reprs recurse through the whole tree, so only terminals are
    shown in full.
    """
    if matcher.depth == 1:
        return repr(matcher)
    return f"{type(matcher).__name__} of depth {matcher.depth}"


def _composite_depth(children: tuple[Matcher, ...]) -> int:
    depth = 1 + max((child.depth for child in children), default=0)
    check_grammar_depth(depth)
    return depth


# ============================================================================
# TERMINALS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Literal(Matcher):
    """Exact, case-sensitive string.

    Example:
        >>> Literal("hello").match(Cursor("hellofoobar"))
        MatchResult(fragments=('hello',), cursor=Cursor(source='hellofoobar', pos=5))
        >>> Literal("hello").match(Cursor("hellfoobar")) is None
        True
    """

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            msg = f"Literal text must be str, got {type(self.text).__name__}"
            raise TypeError(msg)

    def match(self, cursor: Cursor) -> MatchResult | None:
        peeked = cursor.peek(len(self.text))
        if peeked != self.text:
            return None
        return MatchResult((peeked,), cursor.advance(len(self.text)))

    @property
    def nullable(self) -> bool:
        # The empty literal always succeeds in place.
        return not self.text


@dataclass(frozen=True, slots=True)
class CharClass(Matcher):
    """Single character from a bracket-expression class.

    The pattern is the class interior ("0-9", " ", "^a-z") and is compiled
    once here; an invalid pattern raises ClassPatternError immediately.

    Example:
        >>> CharClass("0-9").match(Cursor("7a"))
        MatchResult(fragments=('7',), cursor=Cursor(source='7a', pos=1))
        >>> CharClass("0-9").match(Cursor("a")) is None
        True
    """

    pattern: str
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str):
            msg = f"CharClass pattern must be str, got {type(self.pattern).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "_compiled", compile_char_class(self.pattern))

    def match(self, cursor: Cursor) -> MatchResult | None:
        peeked = cursor.peek(1)
        # peek returns "" at end of input; a one-character class never matches it.
        if len(peeked) != 1 or self._compiled.fullmatch(peeked) is None:
            return None
        return MatchResult((peeked,), cursor.advance(1))


# ============================================================================
# COMBINATORS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Sequence(Matcher):
    """Children matched back to back; all must succeed.

    There is no backtracking into earlier children: the first failing child
    fails the whole sequence. Fragments of all children are concatenated in
    order. An empty sequence succeeds without consuming input.

    Example:
        >>> cookie = Sequence([CharClass("0-9"), CharClass(" "), Literal("cookie")])
        >>> cookie.match(Cursor("5 cookie")).fragments
        ('5', ' ', 'cookie')
        >>> cookie.match(Cursor("5xcookie")) is None
        True
    """

    items: tuple[Matcher, ...]
    _depth: int = field(init=False, repr=False, compare=False)
    _nullable: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        items = _freeze_children("Sequence", self.items)
        object.__setattr__(self, "items", items)
        object.__setattr__(self, "_depth", _composite_depth(items))
        object.__setattr__(self, "_nullable", all(item.nullable for item in items))

    def match(self, cursor: Cursor) -> MatchResult | None:
        fragments: list[str] = []
        current = cursor
        for item in self.items:
            result = item.match(current)
            if result is None:
                return None
            fragments.extend(result.fragments)
            current = result.cursor
        return MatchResult(tuple(fragments), current)

    @property
    def nullable(self) -> bool:
        return self._nullable

    @property
    def depth(self) -> int:
        return self._depth


@dataclass(frozen=True, slots=True)
class Repetition(Matcher):
    """Greedy, unbounded repetition with a minimum count.

    Applies item until it fails, then succeeds if it matched at least
    min_count times. Always takes as many repetitions as possible; never
    gives any back. Below the minimum the whole repetition fails and all
    progress is discarded.

    Raises:
        RepetitionCountError: If min_count is not a non-negative int
        NullableRepetitionError: If item can succeed without consuming
            input (the loop would never end)

    Example:
        >>> two_or_more = Repetition(CharClass("g"), 2)
        >>> two_or_more.match(Cursor("ggg")).fragments
        ('g', 'g', 'g')
        >>> two_or_more.match(Cursor("g")) is None
        True
    """

    item: Matcher
    min_count: int = 0
    _depth: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.item, Matcher):
            msg = f"Repetition item must be a Matcher instance, got {type(self.item).__name__}"
            raise TypeError(msg)
        if (
            isinstance(self.min_count, bool)
            or not isinstance(self.min_count, int)
            or self.min_count < 0
        ):
            raise RepetitionCountError(ErrorTemplate.repetition_count_invalid(self.min_count))
        if self.item.nullable:
            description = _describe(self.item)
            logger.debug("Rejected repetition of nullable matcher %s", description)
            raise NullableRepetitionError(ErrorTemplate.repetition_nullable(description))
        object.__setattr__(self, "_depth", _composite_depth((self.item,)))

    def match(self, cursor: Cursor) -> MatchResult | None:
        fragments: list[str] = []
        count = 0
        current = cursor
        while (result := self.item.match(current)) is not None:
            if result.cursor.pos <= current.pos:
                raise NullableRepetitionError(
                    ErrorTemplate.repetition_nullable(_describe(self.item))
                )
            fragments.extend(result.fragments)
            current = result.cursor
            count += 1
        if count < self.min_count:
            return None
        return MatchResult(tuple(fragments), current)

    @property
    def nullable(self) -> bool:
        return self.min_count == 0

    @property
    def depth(self) -> int:
        return self._depth


@dataclass(frozen=True, slots=True)
class Alternation(Matcher):
    """Ordered choice: the first child that matches wins.

    Every child is tried against the same starting cursor, in declaration
    order. The first success is returned as is, even if a later child would
    have consumed more input. An empty alternation never matches.

    Example:
        >>> either = Alternation([Literal("foo"), Literal("bar")])
        >>> either.match(Cursor("bar")).fragments
        ('bar',)
        >>> either.match(Cursor("lol")) is None
        True
    """

    choices: tuple[Matcher, ...]
    _depth: int = field(init=False, repr=False, compare=False)
    _nullable: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        choices = _freeze_children("Alternation", self.choices)
        object.__setattr__(self, "choices", choices)
        object.__setattr__(self, "_depth", _composite_depth(choices))
        object.__setattr__(self, "_nullable", any(choice.nullable for choice in choices))

    def match(self, cursor: Cursor) -> MatchResult | None:
        for choice in self.choices:
            result = choice.match(cursor)
            if result is not None:
                return result
        return None

    @property
    def nullable(self) -> bool:
        return self._nullable

    @property
    def depth(self) -> int:
        return self._depth
