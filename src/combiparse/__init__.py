"""combiparse - a minimal parser-combinator engine.

Matchers consume an immutable Cursor into an input string. A match either
succeeds, yielding the matched fragments and an advanced cursor, or returns
None so the caller can backtrack and try something else.

Public API:
    Cursor, MatchResult - Input position and successful-match value
    Matcher - Base class for all matchers (subclass for custom kinds)
    Literal, CharClass - Terminal matchers
    Sequence, Repetition, Alternation - Combinators
    lit, char, seq, alt, rep, many, many1 - Shorthand builders
    parse, fullmatch - Match from the start of a string

Exceptions:
    CombiparseError - Base exception class
    GrammarError - Defective matcher tree (raised at build time)
    ClassPatternError - Invalid character class pattern
    NullableRepetitionError - Repetition that could loop forever

Submodules:
    combiparse.diagnostics - Error codes, templates and exception types
    combiparse.constants - Configuration constants
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    ClassPatternError,
    CombiparseError,
    GrammarDepthError,
    GrammarError,
    NullableRepetitionError,
    RepetitionCountError,
)
from .syntax import (
    Alternation,
    CharClass,
    Cursor,
    Literal,
    Matcher,
    MatchResult,
    Repetition,
    Sequence,
    alt,
    char,
    fullmatch,
    lit,
    many,
    many1,
    parse,
    rep,
    seq,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("combiparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Alternation",
    "CharClass",
    "ClassPatternError",
    "CombiparseError",
    "Cursor",
    "GrammarDepthError",
    "GrammarError",
    "Literal",
    "MatchResult",
    "Matcher",
    "NullableRepetitionError",
    "RepetitionCountError",
    "Repetition",
    "Sequence",
    "__version__",
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
