"""Matching package.

Provides the cursor, the matcher contract, the built-in matcher kinds and
shorthand builders.

Python 3.13+.
"""

from .builders import alt, char, fullmatch, lit, many, many1, parse, rep, seq
from .char_class import compile_char_class
from .cursor import Cursor, MatchResult
from .matchers import Alternation, CharClass, Literal, Matcher, Repetition, Sequence

__all__ = [
    "Alternation",
    "CharClass",
    "Cursor",
    "Literal",
    "MatchResult",
    "Matcher",
    "Repetition",
    "Sequence",
    "alt",
    "char",
    "compile_char_class",
    "fullmatch",
    "lit",
    "many",
    "many1",
    "parse",
    "rep",
    "seq",
]
