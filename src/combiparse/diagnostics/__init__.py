"""Diagnostic system for grammar errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ClassPatternError,
    CombiparseError,
    GrammarDepthError,
    GrammarError,
    NullableRepetitionError,
    RepetitionCountError,
)
from .templates import ErrorTemplate

__all__ = [
    "ClassPatternError",
    "CombiparseError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "GrammarDepthError",
    "GrammarError",
    "NullableRepetitionError",
    "RepetitionCountError",
]
