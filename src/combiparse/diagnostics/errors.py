"""Exception hierarchy with structured diagnostics.

Only grammar defects are exceptions. A matcher that does not match returns
None; that outcome never raises.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ClassPatternError",
    "CombiparseError",
    "GrammarDepthError",
    "GrammarError",
    "NullableRepetitionError",
    "RepetitionCountError",
]


class CombiparseError(Exception):
    """Base exception for all combiparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombiparseError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GrammarError(CombiparseError):
    """Defect in a matcher tree.

    Raised while building the tree. A tree whose construction raised must not
    be used for matching.
    """


class ClassPatternError(GrammarError):
    """Character class pattern is not a valid bracket-expression interior.

    Attributes:
        pattern: The rejected pattern
    """

    def __init__(self, message: str | Diagnostic, pattern: str) -> None:
        super().__init__(message)
        self.pattern = pattern


class RepetitionCountError(GrammarError):
    """Repetition minimum is negative or not an integer."""


class NullableRepetitionError(GrammarError):
    """Repetition over a matcher that can succeed without consuming input.

    Normally raised at build time. Also raised from Repetition.match() when
    a custom matcher reports itself non-nullable but succeeds in place, which
    would otherwise loop forever.
    """


class GrammarDepthError(GrammarError):
    """Matcher tree is nested deeper than MAX_GRAMMAR_DEPTH."""
