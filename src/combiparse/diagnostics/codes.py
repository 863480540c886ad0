"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for grammar construction.
Python 3.13+. Zero external dependencies.
"""

import unicodedata
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


def _escape_control(text: str) -> str:
    """Replace control characters with their backslash escapes."""
    return "".join(
        ch.encode("unicode_escape").decode("ascii")
        if unicodedata.category(ch).startswith("C")
        else ch
        for ch in text
    )


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Grammar errors (raised while building a matcher tree)

    Non-matches are not errors and have no code.
    """

    CLASS_PATTERN_INVALID = 1001
    REPETITION_COUNT_INVALID = 1002
    REPETITION_NULLABLE = 1003
    GRAMMAR_DEPTH_EXCEEDED = 1004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Control characters in the message and hint are escaped, so user
        input such as a pattern containing a newline stays on one line.

        Example output:
            error[CLASS_PATTERN_INVALID]: Invalid character class '[z-a]': bad character range z-a
              = help: Write the class interior only, e.g. '0-9' or 'a-zA-Z_'

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape_control(self.message)}"]
        if self.hint:
            lines.append(f"  = help: {_escape_control(self.hint)}")
        return "\n".join(lines)
