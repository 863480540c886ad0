"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All grammar error messages are created here. NO f-strings in exception
    constructors!
    """

    @staticmethod
    def class_pattern_invalid(pattern: str, reason: str) -> Diagnostic:
        """Character class pattern failed to compile.

        Args:
            pattern: The bracket-expression interior as given by the caller
            reason: Why compilation failed

        Returns:
            Diagnostic for CLASS_PATTERN_INVALID
        """
        msg = f"Invalid character class '[{pattern}]': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CLASS_PATTERN_INVALID,
            message=msg,
            hint="Write the class interior only, e.g. '0-9' or 'a-zA-Z_'",
        )

    @staticmethod
    def repetition_count_invalid(min_count: object) -> Diagnostic:
        """Repetition minimum is not a non-negative integer.

        Args:
            min_count: The rejected value

        Returns:
            Diagnostic for REPETITION_COUNT_INVALID
        """
        msg = f"Repetition minimum must be a non-negative integer, got {min_count!r}"
        return Diagnostic(
            code=DiagnosticCode.REPETITION_COUNT_INVALID,
            message=msg,
        )

    @staticmethod
    def repetition_nullable(item: str) -> Diagnostic:
        """Repetition over a matcher that can succeed without consuming input.

        Args:
            item: Short description of the repeated matcher

        Returns:
            Diagnostic for REPETITION_NULLABLE
        """
        msg = f"Repeated matcher can succeed without consuming input: {item}"
        return Diagnostic(
            code=DiagnosticCode.REPETITION_NULLABLE,
            message=msg,
            hint="Repeat a matcher that consumes at least one character on success",
        )

    @staticmethod
    def grammar_depth_exceeded(max_depth: int) -> Diagnostic:
        """Matcher tree nesting exceeds the depth limit.

        Args:
            max_depth: The effective depth limit

        Returns:
            Diagnostic for GRAMMAR_DEPTH_EXCEEDED
        """
        msg = f"Matcher tree depth exceeds maximum of {max_depth}"
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten nested sequences or alternations",
        )
