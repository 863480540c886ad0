"""Character class compilation.

A class pattern is the interior of a regex bracket expression: "0-9",
"a-zA-Z_", "^ \\t". It is rewritten into a body the standard library re
module reads the same way, wrapped in brackets and compiled once, when the
matcher is built.

Rewrites:
    [:name:]   ASCII POSIX class, expanded to its ranges ("[:digit:]" -> "0-9")
    [          literal bracket, escaped
    |          literal pipe, escaped

Rejected: empty patterns, an unescaped ']' that would end the class early,
the set operators '&&', '--' and '~~', negated or unknown POSIX classes,
and anything re itself refuses.

Errors surface as ClassPatternError at build time, never during matching.
"""

import logging
import re

from combiparse.diagnostics import ClassPatternError, ErrorTemplate

__all__ = ["POSIX_CLASSES", "compile_char_class"]

logger = logging.getLogger(__name__)

# ASCII-only, as in POSIX bracket expressions.
POSIX_CLASSES: dict[str, str] = {
    "alnum": "0-9A-Za-z",
    "alpha": "A-Za-z",
    "ascii": "\\x00-\\x7F",
    "blank": "\\t ",
    "cntrl": "\\x00-\\x1F\\x7F",
    "digit": "0-9",
    "graph": "!-~",
    "lower": "a-z",
    "print": " -~",
    "punct": "!-/:-@\\[-`{-~",
    "space": "\\t\\n\\v\\f\\r ",
    "upper": "A-Z",
    "word": "0-9A-Za-z_",
    "xdigit": "0-9A-Fa-f",
}

_POSIX_CLASS = re.compile(r"\[:(\^?)([A-Za-z]*):\]")

_SET_OPERATORS = frozenset("&-~")


def _translate(pattern: str) -> str:
    """Rewrite a class interior into an equivalent re class body.

    A ']' is literal when it comes first in the class (after an optional
    leading '^'); anywhere else it must be escaped.

    Raises:
        ValueError: With the rejection reason
    """
    out: list[str] = []
    i = 0
    if pattern.startswith("^"):
        out.append("^")
        i = 1
    if pattern[i : i + 1] == "]":
        out.append("\\]")
        i += 1
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            # Escapes pass through unchanged; re validates them.
            out.append(pattern[i : i + 2])
            i += 2
            continue
        if ch == "]":
            msg = f"unescaped ']' at position {i} closes the class early"
            raise ValueError(msg)
        if ch == "[":
            if posix := _POSIX_CLASS.match(pattern, i):
                negated, name = posix.groups()
                if negated:
                    msg = f"negated POSIX class {posix.group()!r} is not supported"
                    raise ValueError(msg)
                if name not in POSIX_CLASSES:
                    msg = f"unknown POSIX class {posix.group()!r}"
                    raise ValueError(msg)
                out.append(POSIX_CLASSES[name])
                i = posix.end()
                continue
            out.append("\\[")
        elif ch in _SET_OPERATORS and pattern[i + 1 : i + 2] == ch:
            msg = f"set operation {ch * 2!r} at position {i} is not supported"
            raise ValueError(msg)
        elif ch == "|":
            out.append("\\|")
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def compile_char_class(pattern: str) -> re.Pattern[str]:
    """Compile a bracket-expression interior into a single-character test.

    Args:
        pattern: Class interior, without the surrounding brackets

    Returns:
        Compiled pattern; use fullmatch() on a one-character string

    Raises:
        ClassPatternError: If the pattern is empty, closes the bracket
            early, uses an unsupported construct, or is rejected by re

    Example:
        >>> compile_char_class("0-9").fullmatch("7") is not None
        True
        >>> compile_char_class("[:alpha:]_").fullmatch("Q") is not None
        True
        >>> compile_char_class("z-a")
        Traceback (most recent call last):
        ...
        combiparse.diagnostics.errors.ClassPatternError: error[CLASS_PATTERN_INVALID]: ...
    """
    if not pattern:
        reason = "empty class matches nothing"
    else:
        try:
            compiled = re.compile(f"[{_translate(pattern)}]")
        except ValueError as e:
            reason = str(e)
        except re.error as e:
            reason = e.msg
        else:
            logger.debug("Compiled character class %r", f"[{pattern}]")
            return compiled

    logger.debug("Rejected character class %r: %s", f"[{pattern}]", reason)
    raise ClassPatternError(ErrorTemplate.class_pattern_invalid(pattern, reason), pattern)
