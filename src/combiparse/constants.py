"""Shared constants for combiparse.

This module provides centralized configuration constants used across
the syntax and core packages. Placing constants here avoids circular
imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "MAX_GRAMMAR_DEPTH",
    "RECURSION_RESERVE_FRAMES",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Matching is recursive descent: every composite matcher calls match() on its
# children, so one Python stack frame is spent per tree level. A tree that is
# accepted at build time must be matchable without RecursionError.
#
# The limit is checked once, when a composite matcher is constructed. Nothing
# is checked during match().
#
# ============================================================================

# Deepest matcher tree accepted at build time.
# Clamped at runtime against sys.getrecursionlimit() - RECURSION_RESERVE_FRAMES.
MAX_GRAMMAR_DEPTH: int = 500

# Stack frames kept free for the caller and the test harness when clamping.
RECURSION_RESERVE_FRAMES: int = 50
