"""Depth limiting for matcher trees.

Matching recurses once per tree level. Rejecting over-deep trees when they
are built keeps match() free of RecursionError without any per-call
bookkeeping.

Thread-safe: pure functions, no shared state.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

from combiparse.constants import MAX_GRAMMAR_DEPTH, RECURSION_RESERVE_FRAMES
from combiparse.diagnostics import GrammarDepthError
from combiparse.diagnostics.templates import ErrorTemplate

__all__ = ["check_grammar_depth", "depth_clamp"]

logger = logging.getLogger(__name__)


def depth_clamp(requested_depth: int, reserve_frames: int = RECURSION_RESERVE_FRAMES) -> int:
    """Lower a depth limit until a tree that deep can be matched.

    Matching takes one Python frame per tree level, so the usable depth is
    the interpreter recursion limit minus reserve_frames for the caller's
    own stack. A warning is logged when the requested depth has to shrink.

    Args:
        requested_depth: Configured depth limit
        reserve_frames: Frames left free for callers (default: 50)

    Returns:
        min(requested_depth, recursion limit - reserve_frames)

    Example:
        >>> import sys
        >>> reserve = sys.getrecursionlimit() - 150
        >>> depth_clamp(100, reserve_frames=reserve)
        100
        >>> depth_clamp(500, reserve_frames=reserve)
        150
    """
    recursion_limit = sys.getrecursionlimit()
    usable = recursion_limit - reserve_frames
    if requested_depth <= usable:
        return requested_depth
    logger.warning(
        "Grammar depth %d does not fit the recursion limit (%d). "
        "Clamping to %d; raise sys.setrecursionlimit() to allow deeper trees.",
        requested_depth,
        recursion_limit,
        usable,
    )
    return usable


def check_grammar_depth(depth: int, max_depth: int = MAX_GRAMMAR_DEPTH) -> None:
    """Raise if a matcher tree of the given depth cannot be matched safely.

    Args:
        depth: Height of the tree being built
        max_depth: Configured limit (default: MAX_GRAMMAR_DEPTH)

    Raises:
        GrammarDepthError: If depth exceeds the limit after clamping
    """
    # Fast path: most trees are shallow, skip the recursion-limit lookup.
    if depth <= max_depth and depth <= sys.getrecursionlimit() - RECURSION_RESERVE_FRAMES:
        return
    limit = depth_clamp(max_depth)
    if depth > limit:
        raise GrammarDepthError(ErrorTemplate.grammar_depth_exceeded(limit))
