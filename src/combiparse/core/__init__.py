"""Core utilities shared by the syntax layer.

Exports:
    check_grammar_depth: Build-time depth check for matcher trees
    depth_clamp: Clamp a depth limit against the Python recursion limit

Python 3.13+.
"""

from .depth_guard import check_grammar_depth, depth_clamp

__all__ = ["check_grammar_depth", "depth_clamp"]
