"""Core utilities shared across syntax, serializer and bridge layers.

By isolating these utilities here, we maintain a clean dependency graph:

    core <- syntax <- bridge

Exports:
    DepthGuard: Per-walk counter of collections entered
    DepthLimitExceededError: Raised when a walk exceeds its budget
    nesting_budget: Effective nesting limit shared by parser and walkers

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError, nesting_budget

__all__ = ["DepthGuard", "DepthLimitExceededError", "nesting_budget"]
