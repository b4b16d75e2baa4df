"""Nesting depth budget shared by the parser and the tree walkers.

Arrays and objects are the only recursive elements, so depth is counted in
collections entered. The parser and every walker resolve their limit through
nesting_budget(), which caps the request by what the interpreter recursion
limit can hold at the cost of the most expensive caller. One requested depth
yields one effective limit everywhere, so any tree the parser accepts can be
walked with the same setting.

Python 3.13+.
"""

import logging
import sys
from typing import Self

from xferlang.constants import MAX_DEPTH
from xferlang.diagnostics import XferError
from xferlang.diagnostics.templates import ErrorTemplate

__all__ = ["FRAMES_PER_LEVEL", "DepthGuard", "DepthLimitExceededError", "nesting_budget"]

logger = logging.getLogger(__name__)

# Most frames any caller spends per level:
# visit -> visit_ObjectElement -> visit(pair) -> visit_KeyValuePair
FRAMES_PER_LEVEL: int = 4

# Left for the entry point, logging and whatever called it
_RESERVED_FRAMES: int = 50


class DepthLimitExceededError(XferError):
    """A walker met more nested collections than its budget allows.

    Only trees built by hand, or walked with a lower limit than they were
    parsed with, can trigger it.
    """


def nesting_budget(requested: int | None = None) -> int:
    """Resolve a requested nesting limit to the effective one.

    Args:
        requested: Limit in nested arrays/objects (default: MAX_DEPTH)

    Returns:
        The requested limit, or the deepest nesting the current recursion
        limit can hold if that is lower (logged as a warning)

    Raises:
        ValueError: If requested is not positive
    """
    depth = MAX_DEPTH if requested is None else requested
    if depth < 1:
        msg = f"Nesting depth must be positive, got {depth}"
        raise ValueError(msg)

    ceiling = max(1, (sys.getrecursionlimit() - _RESERVED_FRAMES) // FRAMES_PER_LEVEL)
    if depth > ceiling:
        logger.warning(
            "Nesting depth %d does not fit recursion limit %d; using %d",
            depth,
            sys.getrecursionlimit(),
            ceiling,
        )
        return ceiling
    return depth


class DepthGuard:
    """Counter entered once per collection a walker descends into.

    Entering beyond the budget raises DepthLimitExceededError and leaves the
    count untouched. Each walk owns its guard; nothing is shared between
    threads.
    """

    __slots__ = ("_depth", "_max_depth")

    def __init__(self, max_depth: int | None = None) -> None:
        self._max_depth = nesting_budget(max_depth)
        self._depth = 0

    @property
    def max_depth(self) -> int:
        """Effective limit after nesting_budget()."""
        return self._max_depth

    @property
    def depth(self) -> int:
        """Collections currently entered."""
        return self._depth

    def __enter__(self) -> Self:
        if self._depth >= self._max_depth:
            raise DepthLimitExceededError(ErrorTemplate.max_depth_exceeded(self._max_depth))
        self._depth += 1
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._depth -= 1

    def __repr__(self) -> str:
        return f"DepthGuard(depth={self._depth}, max_depth={self._max_depth})"
