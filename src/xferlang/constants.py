"""Shared constants for xferlang.

This module provides centralized configuration constants used across
the syntax, serializer and bridge packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing and tree walking
- Input limits: DoS prevention via size constraints
- Integer range: Bounds of the 64-bit signed integer element
- Sigils: Lookahead characters that select a grammar production

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Integer range
    "INT64_MIN",
    "INT64_MAX",
    # Sigils
    "SIGIL_STRING",
    "SIGIL_INTEGER",
    "SIGIL_DOUBLE",
    "SIGIL_DOUBLE_ALT",
    "SIGIL_BOOLEAN",
    "SIGIL_NULL",
    "ARRAY_OPEN",
    "ARRAY_CLOSE",
    "OBJECT_OPEN",
    "OBJECT_CLOSE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# A single limit is shared by the parser (array/object nesting) and by the
# tree walkers (JSON export, rendering, bridge narrowing). Both pass it
# through core.depth_guard.nesting_budget(), which lowers it when the
# recursion limit cannot hold it at four frames per level. 100 levels fits
# the default recursion limit of 1000.
#
# ============================================================================

# Unified maximum nesting depth for recursion protection.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# INTEGER RANGE
# ============================================================================

INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1

# ============================================================================
# SIGILS
# ============================================================================

SIGIL_STRING: str = '"'
SIGIL_INTEGER: str = "#"
SIGIL_DOUBLE: str = "^"
# Alias of SIGIL_DOUBLE. Both produce DoubleElement.
SIGIL_DOUBLE_ALT: str = "*"
SIGIL_BOOLEAN: str = "~"
SIGIL_NULL: str = "?"
ARRAY_OPEN: str = "["
ARRAY_CLOSE: str = "]"
OBJECT_OPEN: str = "{"
OBJECT_CLOSE: str = "}"
