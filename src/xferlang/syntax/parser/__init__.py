"""Element parser module.

This module provides the XferParser class and the grammar it drives,
organized into focused submodules.

Module Organization:
- core.py: XferParser class (document entry point, trailing input check)
- rules.py: Grammar rules (sigil dispatch, scalars, arrays, objects)
- primitives.py: Character-run scanners, identifiers, numeric conversion

Public API:
    XferParser: Main parser class
    ParseContext: Parse context for depth tracking (advanced usage)
"""

from xferlang.syntax.parser.core import XferParser
from xferlang.syntax.parser.rules import ParseContext

__all__ = ["ParseContext", "XferParser"]
