"""xferlang - parser for a compact, sigil-typed data-interchange format.

Every scalar carries a one-character type marker (sigil): "text", #42 or 42,
^3.14 or *3.14, ~true, ?. Arrays [ ... ] and objects { key value ... }
separate members with whitespace only, and objects keep repeated keys.

Public API:
    parse - Parse format text into a Document
    XferParser - Configurable parser (size and nesting limits)
    to_json - Export a Document as JSON (repeated keys preserved)
    to_python - Convert a Document to plain Python values
    render_tree - Human-readable rendering of a Document

Exceptions:
    XferError - Base exception class
    XferSyntaxError - Parse errors (one subclass per kind of error)

Submodules:
    xferlang.syntax - Element types, cursor, parser, visitor, exporters
    xferlang.diagnostics - Error types, codes, spans and formatting
    xferlang.bridge - Handle-based API for foreign callers
    xferlang.cli - Command-line interface
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import XferError, XferSyntaxError
from .syntax import (
    ArrayElement,
    BooleanElement,
    Document,
    DoubleElement,
    Element,
    IntegerElement,
    KeyValuePair,
    NullElement,
    ObjectElement,
    StringElement,
    XferParser,
    parse,
    render_tree,
    to_json,
    to_python,
)

# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("xferlang")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArrayElement",
    "BooleanElement",
    "Document",
    "DoubleElement",
    "Element",
    "IntegerElement",
    "KeyValuePair",
    "NullElement",
    "ObjectElement",
    "StringElement",
    "XferError",
    "XferParser",
    "XferSyntaxError",
    "__version__",
    "parse",
    "render_tree",
    "to_json",
    "to_python",
]
