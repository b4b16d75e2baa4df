"""Format syntax package.

Provides the parser, element definitions, visitor pattern and exporters.

Python 3.13+.
"""

from .cursor import CharCursor
from .elements import (
    ArrayElement,
    BooleanElement,
    Document,
    DoubleElement,
    Element,
    IntegerElement,
    KeyValuePair,
    NullElement,
    ObjectElement,
    ScalarElement,
    StringElement,
)
from .parser import ParseContext, XferParser
from .serializer import render_tree, to_json, to_python
from .visitor import ElementVisitor

__all__ = [
    "ArrayElement",
    "BooleanElement",
    "CharCursor",
    "Document",
    "DoubleElement",
    "Element",
    "ElementVisitor",
    "IntegerElement",
    "KeyValuePair",
    "NullElement",
    "ObjectElement",
    "ParseContext",
    "ScalarElement",
    "StringElement",
    "XferParser",
    "parse",
    "render_tree",
    "to_json",
    "to_python",
]


def parse(
    source: str,
    *,
    max_nesting_depth: int | None = None,
    max_source_size: int | None = None,
) -> Document:
    """Parse format text into a Document.

    Convenience function for XferParser.parse().

    Args:
        source: Format text
        max_nesting_depth: Maximum array/object nesting depth (default: 100)
        max_source_size: Maximum source size in characters (default: 10 MiB)

    Returns:
        Document wrapping the root element

    Raises:
        XferSyntaxError: On malformed input
        ValueError: If source exceeds max_source_size

    Example:
        >>> from xferlang.syntax import parse
        >>> parse("#42").root
        IntegerElement(value=42)
    """
    parser = XferParser(max_nesting_depth=max_nesting_depth, max_source_size=max_source_size)
    return parser.parse(source)
