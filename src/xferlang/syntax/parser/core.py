"""Document parser entry point.

This module provides the XferParser class that drives the element parser
once over a source string and enforces that nothing but whitespace follows
the root value.

Architecture:
    The parser reads through a single-lookahead
    :class:`~xferlang.syntax.cursor.CharCursor`. Grammar rules in
    :mod:`~xferlang.syntax.parser.rules` consume from the shared cursor and
    return elements from :mod:`~xferlang.syntax.elements`, or raise an
    :class:`~xferlang.diagnostics.XferSyntaxError` subclass. Parsing is
    fail-fast: the first error aborts the parse and no partial tree is
    returned.

Security:
    Includes a configurable input size limit and a nesting depth limit to
    bound memory use and recursion on adversarial input.

See Also:
    - :mod:`xferlang.syntax.elements` - Element and Document definitions
    - :mod:`xferlang.syntax.parser.rules` - Grammar rules
"""

import logging

from xferlang.constants import MAX_SOURCE_SIZE
from xferlang.core.depth_guard import nesting_budget
from xferlang.diagnostics import ErrorTemplate, TrailingCharactersError
from xferlang.syntax.cursor import CharCursor
from xferlang.syntax.elements import Document
from xferlang.syntax.parser.rules import ParseContext, parse_element

__all__ = ["XferParser"]

logger = logging.getLogger(__name__)


class XferParser:
    """Parser for the sigil-typed format.

    Design:
    - One parse call per source; the cursor is private to that call
    - Fail-fast: raises on the first malformed construct
    - Instances hold only immutable configuration and may be shared
      between threads

    Security:
    - Configurable max_source_size rejects oversized input up front
    - Default limit: 10 MiB characters
    - Configurable max_nesting_depth rejects deeply nested [ and {,
      resolved by nesting_budget(), the same budget the tree walkers use

    Attributes:
        max_source_size: Maximum allowed source size in characters
        max_nesting_depth: Maximum allowed array/object nesting depth
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum source size in characters (default: 10 MiB).
                            Set to 0 to disable the size limit (not recommended).
            max_nesting_depth: Maximum array/object nesting depth (default: 100).

        Raises:
            ValueError: If max_nesting_depth is not positive or
                max_source_size is negative
        """
        if max_nesting_depth is not None and max_nesting_depth < 1:
            msg = f"max_nesting_depth must be positive, got {max_nesting_depth}"
            raise ValueError(msg)
        if max_source_size is not None and max_source_size < 0:
            msg = f"max_source_size must be >= 0, got {max_source_size}"
            raise ValueError(msg)

        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_nesting_depth = nesting_budget(max_nesting_depth)

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed array/object nesting depth."""
        return self._max_nesting_depth

    def parse(self, source: str) -> Document:
        """Parse source into a Document.

        Parses exactly one root element, skips trailing whitespace and
        rejects anything left over.

        Args:
            source: Format text

        Returns:
            :class:`~xferlang.syntax.elements.Document` wrapping the root element

        Raises:
            ValueError: If source exceeds max_source_size
            XferSyntaxError: On the first malformed construct (a subclass
                identifies the kind of error)

        Example:
            >>> parser = XferParser()
            >>> document = parser.parse('{name"Alice"age 30}')
            >>> document.root.keys()
            ('name', 'age')
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Source size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in XferParser constructor to increase limit."
            )
            raise ValueError(msg)

        cursor = CharCursor(source)
        context = ParseContext(max_nesting_depth=self._max_nesting_depth)

        root = parse_element(cursor, context)

        cursor.skip_whitespace()
        if not cursor.is_eof:
            raise TrailingCharactersError(ErrorTemplate.trailing_characters(cursor.span(1)))

        logger.debug("Parsed %s document (%d characters)", root.kind, len(source))
        return Document(root)
