"""Single-lookahead character cursor.

The cursor reads the source as a sequence of Unicode scalar values (Python
characters) and keeps exactly one buffered lookahead slot. It never indexes
by byte offset, so multi-byte characters inside strings or identifiers are
never split.

Design:
    - peek() fills the lookahead slot; repeated peeks are idempotent
    - advance() drains the slot if filled, otherwise pulls directly
    - End of input is None from peek()/advance(), and is_eof is True
    - No backtracking beyond the single slot
    - Offset, line and column are tracked incrementally for diagnostics

Line Ending Support:
    \\n is the line delimiter. CRLF input works because the \\n is still
    present; CR-only input reports everything on line 1.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator

from xferlang.diagnostics import SourceSpan

__all__ = ["CharCursor", "is_whitespace"]

# Sentinel for an empty lookahead slot. None already means end of input.
_EMPTY = object()


# str.isspace() also accepts the information separators U+001C..U+001F,
# which are not in the Unicode White_Space set.
_INFORMATION_SEPARATORS: frozenset[str] = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(char: str) -> bool:
    """Whitespace test used by skip_whitespace: the Unicode White_Space set."""
    return char.isspace() and char not in _INFORMATION_SEPARATORS


class CharCursor:
    """Mutable cursor over the source's characters with one-slot lookahead.

    Example:
        >>> cursor = CharCursor("ab")
        >>> cursor.peek()
        'a'
        >>> cursor.peek()  # Idempotent
        'a'
        >>> cursor.advance()
        'a'
        >>> cursor.advance()
        'b'
        >>> cursor.advance() is None
        True
        >>> cursor.is_eof
        True

    Thread Safety:
        Not thread-safe. A cursor belongs to exactly one parse call.
    """

    __slots__ = ("_chars", "_column", "_line", "_offset", "_peeked", "_source_length")

    def __init__(self, source: str) -> None:
        """Create a cursor positioned before the first character.

        Args:
            source: Text to read
        """
        self._chars: Iterator[str] = iter(source)
        self._peeked: object = _EMPTY
        self._source_length = len(source)
        self._offset = 0
        self._line = 1
        self._column = 1

    def peek(self) -> str | None:
        """Return the next character without consuming it.

        Returns:
            Next character, or None at end of input
        """
        if self._peeked is _EMPTY:
            self._peeked = next(self._chars, None)
        return self._peeked  # type: ignore[return-value]

    def advance(self) -> str | None:
        """Consume and return the next character.

        Returns the buffered lookahead if peek() filled it, otherwise pulls
        the next character from the source directly.

        Returns:
            Consumed character, or None at end of input
        """
        if self._peeked is not _EMPTY:
            char: str | None = self._peeked  # type: ignore[assignment]
            self._peeked = _EMPTY
        else:
            char = next(self._chars, None)

        if char is not None:
            self._offset += 1
            if char == "\n":
                self._line += 1
                self._column = 1
            else:
                self._column += 1
        return char

    def skip_whitespace(self) -> None:
        """Advance past consecutive whitespace.

        Stops at end of input or at the first non-whitespace character,
        which is left in the lookahead slot.
        """
        while (char := self.peek()) is not None and is_whitespace(char):
            self.advance()

    @property
    def is_eof(self) -> bool:
        """True when no characters remain."""
        return self.peek() is None

    @property
    def offset(self) -> int:
        """Character offset of the next unconsumed character (0-indexed)."""
        return self._offset

    @property
    def line(self) -> int:
        """Line of the next unconsumed character (1-indexed)."""
        return self._line

    @property
    def column(self) -> int:
        """Column of the next unconsumed character (1-indexed)."""
        return self._column

    @property
    def source_length(self) -> int:
        """Length of the source in characters."""
        return self._source_length

    def span(self, length: int = 0) -> SourceSpan:
        """Span starting at the next unconsumed character.

        Args:
            length: Number of characters covered (clamped to the source)

        Returns:
            SourceSpan for diagnostics
        """
        end = min(self._offset + length, self._source_length)
        return SourceSpan(start=self._offset, end=end, line=self._line, column=self._column)

    def __repr__(self) -> str:
        return f"CharCursor(offset={self._offset}, line={self._line}, column={self._column})"
