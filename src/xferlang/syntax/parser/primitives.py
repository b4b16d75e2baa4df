"""Primitive parsing utilities for the element parser.

This module provides low-level scanners (maximal character runs, identifier
keys) and the numeric conversions used by the integer and double
productions.

Scanners consume from the cursor and return the accumulated text; they never
raise. Conversions return None on malformed text so the grammar rules decide
which error to raise.
"""

import re
import unicodedata
from collections.abc import Callable

from xferlang.constants import INT64_MAX, INT64_MIN
from xferlang.syntax.cursor import CharCursor

__all__ = [
    "is_double_char",
    "is_identifier_char",
    "is_implicit_integer_start",
    "is_integer_char",
    "is_word_char",
    "parse_float64",
    "parse_identifier",
    "parse_int64",
    "take_while",
]

# ASCII digits only. str.isdigit() returns True for Unicode digits like
# '²' or '٣', which must not start or continue a number.
_ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

_INTEGER_CHARS: frozenset[str] = _ASCII_DIGITS | {"-"}
_DOUBLE_CHARS: frozenset[str] = _ASCII_DIGITS | {"-", "."}

_COMBINING_MARKS: frozenset[str] = frozenset({"Mn", "Mc"})

# The scanners accept '-' anywhere in the run; these patterns decide whether
# the run is well formed. int()/float() alone would also accept '+', '_',
# surrounding whitespace, and (for float) 'inf'/'nan'.
_INTEGER_PATTERN = re.compile(r"-?[0-9]+")
_DOUBLE_PATTERN = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")

# Significant digits of the widest in-range literal, -9223372036854775808.
# Leading zeros are stripped first; int() refuses strings longer than
# sys.get_int_max_str_digits().
_MAX_INT64_DIGITS: int = 19


def is_integer_char(char: str) -> bool:
    """Character may continue an integer literal: ASCII digit or '-'."""
    return char in _INTEGER_CHARS


def is_double_char(char: str) -> bool:
    """Character may continue a double literal: ASCII digit, '.', or '-'."""
    return char in _DOUBLE_CHARS


def is_implicit_integer_start(char: str) -> bool:
    """Character starts a sigil-less integer: ASCII digit or '-'."""
    return char in _INTEGER_CHARS


def is_word_char(char: str) -> bool:
    """Letter or combining mark.

    str.isalpha() rejects the vowel signs and viramas that Devanagari and
    other Brahmic scripts write as separate characters, which would cut a
    word such as ``हिन्दी`` after its first letter.
    """
    return char.isalpha() or unicodedata.category(char) in _COMBINING_MARKS


def is_identifier_char(char: str) -> bool:
    """Character may appear in an object key: word character, numeric or '_'.

    Unicode-aware, so keys such as ``größe``, ``名前`` or ``हिन्दी`` are accepted.
    """
    return is_word_char(char) or char.isnumeric() or char == "_"


def take_while(cursor: CharCursor, predicate: Callable[[str], bool]) -> str:
    """Consume the maximal run of characters satisfying predicate.

    Args:
        cursor: Cursor to read from (advanced past the run)
        predicate: Character test

    Returns:
        The consumed run (possibly empty)

    Example:
        >>> cursor = CharCursor("123abc")
        >>> take_while(cursor, str.isdigit)
        '123'
        >>> cursor.peek()
        'a'
    """
    chars: list[str] = []
    while (char := cursor.peek()) is not None and predicate(char):
        cursor.advance()
        chars.append(char)
    return "".join(chars)


def parse_identifier(cursor: CharCursor) -> str | None:
    """Parse an object key: non-empty run of alphanumerics and '_'.

    Args:
        cursor: Current position in source

    Returns:
        Identifier text, or None if no identifier character is present
        (nothing is consumed in that case)
    """
    identifier = take_while(cursor, is_identifier_char)
    return identifier or None


def parse_int64(text: str) -> int | None:
    """Convert integer literal text to a signed 64-bit value.

    Args:
        text: Accumulated integer run (digits and '-')

    Returns:
        Integer value, or None if malformed or out of range

    Example:
        >>> parse_int64("-42")
        -42
        >>> parse_int64("1-2") is None
        True
        >>> parse_int64("9223372036854775808") is None
        True
    """
    if _INTEGER_PATTERN.fullmatch(text) is None:
        return None
    digits = text.removeprefix("-").lstrip("0") or "0"
    if len(digits) > _MAX_INT64_DIGITS:
        return None
    value = -int(digits) if text.startswith("-") else int(digits)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_float64(text: str) -> float | None:
    """Convert double literal text to a 64-bit float.

    Locale-independent: '.' is the only decimal separator. Exponents are
    not part of the grammar. Literals too large for a double become
    infinity, as IEEE-754 parsing specifies.

    Args:
        text: Accumulated double run (digits, '.', '-')

    Returns:
        Float value, or None if malformed

    Example:
        >>> parse_float64("78.5")
        78.5
        >>> parse_float64("1.2.3") is None
        True
    """
    if _DOUBLE_PATTERN.fullmatch(text) is None:
        return None
    return float(text)
