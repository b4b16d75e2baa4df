"""Tests for the parse error taxonomy and diagnostic spans.

Each kind of failure raises its own XferSyntaxError subclass carrying a
Diagnostic with a code, a span pointing at the offending input and a hint.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from xferlang import parse
from xferlang.diagnostics import (
    DiagnosticCode,
    ExpectedIdentifierError,
    InvalidBooleanError,
    InvalidDoubleError,
    InvalidIntegerError,
    TrailingCharactersError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
    UnterminatedStringError,
    XferError,
    XferSyntaxError,
)

# ============================================================================
# Taxonomy
# ============================================================================


class TestErrorKinds:
    """Each malformed input raises the matching error class."""

    @pytest.mark.parametrize("source", ["", "   ", "\n\t"])
    def test_empty_input(self, source: str) -> None:
        """No value at all is unexpected end of input."""
        with pytest.raises(UnexpectedEndOfInputError):
            parse(source)

    @pytest.mark.parametrize("source", ["[", "[1 2", "{a", "{a ", "[[]", '{a"x" b'])
    def test_unexpected_end_of_input(self, source: str) -> None:
        """Input ending inside a collection or after a key."""
        with pytest.raises(UnexpectedEndOfInputError):
            parse(source)

    @pytest.mark.parametrize("source", ['"abc', '"', '["abc', '{k"v'])
    def test_unterminated_string(self, source: str) -> None:
        """A string never closed."""
        with pytest.raises(UnterminatedStringError):
            parse(source)

    @pytest.mark.parametrize(
        "source",
        ["#", "#abc", "#1-2", "--1", "-", "1-", "#+1", "9223372036854775808", "-9223372036854775809"],
    )
    def test_invalid_integer(self, source: str) -> None:
        """Empty, malformed or out-of-range integer text."""
        with pytest.raises(InvalidIntegerError):
            parse(source)

    @pytest.mark.parametrize("source", ["^", "*", "^abc", "^1.2.3", "*.", "^-", "^1-2", "^--1"])
    def test_invalid_double(self, source: str) -> None:
        """Empty or malformed double text."""
        with pytest.raises(InvalidDoubleError):
            parse(source)

    @pytest.mark.parametrize(
        "source",
        ["~tru", "~", "~TRUE", "~trueish", "~yes", "~1", "~true\u0301", "~false\u093f"],
    )
    def test_invalid_boolean(self, source: str) -> None:
        """Anything but exactly true or false."""
        with pytest.raises(InvalidBooleanError):
            parse(source)

    @pytest.mark.parametrize(
        ("source", "character"),
        [("@", "@"), ("[1 @]", "@"), ("]", "]"), ("}", "}"), ("{a}", "}"), ("{a1}", "}"), ("+1", "+")],
    )
    def test_unexpected_character(self, source: str, character: str) -> None:
        """Lookahead that starts no production."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            parse(source)

        assert exc_info.value.character == character

    @pytest.mark.parametrize("source", ["{", "{ ", '{"a" 1}', "{-a 1}", "{a 1 ?}", "{.}"])
    def test_expected_identifier(self, source: str) -> None:
        """Key position without an identifier (including end of input)."""
        with pytest.raises(ExpectedIdentifierError):
            parse(source)

    @pytest.mark.parametrize(
        "source",
        ["?  extra", "1 2", "[] []", '"a""b"', "{}x", "~true~false", "?\x1c", "[]\x1f"],
    )
    def test_trailing_characters(self, source: str) -> None:
        """Anything but whitespace after the root value."""
        with pytest.raises(TrailingCharactersError):
            parse(source)


# ============================================================================
# Hierarchy and Codes
# ============================================================================


class TestErrorHierarchy:
    """Errors share a hierarchy and carry diagnostic codes."""

    @pytest.mark.parametrize(
        ("source", "code"),
        [
            ("", DiagnosticCode.UNEXPECTED_END_OF_INPUT),
            ('"abc', DiagnosticCode.UNTERMINATED_STRING),
            ("#x", DiagnosticCode.INVALID_INTEGER),
            ("^x", DiagnosticCode.INVALID_DOUBLE),
            ("~x", DiagnosticCode.INVALID_BOOLEAN),
            ("@", DiagnosticCode.UNEXPECTED_CHARACTER),
            ("{", DiagnosticCode.EXPECTED_IDENTIFIER),
            ("? ?", DiagnosticCode.TRAILING_CHARACTERS),
        ],
    )
    def test_codes(self, source: str, code: DiagnosticCode) -> None:
        """Every error carries its diagnostic code and a hint."""
        with pytest.raises(XferSyntaxError) as exc_info:
            parse(source)

        error = exc_info.value
        assert isinstance(error, XferError)
        assert error.code is code
        assert error.diagnostic is not None
        assert error.diagnostic.hint

    def test_messages(self) -> None:
        """Messages name the offending text."""
        with pytest.raises(InvalidBooleanError, match="Invalid boolean 'tru'"):
            parse("~tru")
        with pytest.raises(InvalidIntegerError, match="Invalid integer '1-2'"):
            parse("#1-2")
        with pytest.raises(UnexpectedCharacterError, match="Unexpected character '@'"):
            parse("@")

    def test_found_text(self) -> None:
        """Diagnostics record the offending text."""
        with pytest.raises(InvalidDoubleError) as exc_info:
            parse("^1.2.3")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.found == "1.2.3"


# ============================================================================
# Spans
# ============================================================================


class TestErrorSpans:
    """Error spans point at the offending input."""

    def test_empty_input_span(self) -> None:
        """End of input on empty source is at the start."""
        with pytest.raises(UnexpectedEndOfInputError) as exc_info:
            parse("")

        span = exc_info.value.span
        assert span is not None
        assert (span.start, span.end, span.line, span.column) == (0, 0, 1, 1)

    def test_unexpected_character_span(self) -> None:
        """Span covers the offending character."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            parse("[1 @]")

        span = exc_info.value.span
        assert span is not None
        assert (span.start, span.end, span.column) == (3, 4, 4)

    def test_multiline_span(self) -> None:
        """Line and column follow newlines."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            parse("[\n  @]")

        span = exc_info.value.span
        assert span is not None
        assert (span.line, span.column) == (2, 3)

    def test_unterminated_string_span_from_quote(self) -> None:
        """Unterminated string span starts at the opening quote."""
        with pytest.raises(UnterminatedStringError) as exc_info:
            parse('[ "abc')

        span = exc_info.value.span
        assert span is not None
        assert (span.start, span.end, span.column) == (2, 6, 3)

    def test_invalid_boolean_span_after_sigil(self) -> None:
        """Scalar spans cover the text after the sigil."""
        with pytest.raises(InvalidBooleanError) as exc_info:
            parse("~tru")

        span = exc_info.value.span
        assert span is not None
        assert (span.start, span.end, span.column) == (1, 4, 2)

    def test_trailing_characters_span(self) -> None:
        """Trailing span points at the first leftover character."""
        with pytest.raises(TrailingCharactersError) as exc_info:
            parse("?  extra")

        span = exc_info.value.span
        assert span is not None
        assert (span.start, span.column) == (3, 4)

    def test_expected_identifier_span(self) -> None:
        """Key error span points at the key position."""
        with pytest.raises(ExpectedIdentifierError) as exc_info:
            parse('{a 1 "b"}')

        span = exc_info.value.span
        assert span is not None
        assert span.start == 5

    def test_spans_count_characters_not_bytes(self) -> None:
        """Multi-byte characters before the error count as one column each."""
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            parse('["名前" @]')

        span = exc_info.value.span
        assert span is not None
        assert (span.start, span.column) == (6, 7)
