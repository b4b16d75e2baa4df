"""xferlang exception hierarchy with structured diagnostics.

Every syntax failure is a distinct exception class so callers can match on
the kind of error programmatically instead of parsing message text. All
exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = [
    "ExpectedIdentifierError",
    "InvalidBooleanError",
    "InvalidDoubleError",
    "InvalidIntegerError",
    "NestingDepthExceededError",
    "TrailingCharactersError",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
    "UnterminatedStringError",
    "XferError",
    "XferSyntaxError",
]


class XferError(Exception):
    """Base exception for all xferlang errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize XferError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, if the error carries a diagnostic."""
        return self.diagnostic.code if self.diagnostic is not None else None

    @property
    def span(self) -> SourceSpan | None:
        """Source location, if the error carries one."""
        return self.diagnostic.span if self.diagnostic is not None else None


class XferSyntaxError(XferError):
    """Malformed input during parsing.

    The parser is fail-fast: the first syntax error aborts the whole parse
    and no partial tree is returned.
    """


class UnexpectedEndOfInputError(XferSyntaxError):
    """Input exhausted where a value or closing token was required."""


class UnterminatedStringError(XferSyntaxError):
    """String literal never closed before end of input."""


class InvalidIntegerError(XferSyntaxError):
    """Integer text is not a base-10 signed 64-bit value."""


class InvalidDoubleError(XferSyntaxError):
    """Text after ^ or * is not a floating point number."""


class InvalidBooleanError(XferSyntaxError):
    """Text after ~ is not exactly true or false."""


class UnexpectedCharacterError(XferSyntaxError):
    """Lookahead character matches no production.

    Attributes:
        character: The offending character
    """

    def __init__(self, message: str | Diagnostic, character: str) -> None:
        """Initialize UnexpectedCharacterError.

        Args:
            message: Error message string OR Diagnostic object
            character: The character that matched no production
        """
        super().__init__(message)
        self.character = character


class ExpectedIdentifierError(XferSyntaxError):
    """Object key position holds no valid identifier."""


class TrailingCharactersError(XferSyntaxError):
    """Non-whitespace input remains after the root value."""


class NestingDepthExceededError(XferSyntaxError):
    """Array/object nesting exceeds the parser's configured maximum."""
