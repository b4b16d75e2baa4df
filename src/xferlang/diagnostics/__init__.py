"""Diagnostic system for xferlang errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ExpectedIdentifierError,
    InvalidBooleanError,
    InvalidDoubleError,
    InvalidIntegerError,
    NestingDepthExceededError,
    TrailingCharactersError,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
    UnterminatedStringError,
    XferError,
    XferSyntaxError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "ExpectedIdentifierError",
    "InvalidBooleanError",
    "InvalidDoubleError",
    "InvalidIntegerError",
    "NestingDepthExceededError",
    "OutputFormat",
    "SourceSpan",
    "TrailingCharactersError",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
    "UnterminatedStringError",
    "XferError",
    "XferSyntaxError",
]
