"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def unexpected_end_of_input(span: SourceSpan | None) -> Diagnostic:
        """Input ended where a value or closing token was required.

        Args:
            span: Location of end of input

        Returns:
            Diagnostic for UNEXPECTED_END_OF_INPUT
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_END_OF_INPUT,
            message="Unexpected end of input",
            span=span,
            hint="Check for a missing value or an unclosed ']'",
        )

    @staticmethod
    def unterminated_string(span: SourceSpan) -> Diagnostic:
        """String literal not closed before end of input.

        Args:
            span: Location of the opening quote

        Returns:
            Diagnostic for UNTERMINATED_STRING
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_STRING,
            message="Unterminated string",
            span=span,
            hint="Add a closing '\"'; strings cannot contain a quote character",
        )

    @staticmethod
    def invalid_integer(text: str, span: SourceSpan) -> Diagnostic:
        """Integer text failed to parse as signed 64-bit.

        Args:
            text: The accumulated integer text
            span: Location of the integer text

        Returns:
            Diagnostic for INVALID_INTEGER
        """
        msg = f"Invalid integer '{text}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_INTEGER,
            message=msg,
            span=span,
            hint="Integers are decimal digits with an optional leading '-' "
            "and must fit in 64 bits",
            found=text,
        )

    @staticmethod
    def invalid_double(text: str, span: SourceSpan) -> Diagnostic:
        """Double text failed to parse.

        Args:
            text: The accumulated double text
            span: Location of the double text

        Returns:
            Diagnostic for INVALID_DOUBLE
        """
        msg = f"Invalid double '{text}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DOUBLE,
            message=msg,
            span=span,
            hint="Doubles are digits with an optional '.' and leading '-'; "
            "exponents are not supported",
            found=text,
        )

    @staticmethod
    def invalid_boolean(text: str, span: SourceSpan) -> Diagnostic:
        """Boolean word is not true or false.

        Args:
            text: The accumulated word after ~
            span: Location of the word

        Returns:
            Diagnostic for INVALID_BOOLEAN
        """
        msg = f"Invalid boolean '{text}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_BOOLEAN,
            message=msg,
            span=span,
            hint="Booleans are written ~true or ~false",
            found=text,
        )

    @staticmethod
    def unexpected_character(char: str, span: SourceSpan) -> Diagnostic:
        """Lookahead character matches no production.

        Args:
            char: The offending character
            span: Location of the character

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = f"Unexpected character {char!r}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            span=span,
            hint="A value starts with one of \" # ^ * ~ ? [ { or a digit or '-'",
            found=char,
        )

    @staticmethod
    def expected_identifier(span: SourceSpan) -> Diagnostic:
        """Object key position holds no identifier.

        Args:
            span: Location where the key was expected

        Returns:
            Diagnostic for EXPECTED_IDENTIFIER
        """
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_IDENTIFIER,
            message="Expected identifier",
            span=span,
            hint="Object keys are letters, digits and '_' (unquoted)",
        )

    @staticmethod
    def trailing_characters(span: SourceSpan) -> Diagnostic:
        """Non-whitespace input after the root value.

        Args:
            span: Location of the first trailing character

        Returns:
            Diagnostic for TRAILING_CHARACTERS
        """
        return Diagnostic(
            code=DiagnosticCode.TRAILING_CHARACTERS,
            message="Trailing characters after root value",
            span=span,
            hint="A document holds exactly one root value; wrap several in [ ]",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, span: SourceSpan) -> Diagnostic:
        """Array/object nesting exceeds parser limit.

        Args:
            max_depth: Configured maximum nesting depth
            span: Location of the opening bracket that crossed the limit

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=span,
            hint="Reduce nesting or raise max_nesting_depth",
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int) -> Diagnostic:
        """Tree walker exceeded its depth limit.

        Args:
            max_depth: Maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum tree depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            span=None,
            hint="The element tree is nested deeper than the walker allows",
        )

    @staticmethod
    def bridge_unsupported_element(kind: str) -> Diagnostic:
        """Element variant has no counterpart in the bridge value model.

        Args:
            kind: Element kind name

        Returns:
            Diagnostic for BRIDGE_UNSUPPORTED_ELEMENT
        """
        msg = f"Element kind '{kind}' is not supported across the bridge"
        return Diagnostic(
            code=DiagnosticCode.BRIDGE_UNSUPPORTED_ELEMENT,
            message=msg,
            span=None,
            hint="The bridge carries only strings, integers, booleans and lists",
            found=kind,
        )
