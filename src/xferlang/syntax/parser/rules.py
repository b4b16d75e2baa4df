"""Grammar rules for the element parser.

Recursive-descent productions, one function per production. Dispatch is on
the first lookahead character (the sigil):

    "   string            #   explicit integer
    ^ * double            ~   boolean
    ?   null              [   array
    {   object            0-9 or -  implicit integer

Every rule takes the shared CharCursor positioned at its first character and
either returns an element or raises an XferSyntaxError subclass. The first
error aborts the whole parse; nothing is recovered.

Array and object parsing recurse into parse_element. Nesting depth is
tracked explicitly through ParseContext so adversarial input fails with
NestingDepthExceededError instead of exhausting the interpreter stack.
"""

from dataclasses import dataclass

from xferlang import constants
from xferlang.diagnostics import (
    ErrorTemplate,
    ExpectedIdentifierError,
    InvalidBooleanError,
    InvalidDoubleError,
    InvalidIntegerError,
    NestingDepthExceededError,
    SourceSpan,
    UnexpectedCharacterError,
    UnexpectedEndOfInputError,
    UnterminatedStringError,
)
from xferlang.syntax.cursor import CharCursor
from xferlang.syntax.elements import (
    ArrayElement,
    BooleanElement,
    DoubleElement,
    Element,
    IntegerElement,
    KeyValuePair,
    NullElement,
    ObjectElement,
    StringElement,
)
from xferlang.syntax.parser.primitives import (
    is_double_char,
    is_implicit_integer_start,
    is_integer_char,
    is_word_char,
    parse_float64,
    parse_identifier,
    parse_int64,
    take_while,
)

__all__ = [
    "ParseContext",
    "parse_array",
    "parse_boolean",
    "parse_double",
    "parse_element",
    "parse_integer",
    "parse_null",
    "parse_object",
    "parse_string",
]

_BOOLEAN_WORDS: dict[str, bool] = {"true": True, "false": False}


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Passed down the recursion instead of living in thread-local or global
    state, so concurrent parses never interact.

    Attributes:
        max_nesting_depth: Maximum allowed array/object nesting depth
        current_depth: Current nesting depth (0 = top level)
    """

    max_nesting_depth: int = constants.MAX_DEPTH
    current_depth: int = 0

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been reached."""
        return self.current_depth >= self.max_nesting_depth

    def enter_nesting(self) -> "ParseContext":
        """Create new context with incremented depth for entering [ or {."""
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
        )


def _span_since(start: SourceSpan, cursor: CharCursor) -> SourceSpan:
    """Span from a recorded start position up to the cursor."""
    return SourceSpan(
        start=start.start, end=cursor.offset, line=start.line, column=start.column
    )


# =============================================================================
# Element dispatch
# =============================================================================


def parse_element(cursor: CharCursor, context: ParseContext) -> Element:
    """Parse one element, selecting the production by lookahead sigil.

    Leading whitespace is skipped first.

    Args:
        cursor: Shared cursor (advanced past the element)
        context: Nesting depth context

    Returns:
        The parsed element

    Raises:
        UnexpectedEndOfInputError: Input ends before a value starts
        UnexpectedCharacterError: Lookahead matches no production
        XferSyntaxError: Any error raised by the selected production
    """
    cursor.skip_whitespace()
    char = cursor.peek()

    match char:
        case None:
            raise UnexpectedEndOfInputError(ErrorTemplate.unexpected_end_of_input(cursor.span()))
        case constants.SIGIL_STRING:
            return parse_string(cursor)
        case constants.SIGIL_INTEGER:
            return parse_integer(cursor, explicit=True)
        case constants.SIGIL_DOUBLE | constants.SIGIL_DOUBLE_ALT:
            return parse_double(cursor)
        case constants.SIGIL_BOOLEAN:
            return parse_boolean(cursor)
        case constants.SIGIL_NULL:
            return parse_null(cursor)
        case constants.ARRAY_OPEN:
            return parse_array(cursor, context)
        case constants.OBJECT_OPEN:
            return parse_object(cursor, context)
        case _ if is_implicit_integer_start(char):
            return parse_integer(cursor, explicit=False)
        case _:
            raise UnexpectedCharacterError(
                ErrorTemplate.unexpected_character(char, cursor.span(1)), char
            )


# =============================================================================
# Scalars
# =============================================================================


def parse_string(cursor: CharCursor) -> StringElement:
    """Parse string: "characters"

    Characters are taken verbatim up to the next quote. There are no escape
    sequences, so a string can never contain '"'.

    Raises:
        UnterminatedStringError: Input ends before the closing quote
    """
    start = cursor.span()
    cursor.advance()  # Skip opening quote

    chars: list[str] = []
    while (char := cursor.advance()) is not None:
        if char == constants.SIGIL_STRING:
            return StringElement("".join(chars))
        chars.append(char)

    raise UnterminatedStringError(ErrorTemplate.unterminated_string(_span_since(start, cursor)))


def parse_integer(cursor: CharCursor, *, explicit: bool) -> IntegerElement:
    """Parse integer: #digits (explicit) or digits (implicit)

    Both forms consume the maximal run of ASCII digits and '-' and share one
    failure mode. The explicit form consumes the '#' sigil first.

    Examples:
        #42 -> IntegerElement(42)
        42  -> IntegerElement(42)
        -5  -> IntegerElement(-5)

    Raises:
        InvalidIntegerError: Run is empty, malformed, or outside 64 bits
    """
    if explicit:
        cursor.advance()  # Skip "#"

    start = cursor.span()
    text = take_while(cursor, is_integer_char)
    value = parse_int64(text)
    if value is None:
        raise InvalidIntegerError(ErrorTemplate.invalid_integer(text, _span_since(start, cursor)))
    return IntegerElement(value)


def parse_double(cursor: CharCursor) -> DoubleElement:
    """Parse double: ^digits.digits or *digits.digits

    The two sigils are aliases and produce the same variant.

    Raises:
        InvalidDoubleError: Run is empty or malformed
    """
    cursor.advance()  # Skip "^" or "*"

    start = cursor.span()
    text = take_while(cursor, is_double_char)
    value = parse_float64(text)
    if value is None:
        raise InvalidDoubleError(ErrorTemplate.invalid_double(text, _span_since(start, cursor)))
    return DoubleElement(value)


def parse_boolean(cursor: CharCursor) -> BooleanElement:
    """Parse boolean: ~true or ~false

    Consumes the maximal run of letters and combining marks after the
    sigil, so ``~trueish`` is rejected as a whole rather than read as
    ``~true``.

    Raises:
        InvalidBooleanError: Word is not exactly true or false
    """
    cursor.advance()  # Skip "~"

    start = cursor.span()
    word = take_while(cursor, is_word_char)
    if word not in _BOOLEAN_WORDS:
        raise InvalidBooleanError(ErrorTemplate.invalid_boolean(word, _span_since(start, cursor)))
    return BooleanElement(_BOOLEAN_WORDS[word])


def parse_null(cursor: CharCursor) -> NullElement:
    """Parse null: ?"""
    cursor.advance()  # Skip "?"
    return NullElement()


# =============================================================================
# Collections
# =============================================================================


def _enter_collection(cursor: CharCursor, context: ParseContext) -> ParseContext:
    """Check depth and consume the opening bracket."""
    if context.is_depth_exceeded():
        raise NestingDepthExceededError(
            ErrorTemplate.nesting_depth_exceeded(context.max_nesting_depth, cursor.span(1))
        )
    cursor.advance()  # Skip "[" or "{"
    return context.enter_nesting()


def parse_array(cursor: CharCursor, context: ParseContext) -> ArrayElement:
    """Parse array: [ element element ... ]

    Members are separated by whitespace only; there is no delimiter
    character. Adjacent sigils also separate members: ``[1"a"?]`` has three.

    Raises:
        UnexpectedEndOfInputError: Input ends before ']'
        NestingDepthExceededError: Nesting exceeds context limit
    """
    inner = _enter_collection(cursor, context)

    items: list[Element] = []
    while True:
        cursor.skip_whitespace()
        if cursor.peek() == constants.ARRAY_CLOSE:
            cursor.advance()
            return ArrayElement(tuple(items))
        items.append(parse_element(cursor, inner))


def parse_object(cursor: CharCursor, context: ParseContext) -> ObjectElement:
    """Parse object: { key element key element ... }

    Keys are unquoted identifiers. Repeated keys are kept as separate pairs
    in source order.

    Example:
        {name"Alice"age 30} -> ObjectElement((
            KeyValuePair("name", StringElement("Alice")),
            KeyValuePair("age", IntegerElement(30)),
        ))

    Raises:
        ExpectedIdentifierError: Key position holds no identifier
            (including end of input where a key or '}' was expected)
        UnexpectedEndOfInputError: Input ends after a key
        NestingDepthExceededError: Nesting exceeds context limit
    """
    inner = _enter_collection(cursor, context)

    pairs: list[KeyValuePair] = []
    while True:
        cursor.skip_whitespace()
        if cursor.peek() == constants.OBJECT_CLOSE:
            cursor.advance()
            return ObjectElement(tuple(pairs))

        key_span = cursor.span(1)
        key = parse_identifier(cursor)
        if key is None:
            raise ExpectedIdentifierError(ErrorTemplate.expected_identifier(key_span))

        cursor.skip_whitespace()
        value = parse_element(cursor, inner)
        pairs.append(KeyValuePair(key, value))

