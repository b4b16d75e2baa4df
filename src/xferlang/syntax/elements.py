"""Element tree node definitions.

The parsed tree is a closed set of element variants wrapped in a Document.
All nodes are frozen, slotted dataclasses with structural equality, and each
carries a type guard as a static method.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar, TypeIs

from xferlang.constants import INT64_MAX, INT64_MIN
from xferlang.enums import ElementKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Scalars
    "NullElement",
    "BooleanElement",
    "IntegerElement",
    "DoubleElement",
    "StringElement",
    # Collections
    "ArrayElement",
    "KeyValuePair",
    "ObjectElement",
    # Root
    "Document",
    # Type aliases
    "Element",
    "ScalarElement",
]

# ============================================================================
# SCALARS
# ============================================================================


@dataclass(frozen=True, slots=True)
class NullElement:
    """Null: ?"""

    kind: ClassVar[ElementKind] = ElementKind.NULL

    @staticmethod
    def guard(element: object) -> TypeIs["NullElement"]:
        """Type guard for NullElement."""
        return isinstance(element, NullElement)


@dataclass(frozen=True, slots=True)
class BooleanElement:
    """Boolean: ~true or ~false"""

    value: bool
    kind: ClassVar[ElementKind] = ElementKind.BOOLEAN

    def __post_init__(self) -> None:
        """Reject non-bool payloads."""
        if not isinstance(self.value, bool):
            msg = f"BooleanElement value must be bool, got {type(self.value).__name__}"
            raise TypeError(msg)

    @staticmethod
    def guard(element: object) -> TypeIs["BooleanElement"]:
        """Type guard for BooleanElement."""
        return isinstance(element, BooleanElement)


@dataclass(frozen=True, slots=True)
class IntegerElement:
    """Integer: #42, 42 or -5

    Holds a signed 64-bit value. Construction outside that range raises
    ValueError, so trees built by hand obey the same bounds as parsed ones.
    """

    value: int
    kind: ClassVar[ElementKind] = ElementKind.INTEGER

    def __post_init__(self) -> None:
        """Validate 64-bit signed range."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            msg = f"IntegerElement value must be int, got {type(self.value).__name__}"
            raise TypeError(msg)
        if not INT64_MIN <= self.value <= INT64_MAX:
            msg = f"IntegerElement value {self.value} is outside the signed 64-bit range"
            raise ValueError(msg)

    @staticmethod
    def guard(element: object) -> TypeIs["IntegerElement"]:
        """Type guard for IntegerElement."""
        return isinstance(element, IntegerElement)


@dataclass(frozen=True, slots=True)
class DoubleElement:
    """Double: ^3.14 or *3.14 (the two sigils are aliases)"""

    value: float
    kind: ClassVar[ElementKind] = ElementKind.DOUBLE

    @staticmethod
    def guard(element: object) -> TypeIs["DoubleElement"]:
        """Type guard for DoubleElement."""
        return isinstance(element, DoubleElement)


@dataclass(frozen=True, slots=True)
class StringElement:
    """String: "text"

    Content is kept verbatim; there are no escape sequences, so a string
    can never contain a quote character.
    """

    value: str
    kind: ClassVar[ElementKind] = ElementKind.STRING

    @staticmethod
    def guard(element: object) -> TypeIs["StringElement"]:
        """Type guard for StringElement."""
        return isinstance(element, StringElement)


# ============================================================================
# COLLECTIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class ArrayElement:
    """Array: [ element element ... ]

    Members are separated by whitespace only. Order matches the source.
    """

    items: tuple["Element", ...] = ()
    kind: ClassVar[ElementKind] = ElementKind.ARRAY

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Element"]:
        return iter(self.items)

    @staticmethod
    def guard(element: object) -> TypeIs["ArrayElement"]:
        """Type guard for ArrayElement."""
        return isinstance(element, ArrayElement)


@dataclass(frozen=True, slots=True)
class KeyValuePair:
    """Object member: identifier key followed by an element value."""

    key: str
    value: "Element"


@dataclass(frozen=True, slots=True)
class ObjectElement:
    """Object: { key element key element ... }

    An ordered sequence of pairs, not a mapping. Repeated keys are kept as
    separate pairs in source order; nothing is merged or dropped.

    Example:
        >>> obj = ObjectElement((
        ...     KeyValuePair("a", IntegerElement(1)),
        ...     KeyValuePair("a", IntegerElement(2)),
        ... ))
        >>> len(obj)
        2
        >>> obj.values_for("a")
        (IntegerElement(value=1), IntegerElement(value=2))
    """

    pairs: tuple[KeyValuePair, ...] = ()
    kind: ClassVar[ElementKind] = ElementKind.OBJECT

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[KeyValuePair]:
        return iter(self.pairs)

    def keys(self) -> tuple[str, ...]:
        """Keys in source order, repeats included."""
        return tuple(pair.key for pair in self.pairs)

    def values_for(self, key: str) -> tuple["Element", ...]:
        """All values stored under key, in source order."""
        return tuple(pair.value for pair in self.pairs if pair.key == key)

    @staticmethod
    def guard(element: object) -> TypeIs["ObjectElement"]:
        """Type guard for ObjectElement."""
        return isinstance(element, ObjectElement)


# ============================================================================
# ROOT
# ============================================================================


@dataclass(frozen=True, slots=True)
class Document:
    """Top-level parse result: exactly one root element.

    A Document only exists for a fully successful parse; there is no
    partially populated document.
    """

    root: "Element"


# ============================================================================
# TYPE ALIASES
# ============================================================================

type ScalarElement = NullElement | BooleanElement | IntegerElement | DoubleElement | StringElement
type Element = ScalarElement | ArrayElement | ObjectElement
