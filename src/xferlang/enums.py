"""Enumerations for xferlang type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ElementKind(StrEnum):
    """Variant tag of a parsed element.

    StrEnum provides automatic string conversion: str(ElementKind.NULL) == "null"
    """

    NULL = "null"
    """Null: ?"""

    BOOLEAN = "boolean"
    """Boolean: ~true, ~false"""

    INTEGER = "integer"
    """Integer: #42 or bare 42"""

    DOUBLE = "double"
    """Double: ^3.14 or *3.14"""

    STRING = "string"
    """String: "text" (no escapes)"""

    ARRAY = "array"
    """Array: [ element element ... ]"""

    OBJECT = "object"
    """Object: { key element key element ... }"""


__all__ = [
    "ElementKind",
]
