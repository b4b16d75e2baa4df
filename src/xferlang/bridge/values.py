"""Reduced value model exposed across the foreign-call bridge.

Foreign callers see four variants only: string, integer, boolean and list.
Parsed documents are narrowed into this model after a normal parse; a tree
containing an object, double or null cannot cross the bridge.

Python 3.13+.
"""

from dataclasses import dataclass
from typing import TypeIs

from xferlang.diagnostics import ErrorTemplate, XferError
from xferlang.syntax.elements import (
    ArrayElement,
    BooleanElement,
    Document,
    DoubleElement,
    Element,
    IntegerElement,
    KeyValuePair,
    NullElement,
    ObjectElement,
    StringElement,
)
from xferlang.syntax.visitor import ElementVisitor, Node

__all__ = [
    "BridgeBoolean",
    "BridgeInteger",
    "BridgeList",
    "BridgeString",
    "BridgeValue",
    "UnsupportedElementError",
    "is_bridge_value",
    "narrow",
]


class UnsupportedElementError(XferError):
    """Raised when a tree holds an element the reduced model cannot carry.

    Never crosses the bridge itself; the bridge reports it as the null handle.
    """


@dataclass(frozen=True, slots=True)
class BridgeString:
    value: str


@dataclass(frozen=True, slots=True)
class BridgeInteger:
    value: int


@dataclass(frozen=True, slots=True)
class BridgeBoolean:
    value: bool


@dataclass(frozen=True, slots=True)
class BridgeList:
    items: tuple["BridgeValue", ...] = ()


type BridgeValue = BridgeString | BridgeInteger | BridgeBoolean | BridgeList


def is_bridge_value(value: object) -> TypeIs[BridgeValue]:
    """Type guard for the four reduced variants."""
    return isinstance(value, (BridgeString, BridgeInteger, BridgeBoolean, BridgeList))


class _Narrower(ElementVisitor[BridgeValue]):
    __slots__ = ()

    def visit_Document(self, node: Document) -> BridgeValue:
        return self.visit(node.root)

    def visit_StringElement(self, node: StringElement) -> BridgeValue:
        return BridgeString(node.value)

    def visit_IntegerElement(self, node: IntegerElement) -> BridgeValue:
        return BridgeInteger(node.value)

    def visit_BooleanElement(self, node: BooleanElement) -> BridgeValue:
        return BridgeBoolean(node.value)

    def visit_ArrayElement(self, node: ArrayElement) -> BridgeValue:
        with self.depth_guard:
            return BridgeList(tuple(self.visit(item) for item in node.items))

    def generic_visit(self, node: Node) -> BridgeValue:
        match node:
            case NullElement() | DoubleElement() | ObjectElement():
                raise UnsupportedElementError(ErrorTemplate.bridge_unsupported_element(node.kind))
            case KeyValuePair():
                # Pairs only occur inside objects, which are rejected above
                raise UnsupportedElementError(
                    ErrorTemplate.bridge_unsupported_element(ObjectElement.kind)
                )
        msg = f"Not an element: {type(node).__name__}"
        raise TypeError(msg)


def narrow(node: Document | Element, *, max_depth: int | None = None) -> BridgeValue:
    """Convert a parsed tree into the reduced bridge model.

    Args:
        node: Document or element to convert
        max_depth: Maximum list nesting depth (default: MAX_DEPTH)

    Returns:
        Equivalent bridge value

    Raises:
        UnsupportedElementError: Tree contains an object, double or null
        DepthLimitExceededError: If nesting exceeds max_depth

    Example:
        >>> narrow(parse('["a" #1 ~true]'))
        BridgeList(items=(BridgeString(value='a'), BridgeInteger(value=1), BridgeBoolean(value=True)))
    """
    return _Narrower(max_depth=max_depth).visit(node)
