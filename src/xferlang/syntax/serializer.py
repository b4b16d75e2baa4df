"""Export element trees to JSON, plain Python values and readable text.

Three walkers built on ElementVisitor:

- to_json(): JSON text. Object key order and repeated keys are preserved,
  which rules out json.dumps on a dict; the object text is assembled here
  and json.dumps is used only for scalar encoding.
- to_python(): nested dict/list/scalar values. Objects become dict, so a
  repeated key keeps only its last value.
- render_tree(): indented human-readable tree, as printed by the CLI.

Every walker is depth protected and holds its state per call, so the module
functions are thread-safe.

Python 3.13+.
"""

import json
import math

from .elements import (
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
from .visitor import ElementVisitor

__all__ = ["render_tree", "to_json", "to_python"]

type JsonScalar = None | bool | int | float | str
type PythonValue = JsonScalar | list[PythonValue] | dict[str, PythonValue]

_TREE_INDENT: str = "  "


def _encode_double(value: float) -> str:
    """JSON number text; NaN and infinities have no JSON form and become null."""
    if not math.isfinite(value):
        return "null"
    return json.dumps(value)


def _encode_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


# =============================================================================
# JSON
# =============================================================================


class _JsonWriter(ElementVisitor[None]):
    """Appends JSON text for one tree to a local output list."""

    __slots__ = ("_indent", "_output")

    def __init__(self, *, indent: int | None, max_depth: int | None) -> None:
        super().__init__(max_depth=max_depth)
        self._indent = indent
        self._output: list[str] = []

    def write(self, node: Document | Element) -> str:
        self.visit(node)
        return "".join(self._output)

    def _newline(self) -> None:
        if self._indent is not None:
            self._output.append("\n" + " " * (self._indent * self.depth_guard.depth))

    @property
    def _item_separator(self) -> str:
        return "," if self._indent is not None else ", "

    def visit_Document(self, node: Document) -> None:
        self.visit(node.root)

    def visit_NullElement(self, node: NullElement) -> None:
        self._output.append("null")

    def visit_BooleanElement(self, node: BooleanElement) -> None:
        self._output.append("true" if node.value else "false")

    def visit_IntegerElement(self, node: IntegerElement) -> None:
        self._output.append(str(node.value))

    def visit_DoubleElement(self, node: DoubleElement) -> None:
        self._output.append(_encode_double(node.value))

    def visit_StringElement(self, node: StringElement) -> None:
        self._output.append(_encode_string(node.value))

    def visit_ArrayElement(self, node: ArrayElement) -> None:
        with self.depth_guard:
            if not node.items:
                self._output.append("[]")
                return
            self._output.append("[")
            for i, item in enumerate(node.items):
                if i > 0:
                    self._output.append(self._item_separator)
                self._newline()
                self.visit(item)
        self._newline()
        self._output.append("]")

    def visit_ObjectElement(self, node: ObjectElement) -> None:
        with self.depth_guard:
            if not node.pairs:
                self._output.append("{}")
                return
            self._output.append("{")
            for i, pair in enumerate(node.pairs):
                if i > 0:
                    self._output.append(self._item_separator)
                self._newline()
                self.visit(pair)
        self._newline()
        self._output.append("}")

    def visit_KeyValuePair(self, node: KeyValuePair) -> None:
        self._output.append(_encode_string(node.key))
        self._output.append(": ")
        self.visit(node.value)


def to_json(
    node: Document | Element,
    *,
    indent: int | None = None,
    max_depth: int | None = None,
) -> str:
    """Export a document or element as JSON text.

    Objects keep their key order and every repeated key; JSON text allows
    repeated names even though most decoders keep only the last one.
    Non-finite doubles are written as null.

    Args:
        node: Document or element to export
        indent: Spaces per nesting level; None for single-line output
        max_depth: Maximum array/object nesting depth (default: MAX_DEPTH)

    Returns:
        JSON text

    Raises:
        DepthLimitExceededError: If nesting exceeds max_depth

    Example:
        >>> to_json(parse("{a 1 a 2}"))
        '{"a": 1, "a": 2}'
    """
    return _JsonWriter(indent=indent, max_depth=max_depth).write(node)


# =============================================================================
# Plain Python values
# =============================================================================


class _PythonConverter(ElementVisitor[PythonValue]):
    """Builds nested dict/list/scalar values."""

    __slots__ = ()

    def visit_Document(self, node: Document) -> PythonValue:
        return self.visit(node.root)

    def visit_NullElement(self, node: NullElement) -> PythonValue:
        return None

    def visit_BooleanElement(self, node: BooleanElement) -> PythonValue:
        return node.value

    def visit_IntegerElement(self, node: IntegerElement) -> PythonValue:
        return node.value

    def visit_DoubleElement(self, node: DoubleElement) -> PythonValue:
        return node.value

    def visit_StringElement(self, node: StringElement) -> PythonValue:
        return node.value

    def visit_ArrayElement(self, node: ArrayElement) -> PythonValue:
        with self.depth_guard:
            return [self.visit(item) for item in node.items]

    def visit_ObjectElement(self, node: ObjectElement) -> PythonValue:
        with self.depth_guard:
            return {pair.key: self.visit(pair.value) for pair in node.pairs}


def to_python(node: Document | Element, *, max_depth: int | None = None) -> PythonValue:
    """Convert a document or element to plain Python values.

    Null becomes None, arrays become list and objects become dict. A dict
    holds one value per key, so for repeated keys the last pair wins; use
    to_json() or the element tree itself when repeats matter.

    Args:
        node: Document or element to convert
        max_depth: Maximum array/object nesting depth (default: MAX_DEPTH)

    Returns:
        Plain Python value

    Raises:
        DepthLimitExceededError: If nesting exceeds max_depth
    """
    return _PythonConverter(max_depth=max_depth).visit(node)


# =============================================================================
# Readable tree
# =============================================================================


class _TreeRenderer(ElementVisitor[None]):
    """Renders one line per element, indented by nesting depth."""

    __slots__ = ("_key", "_lines")

    def __init__(self, *, max_depth: int | None) -> None:
        super().__init__(max_depth=max_depth)
        self._lines: list[str] = []
        self._key: str | None = None

    def render(self, node: Document | Element) -> str:
        self.visit(node)
        return "\n".join(self._lines)

    def _emit(self, text: str) -> None:
        label = f"{self._key}: " if self._key is not None else ""
        self._key = None
        self._lines.append(f"{_TREE_INDENT * self.depth_guard.depth}{label}{text}")

    def visit_Document(self, node: Document) -> None:
        self.visit(node.root)

    def visit_NullElement(self, node: NullElement) -> None:
        self._emit("Null")

    def visit_BooleanElement(self, node: BooleanElement) -> None:
        self._emit(f"Boolean {'true' if node.value else 'false'}")

    def visit_IntegerElement(self, node: IntegerElement) -> None:
        self._emit(f"Integer {node.value}")

    def visit_DoubleElement(self, node: DoubleElement) -> None:
        self._emit(f"Double {node.value!r}")

    def visit_StringElement(self, node: StringElement) -> None:
        self._emit(f"String {_encode_string(node.value)}")

    def visit_ArrayElement(self, node: ArrayElement) -> None:
        count = len(node.items)
        self._emit(f"Array ({count} {'item' if count == 1 else 'items'})")
        with self.depth_guard:
            for item in node.items:
                self.visit(item)

    def visit_ObjectElement(self, node: ObjectElement) -> None:
        count = len(node.pairs)
        self._emit(f"Object ({count} {'pair' if count == 1 else 'pairs'})")
        with self.depth_guard:
            for pair in node.pairs:
                self.visit(pair)

    def visit_KeyValuePair(self, node: KeyValuePair) -> None:
        self._key = node.key
        self.visit(node.value)


def render_tree(node: Document | Element, *, max_depth: int | None = None) -> str:
    """Render a document or element as an indented, human-readable tree.

    Example:
        >>> print(render_tree(parse('{name"Alice" tags["x"]}')))
        Object (2 pairs)
          name: String "Alice"
          tags: Array (1 item)
            String "x"

    Raises:
        DepthLimitExceededError: If nesting exceeds max_depth
    """
    return _TreeRenderer(max_depth=max_depth).render(node)
