"""Visitor pattern for element tree traversal.

Enables tools to walk parsed documents without modifying element classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_ClassName (PascalCase), e.g. visit_ObjectElement,
rather than visit_object_element.

Depth:
    Nesting is counted the way the parser counts it: every ArrayElement and
    ObjectElement entered adds one level. Both resolve their limit through
    nesting_budget(), so a tree accepted by a parser with
    max_nesting_depth=N is walkable by a visitor with max_depth=N.

Python 3.13+.
"""

from collections.abc import Callable
from typing import ClassVar

from xferlang.core.depth_guard import DepthGuard

from .elements import ArrayElement, Document, Element, KeyValuePair, ObjectElement

__all__ = ["ElementVisitor", "Node"]

type Node = Element | KeyValuePair | Document


class ElementVisitor[T = Node]:
    """Base visitor for traversing element trees.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses all child nodes. Override visit_ClassName methods to add
    custom behavior.

    Uses a class-level dispatch table built once per subclass via
    __init_subclass__, plus an instance-level cache of bound methods.

    Example:
        >>> class CountStrings(ElementVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_StringElement(self, node):
        ...         self.count += 1
        ...         return node
        ...
        >>> visitor = CountStrings()
        >>> visitor.visit(parse('["a" "b" 3]'))
        >>> visitor.count
        2
    """

    __slots__ = ("_depth_guard", "_instance_dispatch_cache")

    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                cls._class_visit_methods[name[6:]] = name

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard and dispatch cache.

        Subclasses MUST call super().__init__().

        Args:
            max_depth: Maximum array/object nesting depth (default: MAX_DEPTH).

        Raises:
            ValueError: If max_depth is not positive
        """
        self._depth_guard = DepthGuard(max_depth)
        self._instance_dispatch_cache: dict[type, Callable[[Node], T]] = {}

    @property
    def depth_guard(self) -> DepthGuard:
        """Guard to enter around each collection a subclass descends into."""
        return self._depth_guard

    def visit(self, node: Node) -> T:
        """Visit a node, dispatching to visit_ClassName or generic_visit.

        Args:
            node: Element, KeyValuePair or Document

        Returns:
            Result of the selected visit method
        """
        node_type = type(node)

        if node_type in self._instance_dispatch_cache:
            return self._instance_dispatch_cache[node_type](node)

        method_name = self._class_visit_methods.get(node_type.__name__)
        method = getattr(self, method_name) if method_name else self.generic_visit

        self._instance_dispatch_cache[node_type] = method
        return method(node)  # type: ignore[no-any-return]  # getattr returns Any

    def generic_visit(self, node: Node) -> T:
        """Default visitor (traverses children with depth protection).

        Args:
            node: Node to visit

        Returns:
            The node itself (identity)

        Raises:
            DepthLimitExceededError: If nesting exceeds max_depth
        """
        match node:
            case Document():
                self.visit(node.root)
            case ArrayElement():
                with self._depth_guard:
                    for item in node.items:
                        self.visit(item)
            case ObjectElement():
                with self._depth_guard:
                    for pair in node.pairs:
                        self.visit(pair)
            case KeyValuePair():
                self.visit(node.value)
            case _:
                pass  # Scalars have no children

        return node  # type: ignore[return-value]  # T defaults to Node
