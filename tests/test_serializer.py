"""Tests for syntax/serializer.py: JSON export, Python conversion, tree rendering.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tests.strategies import elements
from xferlang import parse
from xferlang.core.depth_guard import DepthLimitExceededError
from xferlang.syntax import render_tree, to_json, to_python
from xferlang.syntax.elements import (
    ArrayElement,
    Document,
    DoubleElement,
    Element,
    IntegerElement,
    NullElement,
    StringElement,
)

EXAMPLE = '{name"Alice"age 30 isMember~true scores[*85 *90 *78.5]}'


# ============================================================================
# JSON
# ============================================================================


class TestToJson:
    """Test to_json()."""

    def test_documented_example(self) -> None:
        """Objects, arrays and every scalar kind."""
        assert to_json(parse(EXAMPLE)) == (
            '{"name": "Alice", "age": 30, "isMember": true, "scores": [85.0, 90.0, 78.5]}'
        )

    def test_duplicate_keys_preserved(self) -> None:
        """Every repeated key is written, in order."""
        assert to_json(parse("{a 1 b ? a 2}")) == '{"a": 1, "b": null, "a": 2}'

    def test_scalars(self) -> None:
        """Scalar roots export as JSON scalars."""
        assert to_json(parse("?")) == "null"
        assert to_json(parse("~false")) == "false"
        assert to_json(parse("-12")) == "-12"
        assert to_json(parse("^0.5")) == "0.5"
        assert to_json(parse('"x"')) == '"x"'

    def test_accepts_elements(self) -> None:
        """Elements export without a Document wrapper."""
        assert to_json(IntegerElement(5)) == "5"
        assert to_json(ArrayElement((NullElement(),))) == "[null]"

    def test_empty_collections(self) -> None:
        """Empty collections stay on one line even when indenting."""
        assert to_json(parse("[{} []]")) == "[{}, []]"
        assert to_json(parse("[]"), indent=2) == "[]"

    def test_non_finite_doubles_are_null(self) -> None:
        """Infinities have no JSON form."""
        assert to_json(parse("[^" + "9" * 400 + "]")) == "[null]"
        assert to_json(DoubleElement(float("nan"))) == "null"

    def test_strings_escaped(self) -> None:
        """Quotes are impossible in strings but backslashes and controls are escaped."""
        source = '"back\\slash\ttab\nnewline"'

        assert json.loads(to_json(parse(source))) == "back\\slash\ttab\nnewline"

    def test_non_ascii_kept(self) -> None:
        """Non-ASCII text is written as is, not as \\u escapes."""
        assert to_json(parse('{名前"größe"}')) == '{"名前": "größe"}'

    def test_indent_matches_json_module(self) -> None:
        """Indented output matches json.dumps for duplicate-free trees."""
        document = parse('{a[1 2 {b"c"}] d{} e[]}')

        assert to_json(document, indent=2) == json.dumps(
            {"a": [1, 2, {"b": "c"}], "d": {}, "e": []}, indent=2
        )

    def test_indent_zero(self) -> None:
        """indent=0 puts members on their own lines without indentation."""
        assert to_json(parse("[1 2]"), indent=0) == "[\n1,\n2\n]"

    def test_depth_limit(self) -> None:
        """Nesting beyond max_depth raises DepthLimitExceededError."""
        document = parse("[[[[]]]]")

        assert to_json(document, max_depth=4) == "[[[[]]]]"
        with pytest.raises(DepthLimitExceededError):
            to_json(document, max_depth=3)

    @given(elements())
    def test_json_loads_agrees_with_to_python(self, element: Element) -> None:
        """Decoding the JSON gives the same values as to_python()."""
        assert json.loads(to_json(element)) == to_python(element)

    @given(elements(), st.integers(min_value=0, max_value=4))
    def test_indent_does_not_change_content(self, element: Element, indent: int) -> None:
        """Indentation changes layout only."""
        assert json.loads(to_json(element, indent=indent)) == json.loads(to_json(element))


# ============================================================================
# Python values
# ============================================================================


class TestToPython:
    """Test to_python()."""

    def test_documented_example(self) -> None:
        """Objects become dicts and arrays become lists."""
        assert to_python(parse(EXAMPLE)) == {
            "name": "Alice",
            "age": 30,
            "isMember": True,
            "scores": [85.0, 90.0, 78.5],
        }

    def test_duplicate_keys_last_wins(self) -> None:
        """A dict keeps the last value for a repeated key."""
        assert to_python(parse("{a 1 a 2}")) == {"a": 2}

    def test_scalars(self) -> None:
        """Scalars map to None, bool, int, float and str."""
        assert to_python(parse("[? ~true 3 ^1.5 \"s\"]")) == [None, True, 3, 1.5, "s"]

    def test_integer_stays_int(self) -> None:
        """Integers are not converted to float."""
        value = to_python(parse("#7"))

        assert value == 7
        assert isinstance(value, int)

    def test_depth_limit(self) -> None:
        """Nesting beyond max_depth raises DepthLimitExceededError."""
        with pytest.raises(DepthLimitExceededError):
            to_python(parse("{a{b{c?}}}"), max_depth=2)


# ============================================================================
# Tree rendering
# ============================================================================


class TestRenderTree:
    """Test render_tree()."""

    def test_documented_example(self) -> None:
        """One line per element, keys as labels, two-space indentation."""
        assert render_tree(parse(EXAMPLE)) == "\n".join(
            [
                "Object (4 pairs)",
                '  name: String "Alice"',
                "  age: Integer 30",
                "  isMember: Boolean true",
                "  scores: Array (3 items)",
                "    Double 85.0",
                "    Double 90.0",
                "    Double 78.5",
            ]
        )

    def test_scalar_root(self) -> None:
        """A scalar document renders as a single line."""
        assert render_tree(parse("?")) == "Null"
        assert render_tree(Document(StringElement("a\nb"))) == 'String "a\\nb"'

    def test_singular_counts(self) -> None:
        """Counts of one use the singular noun."""
        assert render_tree(parse("[{k ~false}]")) == "\n".join(
            ["Array (1 item)", "  Object (1 pair)", "    k: Boolean false"]
        )

    def test_empty_collections(self) -> None:
        """Empty collections render their header only."""
        assert render_tree(parse("[[] {}]")) == "\n".join(
            ["Array (2 items)", "  Array (0 items)", "  Object (0 pairs)"]
        )

    def test_duplicate_keys_listed(self) -> None:
        """Every pair is rendered, repeats included."""
        assert render_tree(parse("{a 1 a 2}")).splitlines()[1:] == [
            "  a: Integer 1",
            "  a: Integer 2",
        ]

    def test_depth_limit(self) -> None:
        """Nesting beyond max_depth raises DepthLimitExceededError."""
        with pytest.raises(DepthLimitExceededError):
            render_tree(parse("[[]]"), max_depth=1)
