"""Tests for the xferlang package __init__.py module.

Covers:
- __all__ integrity: every exported name is accessible, and the list is exact
- Fallback version when package metadata is unavailable
"""

from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError
from unittest.mock import MagicMock, patch

import xferlang

_EXPECTED_EXPORTS = frozenset({
    "ArrayElement",
    "BooleanElement",
    "Document",
    "DoubleElement",
    "Element",
    "IntegerElement",
    "KeyValuePair",
    "NullElement",
    "ObjectElement",
    "StringElement",
    "XferError",
    "XferParser",
    "XferSyntaxError",
    "__version__",
    "parse",
    "render_tree",
    "to_json",
    "to_python",
})


class TestAllExports:
    """__all__ integrity: every exported name must be accessible from xferlang."""

    def test_all_exports_are_accessible(self) -> None:
        """Every name in xferlang.__all__ resolves without error."""
        for name in xferlang.__all__:
            assert hasattr(xferlang, name), (
                f"xferlang.__all__ contains {name!r} but xferlang.{name} raises AttributeError"
            )

    def test_all_exports_exact(self) -> None:
        """__all__ lists exactly the public surface, with no duplicates.

        Acts as a tripwire: adding or removing an export without updating
        this set fails immediately.
        """
        assert len(xferlang.__all__) == len(set(xferlang.__all__))
        assert set(xferlang.__all__) == _EXPECTED_EXPORTS

    def test_only_version_metadata(self) -> None:
        """__version__ is the only package metadata attribute besides __all__."""
        metadata = {
            name
            for name in vars(xferlang)
            if name.startswith("__")
            and name.endswith("__")
            and isinstance(getattr(xferlang, name), str)
            and name not in {"__name__", "__doc__", "__package__", "__file__", "__cached__"}
        }

        assert metadata == {"__version__"}

    def test_parse_roundtrip_through_package(self) -> None:
        """The top-level parse and to_json cooperate."""
        assert xferlang.to_json(xferlang.parse("{a[1 ~true]}")) == '{"a": [1, true]}'


def test_package_not_found_error() -> None:
    """PackageNotFoundError during metadata lookup sets __version__ to the dev fallback."""
    saved = sys.modules.pop("xferlang")

    try:
        mock_version = MagicMock(side_effect=PackageNotFoundError("xferlang"))

        with patch("importlib.metadata.version", mock_version):
            import xferlang as reloaded

            assert reloaded.__version__ == "0.0.0+dev", (
                "Expected fallback version '0.0.0+dev' when package not found, "
                f"got {reloaded.__version__!r}"
            )
    finally:
        sys.modules["xferlang"] = saved
