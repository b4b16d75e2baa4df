#!/usr/bin/env python3
"""Parser and Exporter Fuzzer (Atheris).

Targets: xferlang.syntax.XferParser, xferlang.syntax.to_json,
         xferlang.syntax.render_tree, xferlang.bridge.xfer_parse

Invariants:
- parse() either returns a Document or raises XferError / ValueError
- A parsed document always exports to JSON that json.loads() accepts
- A parsed document always renders as a tree
- xfer_parse() never raises; non-zero handles free cleanly

Pattern Routing:
The first fuzzed byte selects raw text, sigil-biased text or a
bracket-heavy nesting case, so libFuzzer mutations reach the collection
rules as often as the scalar rules.

Requires Python 3.13+.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import atheris

with atheris.instrument_imports(include=["xferlang"]):
    from xferlang.bridge import NULL_HANDLE, xfer_free, xfer_parse
    from xferlang.diagnostics import XferError
    from xferlang.syntax import XferParser, render_tree, to_json

logging.getLogger("xferlang").setLevel(logging.CRITICAL)

atheris.enabled_hooks.add("str")

_SIGIL_ALPHABET = '"#^*~?[]{}-.0123456789 \t\nabc_'

_parser = XferParser(max_source_size=64 * 1024)


class ParserFuzzError(Exception):
    """Raised when a parser or exporter invariant is breached."""


def _sigil_text(fdp: atheris.FuzzedDataProvider) -> str:
    count = fdp.ConsumeIntInRange(0, 256)
    return "".join(
        _SIGIL_ALPHABET[fdp.ConsumeIntInRange(0, len(_SIGIL_ALPHABET) - 1)]
        for _ in range(count)
    )


def _nesting_text(fdp: atheris.FuzzedDataProvider) -> str:
    depth = fdp.ConsumeIntInRange(0, 400)
    opener = "[" if fdp.ConsumeBool() else "{k "
    closer = "]" if opener == "[" else "}"
    return opener * depth + fdp.ConsumeUnicodeNoSurrogates(16) + closer * depth


def _check_document(source: str) -> None:
    try:
        document = _parser.parse(source)
    except (XferError, ValueError):
        return

    text = to_json(document)
    try:
        json.loads(text)
    except ValueError as e:
        msg = f"to_json produced invalid JSON for {source!r}: {text!r}"
        raise ParserFuzzError(msg) from e

    render_tree(document)


def _check_bridge(source: str) -> None:
    handle = xfer_parse(source)
    if handle != NULL_HANDLE:
        xfer_free(handle)


def test_one_input(data: bytes) -> None:
    """Atheris entry point: parse, export and bridge one input."""
    fdp = atheris.FuzzedDataProvider(data)

    match fdp.ConsumeIntInRange(0, 2):
        case 0:
            source = fdp.ConsumeUnicodeNoSurrogates(fdp.remaining_bytes())
        case 1:
            source = _sigil_text(fdp)
        case _:
            source = _nesting_text(fdp)

    _check_document(source)
    _check_bridge(source)


def main() -> None:
    """Run the parser fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="Parser and exporter fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    _, remaining = parser.parse_known_args()

    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=2048")

    sys.argv = [sys.argv[0], *remaining]

    print("Parser and Exporter Fuzzer (Atheris)")
    print("Target:     XferParser, to_json, render_tree, xfer_parse")

    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
