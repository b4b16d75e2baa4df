"""Handle-based entry points for foreign callers.

Ownership contract:
    xfer_parse() and xfer_to_json() return owned, non-zero handles. Each must
    be released exactly once, document handles with xfer_free() and text
    handles with xfer_free_text(). Zero is the null handle: it signals
    failure on return and is a no-op when freed.

    Using a handle after it was freed, or freeing it twice, is a caller
    error. Unknown handles are logged as warnings and treated like the null
    handle, but callers must not rely on that.

Failures never raise across the bridge. Parse errors, invalid UTF-8 and
trees outside the reduced value model all return the null handle and are
logged at debug level.

Thread-safe: handle tables are lock protected; parsing holds no shared state.
"""

import logging
from dataclasses import dataclass

from xferlang.diagnostics import XferError
from xferlang.syntax import Document, parse, to_json

from .handles import NULL_HANDLE, HandleTable
from .values import BridgeValue, narrow

__all__ = [
    "xfer_free",
    "xfer_free_text",
    "xfer_parse",
    "xfer_text",
    "xfer_to_json",
    "xfer_value",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _OwnedDocument:
    document: Document
    value: BridgeValue


_documents: HandleTable[_OwnedDocument] = HandleTable("document")
_texts: HandleTable[str] = HandleTable("text")


def _lookup[T](table: HandleTable[T], handle: int | None, operation: str) -> T | None:
    if not handle:
        return None
    obj = table.get(handle)
    if obj is None:
        logger.warning("%s: unknown %s handle %d", operation, table.name, handle)
    return obj


def _release[T](table: HandleTable[T], handle: int | None, operation: str) -> None:
    if not handle:
        return
    if table.release(handle):
        logger.debug("Released %s handle %d", table.name, handle)
    else:
        logger.warning(
            "%s: unknown %s handle %d (double free or foreign handle)",
            operation,
            table.name,
            handle,
        )


def xfer_parse(text: str | bytes | None) -> int:
    """Parse text and return an owned document handle.

    Args:
        text: Format text, or UTF-8 encoded bytes

    Returns:
        Non-zero document handle, or NULL_HANDLE (0) on any failure
    """
    if text is None:
        logger.debug("xfer_parse: null input")
        return NULL_HANDLE

    try:
        source = text.decode("utf-8") if isinstance(text, bytes) else text
        document = parse(source)
        value = narrow(document)
    except (XferError, ValueError) as e:
        # UnicodeDecodeError and oversized input are both ValueError
        logger.debug("xfer_parse: %s: %s", type(e).__name__, e)
        return NULL_HANDLE

    handle = _documents.allocate(_OwnedDocument(document, value))
    logger.debug("Allocated document handle %d", handle)
    return handle


def xfer_free(handle: int | None) -> None:
    """Release a document handle. NULL_HANDLE and None are no-ops."""
    _release(_documents, handle, "xfer_free")


def xfer_value(handle: int | None) -> BridgeValue | None:
    """Read the reduced value behind a document handle without taking ownership."""
    owned = _lookup(_documents, handle, "xfer_value")
    return owned.value if owned is not None else None


def xfer_to_json(handle: int | None) -> int:
    """Serialize a document to JSON.

    Args:
        handle: Document handle

    Returns:
        New owned text handle (release with xfer_free_text()), or
        NULL_HANDLE for a null or unknown document handle
    """
    owned = _lookup(_documents, handle, "xfer_to_json")
    if owned is None:
        return NULL_HANDLE

    text_handle = _texts.allocate(to_json(owned.document))
    logger.debug("Allocated text handle %d for document handle %d", text_handle, handle)
    return text_handle


def xfer_text(text_handle: int | None) -> str | None:
    """Read the string behind a text handle without taking ownership."""
    return _lookup(_texts, text_handle, "xfer_text")


def xfer_free_text(text_handle: int | None) -> None:
    """Release a text handle. NULL_HANDLE and None are no-ops."""
    _release(_texts, text_handle, "xfer_free_text")
