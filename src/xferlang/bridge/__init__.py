"""Foreign-call bridge.

Exposes parsing to callers outside Python through opaque integer handles and
a reduced value model (string, integer, boolean, list).

Python 3.13+.
"""

from .api import xfer_free, xfer_free_text, xfer_parse, xfer_text, xfer_to_json, xfer_value
from .handles import NULL_HANDLE, HandleTable
from .values import (
    BridgeBoolean,
    BridgeInteger,
    BridgeList,
    BridgeString,
    BridgeValue,
    UnsupportedElementError,
    is_bridge_value,
    narrow,
)

__all__ = [
    "NULL_HANDLE",
    "BridgeBoolean",
    "BridgeInteger",
    "BridgeList",
    "BridgeString",
    "BridgeValue",
    "HandleTable",
    "UnsupportedElementError",
    "is_bridge_value",
    "narrow",
    "xfer_free",
    "xfer_free_text",
    "xfer_parse",
    "xfer_text",
    "xfer_to_json",
    "xfer_value",
]
