"""Encode/decode Python values to/from Firestore REST API 'fields' format."""

import base64
import re
from datetime import datetime
from enum import Enum
from typing import Any

from lawdesk.shared.utils.datetime import ensure_utc

# Firestore may return nanosecond precision; datetime holds microseconds.
_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def encode_value(v: Any) -> dict:
    """Encode one Python value as a Firestore REST Value."""
    if v is None:
        return {"nullValue": None}
    if isinstance(v, bool):
        return {"booleanValue": v}
    if isinstance(v, Enum):
        return encode_value(v.value)
    if isinstance(v, int):
        return {"integerValue": str(v)}
    if isinstance(v, float):
        return {"doubleValue": v}
    if isinstance(v, datetime):
        utc = ensure_utc(v)
        return {"timestampValue": utc.strftime("%Y-%m-%dT%H:%M:%S.%fZ")}
    if isinstance(v, str):
        return {"stringValue": v}
    if isinstance(v, bytes):
        return {"bytesValue": base64.standard_b64encode(v).decode("ascii")}
    if isinstance(v, (list, tuple)):
        return {"arrayValue": {"values": [encode_value(x) for x in v]}}
    if isinstance(v, dict):
        return {"mapValue": {"fields": {k: encode_value(x) for k, x in v.items()}}}
    raise TypeError(f"Unsupported Firestore value type: {type(v)}")


def encode_document(data: dict[str, Any]) -> dict:
    """Convert a Python dict to a Firestore REST Document body ({"fields": ...})."""
    return {"fields": {k: encode_value(v) for k, v in data.items()}}


def decode_value(obj: dict) -> Any:
    """Decode one Firestore REST Value into a Python value."""
    if "nullValue" in obj:
        return None
    if "booleanValue" in obj:
        return obj["booleanValue"]
    if "integerValue" in obj:
        return int(obj["integerValue"])
    if "doubleValue" in obj:
        return float(obj["doubleValue"])
    if "timestampValue" in obj:
        raw = _FRACTION_RE.sub(r"\1", obj["timestampValue"])
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))
    if "stringValue" in obj:
        return obj["stringValue"]
    if "bytesValue" in obj:
        return base64.standard_b64decode(obj["bytesValue"])
    if "arrayValue" in obj:
        vals = obj.get("arrayValue", {}).get("values") or []
        return [decode_value(x) for x in vals]
    if "mapValue" in obj:
        fields = obj["mapValue"].get("fields") or {}
        return {k: decode_value(x) for k, x in fields.items()}
    return None


def decode_document(document: dict | None) -> dict:
    """Convert a Firestore REST Document (with a "fields" map) to a Python dict."""
    if not document:
        return {}
    return {k: decode_value(v) for k, v in (document.get("fields") or {}).items()}
