"""Encode Python values to the Firestore REST API 'fields' format.

SERVER_TIMESTAMP is a sentinel: it is not encoded as a value but turned into
a REQUEST_TIME field transform so the server clock sets the field.
"""

import base64
from datetime import datetime
from typing import Any


class _ServerTimestamp:
    """Sentinel type for SERVER_TIMESTAMP."""

    _instance: "_ServerTimestamp | None" = None

    def __new__(cls) -> "_ServerTimestamp":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


def encode_value(v: Any) -> dict:
    if v is None:
        return {"nullValue": None}
    if isinstance(v, bool):
        return {"booleanValue": v}
    if isinstance(v, int):
        return {"integerValue": str(v)}
    if isinstance(v, float):
        return {"doubleValue": v}
    if isinstance(v, datetime):
        return {"timestampValue": v.strftime("%Y-%m-%dT%H:%M:%S.%fZ")}
    if isinstance(v, str):
        return {"stringValue": v}
    if isinstance(v, bytes):
        return {"bytesValue": base64.standard_b64encode(v).decode("ascii")}
    if isinstance(v, list):
        if any(x is SERVER_TIMESTAMP for x in v):
            raise TypeError("SERVER_TIMESTAMP cannot be used inside an array")
        return {"arrayValue": {"values": [encode_value(x) for x in v]}}
    if isinstance(v, dict):
        return {"mapValue": {"fields": {k: encode_value(x) for k, x in v.items()}}}
    raise TypeError(f"Unsupported Firestore value type: {type(v)}")


def _split(data: dict[str, Any], prefix: str = "") -> tuple[dict, list[str]]:
    """Return (encoded fields, dotted paths of SERVER_TIMESTAMP sentinels)."""
    fields: dict[str, dict] = {}
    server_paths: list[str] = []
    for key, value in data.items():
        path = f"{prefix}{key}"
        if value is SERVER_TIMESTAMP:
            server_paths.append(path)
        elif isinstance(value, dict):
            nested, nested_paths = _split(value, prefix=f"{path}.")
            fields[key] = {"mapValue": {"fields": nested}}
            server_paths.extend(nested_paths)
        else:
            fields[key] = encode_value(value)
    return fields, server_paths


def encode_write(document_name: str, data: dict[str, Any]) -> dict:
    """Build a full-overwrite Write for documents:commit.

    Args:
        document_name: Full resource name (projects/.../documents/<path>).
        data: Document data; SERVER_TIMESTAMP values become transforms.

    Returns:
        A Firestore REST Write object.
    """
    fields, server_paths = _split(data)
    write: dict[str, Any] = {"update": {"name": document_name, "fields": fields}}
    if server_paths:
        write["updateTransforms"] = [
            {"fieldPath": path, "setToServerValue": "REQUEST_TIME"}
            for path in server_paths
        ]
    return write
