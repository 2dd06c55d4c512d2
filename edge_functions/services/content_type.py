"""
Where: edge_functions/services/content_type.py
What: Classify outbound bodies and encode them with a matching Content-Type.
Why: Callers pass bytes, text or structured values; the gateway needs bytes
     plus a declared type.

Printability is checked over the whole body, so classifying a very large raw
payload costs a full scan.
"""

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, Tuple

from pydantic import BaseModel

from edge_functions.core.exceptions import InvalidArgumentError

TEXT_PLAIN = "text/plain"
OCTET_STREAM = "application/octet-stream"
APPLICATION_JSON = "application/json"

# Control characters still considered printable text.
_PRINTABLE_CONTROLS = frozenset("\n\r\t\v\b\f\a\x1b\x7f")

# Printable code point ranges, inclusive.
_PRINTABLE_RANGES = (
    (0x20, 0x7E),
    (0xA0, 0xD7FF),
    (0xE000, 0xFFFD),
    (0x10000, 0x10FFFF),
)


class BodyKind(str, Enum):
    TEXT = "text"
    BINARY = "binary"
    JSON = "json"


_CONTENT_TYPES = {
    BodyKind.TEXT: TEXT_PLAIN,
    BodyKind.BINARY: OCTET_STREAM,
    BodyKind.JSON: APPLICATION_JSON,
}


def _is_printable_char(ch: str) -> bool:
    if ch in _PRINTABLE_CONTROLS:
        return True
    code = ord(ch)
    return any(low <= code <= high for low, high in _PRINTABLE_RANGES)


def is_printable(text: str) -> bool:
    return all(_is_printable_char(ch) for ch in text)


def _is_printable_bytes(data: bytes) -> bool:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return is_printable(text)


def classify_body(body: Any) -> BodyKind:
    """
    Decide which of the three outbound body kinds `body` belongs to.

    Raises:
        InvalidArgumentError: body is not bytes, text or a structured value
    """
    if isinstance(body, (bytes, bytearray, memoryview)):
        return BodyKind.TEXT if _is_printable_bytes(bytes(body)) else BodyKind.BINARY
    if isinstance(body, str):
        return BodyKind.TEXT if is_printable(body) else BodyKind.BINARY
    if isinstance(body, (Mapping, list, tuple, BaseModel)):
        return BodyKind.JSON
    raise InvalidArgumentError(f"Unsupported body type: {type(body).__name__}")


def content_type_for(kind: BodyKind) -> str:
    return _CONTENT_TYPES[kind]


def encode_body(body: Any) -> Tuple[str, bytes]:
    """
    Encode `body` for the wire.

    Returns:
        (inferred content type, payload bytes)
    """
    kind = classify_body(body)

    if kind is BodyKind.JSON:
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json")
        try:
            payload = json.dumps(body, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Body is not JSON serializable: {e}") from e
        return content_type_for(kind), payload

    if isinstance(body, str):
        # surrogatepass keeps lone surrogates byte-for-byte instead of failing
        return content_type_for(kind), body.encode("utf-8", errors="surrogatepass")
    return content_type_for(kind), bytes(body)
