"""
Request descriptor and response value.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

import httpx


@dataclass
class FunctionRequest:
    """Transport-agnostic description of one invocation request."""

    url: str
    method: str
    headers: httpx.Headers
    content: Optional[bytes] = None
    # Bodies are decoded by the finalizer, never by the transport.
    decode_body: bool = False


@dataclass(frozen=True)
class FunctionResponse:
    """
    Response of a buffered invocation.

    `body` is the parsed value for application/json responses and the raw
    bytes for every other content type, text/plain included. Use `text` to
    read a raw body as a string.
    """

    status: int
    headers: httpx.Headers
    body: Any = b""

    def get_header(self, name: str) -> Optional[str]:
        return self.headers.get(name)

    def with_body(self, body: Any) -> "FunctionResponse":
        return replace(self, body=body)

    @property
    def charset(self) -> str:
        content_type = self.get_header("content-type") or ""
        for param in content_type.split(";")[1:]:
            key, _, value = param.partition("=")
            if key.strip().lower() == "charset" and value.strip():
                return value.strip().strip('"')
        return "utf-8"

    @property
    def text(self) -> str:
        if not isinstance(self.body, (bytes, bytearray)):
            return str(self.body)
        try:
            return bytes(self.body).decode(self.charset, errors="replace")
        except LookupError:
            return bytes(self.body).decode("utf-8", errors="replace")
