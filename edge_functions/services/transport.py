"""
HTTP transport.

Defines the transport contract the invoker relies on and the default
implementation backed by a synchronous httpx.Client.
"""

import logging
import time
from typing import Any, Callable, Iterator, Optional, Protocol

import httpx

from edge_functions.core.exceptions import (
    InvalidArgumentError,
    TransportError,
    TransportTimeoutError,
)
from edge_functions.models.request import FunctionRequest, FunctionResponse

logger = logging.getLogger("edge_functions.transport")

_clock = time.monotonic

StreamHandler = Callable[[int, httpx.Headers, Iterator[bytes]], Any]


class Transport(Protocol):
    def send_buffered(
        self, request: FunctionRequest, *, receive_timeout: int, request_timeout: int
    ) -> FunctionResponse: ...

    def send_streaming(
        self,
        request: FunctionRequest,
        on_response: StreamHandler,
        *,
        receive_timeout: int,
        request_timeout: int,
    ) -> Any: ...


class _Deadline:
    """Overall request budget measured on the monotonic clock."""

    def __init__(self, timeout_ms: int):
        self.timeout_ms = timeout_ms
        self.expires_at = _clock() + timeout_ms / 1000

    def check(self) -> None:
        if _clock() > self.expires_at:
            raise TransportTimeoutError(f"Request timed out after {self.timeout_ms} ms")


def _wrap_httpx_error(exc: httpx.HTTPError) -> TransportError:
    if isinstance(exc, httpx.TimeoutException):
        return TransportTimeoutError(f"Request timed out: {exc}", cause=exc)
    return TransportError(f"Request failed: {exc}", cause=exc)


class HttpxTransport:
    """
    Transport over httpx.Client.

    receive_timeout bounds every socket operation (connect, each read, write,
    pool acquisition); request_timeout bounds the whole exchange.
    """

    def __init__(self, client: Optional[httpx.Client] = None):
        self._owns_client = client is None
        self.client = client or httpx.Client()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _build(self, request: FunctionRequest, receive_timeout: int) -> httpx.Request:
        try:
            return self.client.build_request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.content,
                timeout=httpx.Timeout(receive_timeout / 1000),
            )
        except httpx.InvalidURL as e:
            raise InvalidArgumentError(f"Invalid function URL {request.url!r}: {e}") from e

    def send_buffered(
        self, request: FunctionRequest, *, receive_timeout: int, request_timeout: int
    ) -> FunctionResponse:
        deadline = _Deadline(request_timeout)
        http_request = self._build(request, receive_timeout)
        try:
            response = self.client.send(http_request, stream=True)
            try:
                chunks = []
                for chunk in response.iter_bytes():
                    deadline.check()
                    chunks.append(chunk)
                deadline.check()
            finally:
                response.close()
        except httpx.HTTPError as e:
            raise _wrap_httpx_error(e) from e

        return FunctionResponse(
            status=response.status_code, headers=response.headers, body=b"".join(chunks)
        )

    def send_streaming(
        self,
        request: FunctionRequest,
        on_response: StreamHandler,
        *,
        receive_timeout: int,
        request_timeout: int,
    ) -> Any:
        deadline = _Deadline(request_timeout)
        http_request = self._build(request, receive_timeout)
        try:
            response = self.client.send(http_request, stream=True)
        except httpx.HTTPError as e:
            raise _wrap_httpx_error(e) from e

        def chunks() -> Iterator[bytes]:
            try:
                for chunk in response.iter_bytes():
                    deadline.check()
                    yield chunk
            except httpx.HTTPError as e:
                raise _wrap_httpx_error(e) from e

        try:
            return on_response(response.status_code, response.headers, chunks())
        finally:
            response.close()
