"""
Custom exception classes.

Represent errors related to Edge Function invocation. Instances are carried
inside InvocationResult by the invocation pipeline and only raised when a
caller unwraps a failed result.
"""

from typing import Any, Optional

SERVICE = "functions"


class FunctionsError(Exception):
    """Base exception class for Edge Function invocation."""

    default_code = "unknown"

    def __init__(self, message: str, code: Optional[str] = None, metadata: Any = None):
        super().__init__(message)
        self._message = message
        self._code = code or self.default_code
        self._metadata = metadata

    @property
    def service(self) -> str:
        return SERVICE

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> str:
        return self._code

    @property
    def metadata(self) -> Any:
        return self._metadata

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(service={SERVICE!r}, code={self._code!r}, "
            f"message={self._message!r})"
        )


class InvalidArgumentError(FunctionsError):
    """Raised when the function name or invocation options are invalid."""

    default_code = "invalid_argument"


class TransportError(FunctionsError):
    """Raised when the HTTP exchange itself fails (network, TLS, timeout)."""

    default_code = "transport_error"

    def __init__(
        self, message: str, cause: Optional[Exception] = None, code: Optional[str] = None
    ):
        self.cause = cause
        metadata = {"error_type": type(cause).__name__} if cause else None
        super().__init__(message, code=code, metadata=metadata)


class TransportTimeoutError(TransportError):
    """Raised when the receive or request timeout elapses."""

    default_code = "timeout"


class DecodeError(FunctionsError):
    """Raised when a response body cannot be decoded as its declared content type."""

    default_code = "decode_error"

    def __init__(self, content_type: str, body: Any, cause: Exception, response: Any = None):
        self.cause = cause
        super().__init__(
            f"Failed to decode response body as {content_type}: {cause}",
            metadata={"content_type": content_type, "body": body, "response": response},
        )


class RelayError(FunctionsError):
    """Raised when the gateway reports an upstream relay failure via x-relay-error."""

    default_code = "relay_error"

    def __init__(self, response: Any):
        super().__init__("Relay Error invoking the Edge Function", metadata=response)
