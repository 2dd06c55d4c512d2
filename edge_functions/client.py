"""
Edge Functions client.

Entry points for invoking functions:

    creds = Credentials(base_url="https://xyz.supabase.co", api_key="anon-key")
    result = invoke(creds, "hello-world", body={"name": "Functions"})
    response = result.unwrap()

Bodies are sent with an inferred Content-Type (text/plain, application/octet-stream
or application/json) unless a content-type header is given. Responses are parsed as
JSON when the function declares application/json and returned as raw bytes otherwise.

Applications that want the JSON log format call `setup_logging()`, which loads
LOG_CONFIG_PATH (default logging.yml) at LOG_LEVEL from FunctionsConfig.
"""

import logging
import threading
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from edge_functions.core.config import FunctionsConfig
from edge_functions.core.exceptions import FunctionsError, InvalidArgumentError
from edge_functions.core.http_client import HttpClientFactory
from edge_functions.models.credentials import Credentials
from edge_functions.models.options import InvokeOptions
from edge_functions.models.result import InvocationResult
from edge_functions.services import finalizer, invoker
from edge_functions.services.request_builder import build_request
from edge_functions.services.transport import HttpxTransport, Transport

logger = logging.getLogger("edge_functions.client")

_default_transport: Optional[HttpxTransport] = None
_default_transport_lock = threading.Lock()


def _get_default_transport() -> HttpxTransport:
    """Shared transport for `invoke` calls without one, built from FunctionsConfig."""
    global _default_transport
    with _default_transport_lock:
        if _default_transport is None:
            factory = HttpClientFactory(FunctionsConfig())
            _default_transport = HttpxTransport(factory.create_sync_client())
        return _default_transport


def update_auth(credentials: Credentials, token: str) -> Credentials:
    """
    Return new credentials using `token` as bearer. `credentials` is left unchanged.
    """
    if not isinstance(token, str) or not token:
        raise InvalidArgumentError("Token must be a non-empty string")
    return credentials.with_access_token(token)


def _parse_options(options: Any, overrides: Mapping[str, Any]) -> InvokeOptions:
    if isinstance(options, InvokeOptions):
        data = dict(options)
    elif options is None:
        data = {}
    elif isinstance(options, Mapping):
        data = dict(options)
    else:
        raise InvalidArgumentError(f"Options must be a mapping, got {type(options).__name__}")
    data.update(overrides)

    try:
        return InvokeOptions(**data)
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid invocation options: {e}") from e


def invoke(
    credentials: Credentials,
    name: str,
    options: Optional[Mapping[str, Any]] = None,
    *,
    transport: Optional[Transport] = None,
    **kwargs: Any,
) -> InvocationResult:
    """
    Invoke an Edge Function.

    Args:
        credentials: Project credentials
        name: Function name
        options: InvokeOptions or a mapping of its fields; keyword arguments
            are merged on top
        transport: Transport to use when the options do not name one

    Returns:
        InvocationResult. On the buffered path its value is a FunctionResponse
        with a decoded body; with `on_response` it is the handler's result.
    """
    try:
        opts = _parse_options(options, kwargs)
        request = build_request(credentials, name, opts)
    except FunctionsError as e:
        return InvocationResult.fail(e)

    selected = opts.transport or transport or _get_default_transport()
    result = invoker.execute(request, selected, opts.on_response, opts.timeout)
    if opts.on_response is not None:
        return result
    return finalizer.finalize(result)


class FunctionsClient:
    """
    Credentials bound to a transport.

    A client created without a transport owns an httpx-backed one built from
    FunctionsConfig and closes it on `close()`.
    """

    def __init__(
        self,
        credentials: Credentials,
        transport: Optional[Transport] = None,
        config: Optional[FunctionsConfig] = None,
    ):
        self.credentials = credentials
        self._owned: Optional[HttpxTransport] = None
        if transport is None:
            factory = HttpClientFactory(config or FunctionsConfig())
            self._owned = HttpxTransport(factory.create_sync_client())
            transport = self._owned
        self.transport = transport

    @classmethod
    def from_config(cls, config: Optional[FunctionsConfig] = None) -> "FunctionsClient":
        config = config or FunctionsConfig()
        return cls(Credentials.from_config(config), config=config)

    def set_auth(self, token: str) -> "FunctionsClient":
        """Return a client sharing this transport with a different bearer token."""
        return FunctionsClient(update_auth(self.credentials, token), transport=self.transport)

    def invoke(
        self, name: str, options: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> InvocationResult:
        return invoke(self.credentials, name, options, transport=self.transport, **kwargs)

    def close(self) -> None:
        if self._owned is not None:
            self._owned.client.close()

    def __enter__(self) -> "FunctionsClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
