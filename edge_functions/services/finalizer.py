"""
Response Finalizer

Decodes buffered response bodies by Content-Type and maps the gateway's
x-relay-error sentinel to a RelayError.
"""

import json
from typing import Any, Callable, Dict

from edge_functions.core.exceptions import DecodeError, RelayError
from edge_functions.models.request import FunctionResponse
from edge_functions.models.result import InvocationResult

RELAY_ERROR_HEADER = "x-relay-error"
DEFAULT_CONTENT_TYPE = "text/plain"


def media_type(content_type: str) -> str:
    """`application/json; charset=utf-8` -> `application/json`"""
    return content_type.split(";", 1)[0].strip().lower()


def _decode_json(body: Any) -> Any:
    return json.loads(body)


def _identity(body: Any) -> Any:
    return body


_DECODERS: Dict[str, Callable[[Any], Any]] = {
    "application/json": _decode_json,
}


def decode_body(response: FunctionResponse) -> FunctionResponse:
    """
    Raises:
        DecodeError: body does not parse as its declared content type
    """
    content_type = response.get_header("content-type") or DEFAULT_CONTENT_TYPE
    decoder = _DECODERS.get(media_type(content_type), _identity)
    try:
        return response.with_body(decoder(response.body))
    except ValueError as e:
        raise DecodeError(content_type, response.body, e, response=response) from e


def finalize(result: InvocationResult) -> InvocationResult:
    """
    Decode and check a buffered result. Failed results pass through unchanged.
    """
    if not result.success or not isinstance(result.value, FunctionResponse):
        return result

    try:
        response = decode_body(result.value)
    except DecodeError as e:
        return InvocationResult.fail(e)

    if response.get_header(RELAY_ERROR_HEADER) == "true":
        return InvocationResult.fail(RelayError(response))
    return InvocationResult.ok(response)
