"""
Transport Invoker

Dispatches a FunctionRequest through a Transport in buffered or streaming
mode. Transport failures are returned as failed results, never retried.
"""

import logging
from typing import Any, Optional

from edge_functions.core.exceptions import FunctionsError
from edge_functions.models.request import FunctionRequest
from edge_functions.models.result import InvocationResult
from edge_functions.services.transport import StreamHandler, Transport

logger = logging.getLogger("edge_functions.invoker")


def _as_result(value: Any) -> InvocationResult:
    if isinstance(value, InvocationResult):
        return value
    if isinstance(value, FunctionsError):
        return InvocationResult.fail(value)
    return InvocationResult.ok(value)


def execute(
    request: FunctionRequest,
    transport: Transport,
    on_response: Optional[StreamHandler],
    timeout: int,
) -> InvocationResult:
    """
    Send `request` and return the raw outcome.

    Args:
        request: Request descriptor
        transport: Transport used for this call
        on_response: Stream handler; switches to streaming mode when set
        timeout: Receive and request timeout in milliseconds

    Returns:
        Buffered mode: InvocationResult holding an undecoded FunctionResponse.
        Streaming mode: the handler's result, used as the final result.
    """
    bounds = {"receive_timeout": timeout, "request_timeout": timeout}
    mode = "streaming" if on_response is not None else "buffered"
    logger.debug(
        f"Invoking {request.method} {request.url}",
        extra={"target_url": request.url, "mode": mode, "timeout_ms": timeout},
    )

    try:
        if on_response is not None:
            return _as_result(transport.send_streaming(request, on_response, **bounds))
        return InvocationResult.ok(transport.send_buffered(request, **bounds))
    except FunctionsError as e:
        return InvocationResult.fail(e)
