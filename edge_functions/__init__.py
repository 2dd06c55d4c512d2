"""
Client for invoking Edge Functions through the functions gateway.
"""

from edge_functions.client import FunctionsClient, invoke, update_auth
from edge_functions.core.exceptions import (
    DecodeError,
    FunctionsError,
    InvalidArgumentError,
    RelayError,
    TransportError,
    TransportTimeoutError,
)
from edge_functions.core.logging_config import setup_logging
from edge_functions.models import (
    Credentials,
    FunctionResponse,
    HttpMethod,
    InvocationResult,
    InvokeOptions,
    Region,
)
from edge_functions.services.transport import HttpxTransport, Transport

__version__ = "0.1.1"

__all__ = [
    "Credentials",
    "DecodeError",
    "FunctionResponse",
    "FunctionsClient",
    "FunctionsError",
    "HttpMethod",
    "HttpxTransport",
    "InvalidArgumentError",
    "InvocationResult",
    "InvokeOptions",
    "Region",
    "RelayError",
    "Transport",
    "TransportError",
    "TransportTimeoutError",
    "invoke",
    "setup_logging",
    "update_auth",
]
