from .credentials import Credentials
from .options import DEFAULT_TIMEOUT_MS, HttpMethod, InvokeOptions, Region
from .request import FunctionRequest, FunctionResponse
from .result import InvocationResult

__all__ = [
    "Credentials",
    "DEFAULT_TIMEOUT_MS",
    "FunctionRequest",
    "FunctionResponse",
    "HttpMethod",
    "InvocationResult",
    "InvokeOptions",
    "Region",
]
