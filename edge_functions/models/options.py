"""
Invocation options models.

Per-call options accepted by `invoke`. Validation happens before any request
is built so malformed options never reach the network.
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

DEFAULT_TIMEOUT_MS = 15_000


class Region(str, Enum):
    ANY = "any"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"
    US_EAST_1 = "us-east-1"
    EU_WEST_1 = "eu-west-1"
    EU_WEST_2 = "eu-west-2"
    EU_WEST_3 = "eu-west-3"
    AP_SOUTH_1 = "ap-south-1"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_NORTHEAST_2 = "ap-northeast-2"
    SA_EAST_1 = "sa-east-1"
    CA_CENTRAL_1 = "ca-central-1"
    EU_CENTRAL_1 = "eu-central-1"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class InvokeOptions(BaseModel):
    """
    Options for a single invocation.

    - body: bytes, text, a mapping/list (sent as JSON) or None
    - headers: custom headers, applied last
    - method: HTTP method (default POST)
    - region: region to invoke the function in
    - on_response: stream handler `(status, headers, chunks) -> result`
    - timeout: receive and request timeout in milliseconds (default 15000)
    - auth: bearer token override for this call only
    - transport: transport override for this call only
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    body: Any = None
    headers: Dict[str, str] = Field(default_factory=dict)
    method: HttpMethod = HttpMethod.POST
    region: Optional[Region] = None
    on_response: Optional[Callable[..., Any]] = None
    timeout: PositiveInt = DEFAULT_TIMEOUT_MS
    auth: Optional[str] = None
    transport: Any = None

    @field_validator("method", mode="before")
    @classmethod
    def _normalize_method(cls, value: Any) -> Any:
        if value is None:
            return HttpMethod.POST
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("headers", mode="before")
    @classmethod
    def _default_headers(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("timeout", mode="before")
    @classmethod
    def _default_timeout(cls, value: Any) -> Any:
        return DEFAULT_TIMEOUT_MS if value is None else value
