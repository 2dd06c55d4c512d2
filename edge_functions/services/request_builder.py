"""
Request Builder

Assembles a FunctionRequest from credentials, a function name and invocation
options. No network activity happens here.
"""

import logging
from urllib.parse import quote

import httpx

from edge_functions.core.exceptions import InvalidArgumentError
from edge_functions.models.credentials import Credentials
from edge_functions.models.options import InvokeOptions, Region
from edge_functions.models.request import FunctionRequest
from edge_functions.services.content_type import encode_body

logger = logging.getLogger("edge_functions.request_builder")

FUNCTIONS_PATH = "/functions/v1"
REGION_HEADER = "x-region"


def validate_function_name(name: str) -> str:
    """
    Check that `name` can be used as a single URL path segment.

    Raises:
        InvalidArgumentError: empty, dot-segment, or containing control characters
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError("Function name is required")
    if name in (".", ".."):
        raise InvalidArgumentError(f"Invalid function name: {name!r}")
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in name):
        raise InvalidArgumentError(f"Function name contains control characters: {name!r}")
    return name


def functions_url(base_url: str, name: str) -> str:
    return f"{base_url.rstrip('/')}{FUNCTIONS_PATH}/{quote(name, safe='')}"


def build_request(
    credentials: Credentials, name: str, options: InvokeOptions
) -> FunctionRequest:
    """
    Build the request descriptor for one invocation.

    Header precedence, lowest to highest: credentials, region, inferred
    content type, caller headers.
    """
    validate_function_name(name)

    effective = credentials.with_access_token(options.auth) if options.auth else credentials

    headers = httpx.Headers()
    headers["apikey"] = effective.api_key
    if effective.access_token:
        headers["authorization"] = f"Bearer {effective.access_token}"

    if options.region is not None and options.region is not Region.ANY:
        headers[REGION_HEADER] = options.region.value

    content = None
    if options.body is not None:
        content_type, content = encode_body(options.body)
        headers["content-type"] = content_type

    for key, value in options.headers.items():
        headers[key] = value

    request = FunctionRequest(
        url=functions_url(effective.base_url, name),
        method=options.method.value,
        headers=headers,
        content=content,
    )
    logger.debug(
        f"Built request for function '{name}'",
        extra={
            "function_name": name,
            "method": request.method,
            "region": headers.get(REGION_HEADER),
            "content_type": headers.get("content-type"),
            "auth_override": bool(options.auth),
        },
    )
    return request
