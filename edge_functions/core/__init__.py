from .exceptions import (
    DecodeError,
    FunctionsError,
    InvalidArgumentError,
    RelayError,
    TransportError,
    TransportTimeoutError,
)

__all__ = [
    "DecodeError",
    "FunctionsError",
    "InvalidArgumentError",
    "RelayError",
    "TransportError",
    "TransportTimeoutError",
]
