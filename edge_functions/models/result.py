"""
Invocation result models.

Standardizes the output of the invocation pipeline: every outcome, including
transport, decode and relay failures, is returned as an InvocationResult.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from edge_functions.core.exceptions import FunctionsError


class InvocationResult(BaseModel):
    """
    Unified result of an Edge Function invocation.

    `value` is a FunctionResponse on the buffered path, or whatever the
    stream handler produced on the streaming path.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    value: Any = None
    error: Optional[FunctionsError] = None

    @classmethod
    def ok(cls, value: Any = None) -> "InvocationResult":
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: FunctionsError) -> "InvocationResult":
        return cls(success=False, error=error)

    @property
    def error_code(self) -> Optional[str]:
        return self.error.code if self.error is not None else None

    @property
    def is_relay_error(self) -> bool:
        """Returns True if the gateway flagged an upstream relay failure."""
        return self.error_code == "relay_error"

    def unwrap(self) -> Any:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value
