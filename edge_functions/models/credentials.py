"""
Client credentials.

Immutable value carrying the project base URL, API key and bearer token.
Auth updates always produce a new value.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from edge_functions.core.config import FunctionsConfig


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(..., min_length=1, description="Project base URL")
    api_key: str = Field(..., description="Project API key")
    access_token: Optional[str] = Field(default=None, description="Bearer token")

    @model_validator(mode="before")
    @classmethod
    def _default_access_token(cls, data: Any) -> Any:
        # The API key doubles as bearer token until a user session replaces it.
        if isinstance(data, dict) and data.get("access_token") is None:
            data = {**data, "access_token": data.get("api_key")}
        return data

    def with_access_token(self, token: str) -> "Credentials":
        """Return a copy of these credentials using `token` as bearer."""
        return self.model_copy(update={"access_token": token})

    @classmethod
    def from_config(cls, config: FunctionsConfig) -> "Credentials":
        return cls(
            base_url=config.SUPABASE_URL,
            api_key=config.SUPABASE_KEY,
            access_token=config.SUPABASE_ACCESS_TOKEN,
        )
