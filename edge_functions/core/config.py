"""
Client configuration definition.

Loads configuration from environment variables (and an optional .env file)
using pydantic-settings.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FunctionsConfig(BaseSettings):
    """
    Settings for the Edge Functions client.
    """

    # Project credentials
    SUPABASE_URL: str = Field(default="", description="Project base URL")
    SUPABASE_KEY: str = Field(default="", description="Project API key")
    SUPABASE_ACCESS_TOKEN: Optional[str] = Field(
        default=None, description="Bearer token (defaults to the API key)"
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_CONFIG_PATH: str = Field(default="logging.yml", description="Logging YAML config path")

    # HTTP transport
    VERIFY_SSL: bool = Field(default=True, description="Whether to verify SSL certificates")
    HTTP_TRUST_ENV: bool = Field(
        default=True, description="Honor HTTP(S)_PROXY/NO_PROXY from the environment"
    )
    HTTP_MAX_CONNECTIONS: int = Field(default=100, description="Max open connections")
    HTTP_MAX_KEEPALIVE_CONNECTIONS: int = Field(default=20, description="Max idle connections")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )
