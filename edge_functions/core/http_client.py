import logging

import httpx

from .config import FunctionsConfig

logger = logging.getLogger(__name__)


class HttpClientFactory:
    """
    HTTP Client Factory for centralized SSL verification and pool limits.
    """

    def __init__(self, config: FunctionsConfig):
        self.config = config

    def create_sync_client(self, **kwargs) -> httpx.Client:
        """
        Create an httpx.Client with configured SSL verification.

        Args:
            **kwargs: Additional arguments for httpx.Client
        """
        verify = kwargs.pop("verify", None)

        # If verify is not explicitly provided, use config default
        if verify is None:
            verify = self.config.VERIFY_SSL
        if not verify:
            logger.debug("Creating HTTP client with SSL verification disabled")

        if "limits" not in kwargs:
            kwargs["limits"] = httpx.Limits(
                max_keepalive_connections=self.config.HTTP_MAX_KEEPALIVE_CONNECTIONS,
                max_connections=self.config.HTTP_MAX_CONNECTIONS,
            )
        kwargs.setdefault("trust_env", self.config.HTTP_TRUST_ENV)

        return httpx.Client(verify=verify, **kwargs)
