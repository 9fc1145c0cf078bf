"""HTTP digest authentication capability."""

import logging
from typing import Any, Dict, Optional

import httpx

from ..config.settings import ConsoleSettings
from ..core.exceptions import ConfigurationError
from ..rest.transport import HttpxClientHolder

logger = logging.getLogger(__name__)


class DigestAuthenticatedClient(HttpxClientHolder):
    """Client answering the server's digest challenge on each request."""

    def __init__(
        self,
        username: str,
        password: str,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        client: Optional[httpx.AsyncClient] = None
    ):
        super().__init__(
            timeout=timeout,
            verify_ssl=verify_ssl,
            auth=httpx.DigestAuth(username, password),
            client=client,
        )
        self.username = username

    async def fetch(self, url: str, options: Dict[str, Any]) -> httpx.Response:
        """Issue a request described by ``options`` with digest credentials."""
        logger.debug(f"Digest {options['method']} {url} as {self.username}")
        return await self._send(url, options)


class DigestAuthenticationService:
    """Authentication capability of a console session using digest credentials."""

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        not_secured: bool = False,
        timeout: float = 30.0,
        verify_ssl: bool = True
    ):
        """
        Initialize the service.

        Args:
            username: Digest username
            password: Digest password
            not_secured: Whether the server runs without security
            timeout: Request timeout in seconds
            verify_ssl: Whether to verify SSL certificates
        """
        self._username = username
        self._password = password
        self._not_secured = not_secured
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._client: Optional[DigestAuthenticatedClient] = None

    @classmethod
    def from_settings(cls, settings: ConsoleSettings) -> "DigestAuthenticationService":
        """Build the service from console settings."""
        password = settings.digest_password
        return cls(
            username=settings.digest_username,
            password=password.get_secret_value() if password else None,
            not_secured=not settings.security_enabled,
            timeout=settings.request_timeout,
            verify_ssl=settings.verify_ssl,
        )

    def is_not_secured(self) -> bool:
        return self._not_secured

    def get_authenticated_client(self) -> DigestAuthenticatedClient:
        """Digest client for this session, created on first use.

        Raises:
            ConfigurationError: If no credentials are configured
        """
        if self._client is None:
            if not self._username or self._password is None:
                raise ConfigurationError(
                    "Digest credentials are not configured",
                    details={"setting": "digest_username"}
                )
            self._client = DigestAuthenticatedClient(
                self._username,
                self._password,
                timeout=self._timeout,
                verify_ssl=self._verify_ssl,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
