"""Wiring of settings, authentication and services for a console session."""

import logging
from typing import Optional

from ..auth.digest import DigestAuthenticationService
from ..auth.identity import NoTokenIdentity
from ..auth.keycloak import KeycloakIdentityService
from ..config.settings import ConsoleSettings, get_settings
from ..core.protocols import AuthenticationCapability, TokenIdentityProvider
from ..rest.dispatcher import AuthenticationDispatcher
from ..rest.normalizer import ResponseNormalizer
from .cache_service import CacheService
from .data_container_service import DataContainerService

logger = logging.getLogger(__name__)


class ConsoleServices:
    """Entry point holding the services of one console session."""

    def __init__(
        self,
        settings: Optional[ConsoleSettings] = None,
        token_provider: Optional[TokenIdentityProvider] = None,
        authentication: Optional[AuthenticationCapability] = None
    ):
        """
        Initialize the session services.

        Args:
            settings: Console settings, read from the environment when omitted
            token_provider: Token identity, Keycloak when configured
            authentication: Authentication capability, digest from settings when omitted
        """
        self.settings = settings or get_settings()
        self.token_provider = token_provider or self._default_token_provider()
        self.authentication = authentication or DigestAuthenticationService.from_settings(self.settings)

        self.normalizer = ResponseNormalizer()
        self.dispatcher = AuthenticationDispatcher(
            self.token_provider,
            self.authentication,
            timeout=self.settings.request_timeout,
            verify_ssl=self.settings.verify_ssl,
        )
        endpoint = self.settings.rest_endpoint
        self._cache_service = CacheService(endpoint, self.dispatcher, self.normalizer)
        self._data_container = DataContainerService(endpoint, self.dispatcher, self.normalizer)

        logger.debug(f"Console services initialized for {endpoint}")

    def _default_token_provider(self) -> TokenIdentityProvider:
        if self.settings.keycloak_enabled:
            return KeycloakIdentityService.from_settings(self.settings)
        return NoTokenIdentity()

    def caches(self) -> CacheService:
        return self._cache_service

    def data_container(self) -> DataContainerService:
        return self._data_container

    async def aclose(self) -> None:
        """Close the HTTP clients of the session."""
        await self.dispatcher.aclose()
        close = getattr(self.authentication, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
