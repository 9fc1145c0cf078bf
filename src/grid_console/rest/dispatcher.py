"""Per-call selection between bearer token and challenge/response transports."""

import logging
from typing import Optional

import httpx

from ..core.protocols import AuthenticationCapability, TokenIdentityProvider
from .transport import (
    ChallengeResponseTransport,
    HeadersInput,
    RequestTransport,
    TokenAuthTransport,
)

logger = logging.getLogger(__name__)


class AuthenticationDispatcher:
    """Issues console REST calls with the authentication scheme in force.

    A request goes out directly with a bearer token when the token identity
    provider is initialized or the server is not secured. Otherwise it is
    delegated to the authentication capability's client, which negotiates
    the digest challenge.

    The dispatcher holds no per-call state; the token is read at the time of
    each call.
    """

    def __init__(
        self,
        token_provider: TokenIdentityProvider,
        authentication: AuthenticationCapability,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the dispatcher.

        Args:
            token_provider: Bearer token identity provider
            authentication: Session authentication capability
            timeout: Timeout of the direct transport, in seconds
            verify_ssl: Whether the direct transport verifies certificates
            http_client: Client used by the direct transport, created lazily when omitted
        """
        self.token_provider = token_provider
        self.authentication = authentication
        self.token_transport = TokenAuthTransport(
            token_provider,
            timeout=timeout,
            verify_ssl=verify_ssl,
            client=http_client,
        )
        self.challenge_transport = ChallengeResponseTransport(authentication)

    def create_authenticated_headers(self) -> httpx.Headers:
        """Headers carrying the bearer token when the provider is initialized.

        Callers that send their own headers start from these so the token is
        not lost on the direct transport.
        """
        return self.token_transport.create_authenticated_headers()

    def select_transport(self) -> RequestTransport:
        """Transport for the next call."""
        if self.token_provider.is_initialized() or self.authentication.is_not_secured():
            return self.token_transport
        return self.challenge_transport

    async def issue_request(
        self,
        url: str,
        method: str,
        accept: Optional[str] = None,
        custom_headers: Optional[HeadersInput] = None,
        body: Optional[str] = None
    ) -> httpx.Response:
        """
        Perform a REST call.

        Args:
            url: Target URL
            method: HTTP method
            accept: Media type for the ``Accept`` header
            custom_headers: Caller headers, taking precedence over computed ones
            body: Request body; empty bodies are not sent

        Returns:
            The server response, whatever its status

        Raises:
            httpx.TransportError: If the server could not be reached
        """
        transport = self.select_transport()
        return await transport.issue(url, method, accept, custom_headers, body)

    async def aclose(self) -> None:
        """Close the direct transport's client."""
        await self.token_transport.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
