"""Authentication collaborator contracts."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable

import httpx


@runtime_checkable
class TokenIdentityProvider(Protocol):
    """Protocol for the bearer token identity provider.

    Injected into the dispatcher in place of a process-wide singleton.
    """

    def is_initialized(self) -> bool:
        """Whether a token has been obtained for this session."""
        ...

    def get_token(self) -> Optional[str]:
        """Currently stored access token, if any."""
        ...


@runtime_checkable
class AuthenticatedClient(Protocol):
    """Client that performs a challenge/response handshake internally."""

    async def fetch(self, url: str, options: Dict[str, Any]) -> httpx.Response:
        """Issue a request described by ``options`` (method, headers, body).

        Args:
            url: Target URL
            options: Request options with ``method``, ``headers`` and an optional ``body``

        Returns:
            The server response, whatever its status
        """
        ...


@runtime_checkable
class AuthenticationCapability(Protocol):
    """Protocol for the session's authentication capability."""

    def is_not_secured(self) -> bool:
        """Whether the server runs without security."""
        ...

    def get_authenticated_client(self) -> AuthenticatedClient:
        """Client used when no bearer token is available."""
        ...
