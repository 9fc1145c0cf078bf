"""Keycloak bearer token identity for console sessions."""

import logging
from typing import Any, Dict, Optional

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from ..config.settings import ConsoleSettings
from ..core.exceptions import ConfigurationError, TokenIdentityError
from ..rest.transport import mask_token

logger = logging.getLogger(__name__)


class TokenStore:
    """Holds the session's current tokens.

    ``TOKEN_KEY`` and ``REFRESH_TOKEN_KEY`` name the slots, the way the
    browser console keeps them in local storage.
    """

    TOKEN_KEY = "react-token"
    REFRESH_TOKEN_KEY = "react-refresh-token"

    def __init__(self):
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()


class KeycloakIdentityService:
    """Token identity provider backed by a Keycloak OpenID client.

    The service is initialized once a token has been obtained, either by a
    password grant or by handing it an existing token.
    """

    def __init__(self, keycloak_client: KeycloakOpenID, token_store: Optional[TokenStore] = None):
        """
        Initialize the identity service.

        Args:
            keycloak_client: Keycloak OpenID client for the console realm
            token_store: Token storage, a fresh one when omitted
        """
        if not keycloak_client:
            raise ValueError("Keycloak OpenID client is required")
        self.keycloak_client = keycloak_client
        self.token_store = token_store or TokenStore()
        self._initialized = False

    @classmethod
    def from_settings(cls, settings: ConsoleSettings) -> "KeycloakIdentityService":
        """Build the service from console settings."""
        if not settings.keycloak_enabled:
            raise ConfigurationError(
                "Keycloak server URL is not configured",
                details={"setting": "keycloak_server_url"}
            )
        secret = settings.keycloak_client_secret
        keycloak_client = KeycloakOpenID(
            server_url=settings.keycloak_server_url,
            realm_name=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret_key=secret.get_secret_value() if secret else None,
            verify=settings.verify_ssl,
        )
        return cls(keycloak_client)

    def is_initialized(self) -> bool:
        return self._initialized

    def get_token(self) -> Optional[str]:
        return self.token_store.get_item(TokenStore.TOKEN_KEY)

    def init_with_token(self, access_token: str, refresh_token: Optional[str] = None) -> None:
        """Initialize the session with tokens obtained elsewhere."""
        if not access_token:
            raise TokenIdentityError("Access token cannot be empty")
        self._store_tokens({"access_token": access_token, "refresh_token": refresh_token})

    async def authenticate(self, username: str, password: str) -> Dict[str, Any]:
        """
        Obtain tokens with a password grant.

        Args:
            username: User's username
            password: User's password

        Returns:
            Token response from Keycloak

        Raises:
            TokenIdentityError: If Keycloak rejects the grant or returns no token
        """
        try:
            logger.info(f"Authenticating user {username} via Keycloak")
            token_data = await self.keycloak_client.a_token(username, password)
        except KeycloakError as e:
            logger.error(f"Failed to authenticate user {username}: {e}")
            raise TokenIdentityError(
                "Keycloak authentication failed",
                details={"username": username, "error": str(e)}
            ) from e

        self._store_tokens(token_data)
        return token_data

    async def refresh(self) -> Dict[str, Any]:
        """Refresh the access token with the stored refresh token."""
        refresh_token = self.token_store.get_item(TokenStore.REFRESH_TOKEN_KEY)
        if not refresh_token:
            raise TokenIdentityError("No refresh token available")

        try:
            logger.debug("Refreshing token via Keycloak")
            token_data = await self.keycloak_client.a_refresh_token(refresh_token)
        except KeycloakError as e:
            logger.error(f"Failed to refresh token: {e}")
            raise TokenIdentityError("Keycloak token refresh failed", details={"error": str(e)}) from e

        self._store_tokens(token_data)
        return token_data

    async def logout(self) -> None:
        """End the Keycloak session and forget the tokens."""
        refresh_token = self.token_store.get_item(TokenStore.REFRESH_TOKEN_KEY)
        try:
            if refresh_token:
                await self.keycloak_client.a_logout(refresh_token)
        except KeycloakError as e:
            logger.warning(f"Keycloak logout failed: {e}")
        finally:
            self.token_store.clear()
            self._initialized = False

    def _store_tokens(self, token_data: Any) -> None:
        if not isinstance(token_data, dict) or not token_data.get("access_token"):
            raise TokenIdentityError("Invalid token response from Keycloak")

        access_token = token_data["access_token"]
        self.token_store.set_item(TokenStore.TOKEN_KEY, access_token)
        if token_data.get("refresh_token"):
            self.token_store.set_item(TokenStore.REFRESH_TOKEN_KEY, token_data["refresh_token"])
        self._initialized = True
        logger.debug(f"Stored access token {mask_token(access_token)}")
