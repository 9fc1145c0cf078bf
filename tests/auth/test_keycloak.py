"""Tests for the Keycloak token identity service."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from keycloak.exceptions import KeycloakError

from grid_console.auth.keycloak import KeycloakIdentityService, TokenStore
from grid_console.config.settings import ConsoleSettings
from grid_console.core.exceptions import ConfigurationError, TokenIdentityError
from grid_console.core.protocols import TokenIdentityProvider


@pytest.fixture
def keycloak_client():
    client = MagicMock()
    client.a_token = AsyncMock(return_value={
        "access_token": "access-123",
        "refresh_token": "refresh-456",
        "expires_in": 300,
    })
    client.a_refresh_token = AsyncMock(return_value={
        "access_token": "access-789",
        "refresh_token": "refresh-000",
    })
    client.a_logout = AsyncMock(return_value={})
    return client


class TestKeycloakIdentityService:

    def test_satisfies_protocol(self, keycloak_client):
        assert isinstance(KeycloakIdentityService(keycloak_client), TokenIdentityProvider)

    def test_requires_client(self):
        with pytest.raises(ValueError):
            KeycloakIdentityService(None)

    def test_not_initialized_before_login(self, keycloak_client):
        service = KeycloakIdentityService(keycloak_client)
        assert service.is_initialized() is False
        assert service.get_token() is None

    @pytest.mark.asyncio
    async def test_authenticate_stores_tokens(self, keycloak_client):
        service = KeycloakIdentityService(keycloak_client)
        await service.authenticate("admin", "password")

        keycloak_client.a_token.assert_awaited_once_with("admin", "password")
        assert service.is_initialized() is True
        assert service.get_token() == "access-123"
        assert service.token_store.get_item(TokenStore.REFRESH_TOKEN_KEY) == "refresh-456"

    @pytest.mark.asyncio
    async def test_authenticate_failure(self, keycloak_client):
        keycloak_client.a_token.side_effect = KeycloakError(error_message="invalid_grant", response_code=401)
        service = KeycloakIdentityService(keycloak_client)

        with pytest.raises(TokenIdentityError):
            await service.authenticate("admin", "wrong")
        assert service.is_initialized() is False

    @pytest.mark.asyncio
    async def test_invalid_token_response(self, keycloak_client):
        keycloak_client.a_token.return_value = {"error": "nope"}
        service = KeycloakIdentityService(keycloak_client)

        with pytest.raises(TokenIdentityError):
            await service.authenticate("admin", "password")

    @pytest.mark.asyncio
    async def test_refresh_replaces_token(self, keycloak_client):
        service = KeycloakIdentityService(keycloak_client)
        await service.authenticate("admin", "password")
        await service.refresh()

        keycloak_client.a_refresh_token.assert_awaited_once_with("refresh-456")
        assert service.get_token() == "access-789"

    @pytest.mark.asyncio
    async def test_refresh_without_refresh_token(self, keycloak_client):
        service = KeycloakIdentityService(keycloak_client)
        service.init_with_token("access-only")
        with pytest.raises(TokenIdentityError):
            await service.refresh()

    @pytest.mark.asyncio
    async def test_logout_clears_state(self, keycloak_client):
        service = KeycloakIdentityService(keycloak_client)
        await service.authenticate("admin", "password")
        await service.logout()

        keycloak_client.a_logout.assert_awaited_once_with("refresh-456")
        assert service.is_initialized() is False
        assert service.get_token() is None

    @pytest.mark.asyncio
    async def test_logout_failure_still_clears_state(self, keycloak_client):
        keycloak_client.a_logout.side_effect = KeycloakError(error_message="down")
        service = KeycloakIdentityService(keycloak_client)
        await service.authenticate("admin", "password")
        await service.logout()
        assert service.is_initialized() is False

    def test_init_with_token(self, keycloak_client):
        service = KeycloakIdentityService(keycloak_client)
        service.init_with_token("existing-token")
        assert service.is_initialized() is True
        assert service.get_token() == "existing-token"

    def test_init_with_empty_token(self, keycloak_client):
        with pytest.raises(TokenIdentityError):
            KeycloakIdentityService(keycloak_client).init_with_token("")


class TestFromSettings:

    def test_requires_keycloak_url(self):
        with pytest.raises(ConfigurationError):
            KeycloakIdentityService.from_settings(ConsoleSettings(_env_file=None, keycloak_server_url=None))

    def test_builds_openid_client(self):
        settings = ConsoleSettings(
            _env_file=None,
            keycloak_server_url="http://keycloak.example:8080",
            keycloak_realm="grid",
            keycloak_client_id="console",
            keycloak_client_secret="s3cret",
        )
        with patch("grid_console.auth.keycloak.KeycloakOpenID") as openid:
            service = KeycloakIdentityService.from_settings(settings)

        openid.assert_called_once_with(
            server_url="http://keycloak.example:8080",
            realm_name="grid",
            client_id="console",
            client_secret_key="s3cret",
            verify=True,
        )
        assert service.keycloak_client is openid.return_value
