"""Authentication collaborators: Keycloak token identity and digest capability."""

from .digest import DigestAuthenticatedClient, DigestAuthenticationService
from .identity import NoTokenIdentity
from .keycloak import KeycloakIdentityService, TokenStore

__all__ = [
    "DigestAuthenticatedClient",
    "DigestAuthenticationService",
    "NoTokenIdentity",
    "KeycloakIdentityService",
    "TokenStore",
]
