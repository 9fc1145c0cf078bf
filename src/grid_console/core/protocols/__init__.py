"""Protocols for grid-console collaborators."""

from .auth import TokenIdentityProvider, AuthenticatedClient, AuthenticationCapability

__all__ = [
    "TokenIdentityProvider",
    "AuthenticatedClient",
    "AuthenticationCapability",
]
