"""Exception hierarchy for grid-console."""

from .base import (
    GridConsoleError,
    ConfigurationError,
    MalformedCacheConfigurationError,
)
from .auth import (
    AuthenticationError,
    TokenIdentityError,
)

__all__ = [
    "GridConsoleError",
    "ConfigurationError",
    "MalformedCacheConfigurationError",
    "AuthenticationError",
    "TokenIdentityError",
]
