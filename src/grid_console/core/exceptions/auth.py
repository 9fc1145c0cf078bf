"""Authentication-specific exceptions for grid-console."""

from .base import GridConsoleError


class AuthenticationError(GridConsoleError):
    """Base exception for authentication errors."""
    pass


class TokenIdentityError(AuthenticationError):
    """Raised when the token identity provider cannot obtain or refresh a token."""
    pass
