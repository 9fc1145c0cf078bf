"""Base exceptions for grid-console.

All exceptions raised by grid-console inherit from GridConsoleError and carry
an error code and a details mapping for logging.
"""

from typing import Any, Dict, Optional


class GridConsoleError(Exception):
    """Base exception for all grid-console errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(GridConsoleError):
    """Raised when console settings are missing or inconsistent."""
    pass


class MalformedCacheConfigurationError(GridConsoleError, ValueError):
    """Raised when a cache configuration document is not valid JSON."""
    pass
