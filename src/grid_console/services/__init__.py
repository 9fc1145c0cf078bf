"""Console services built on the REST access layer."""

from .base import BaseConsoleService
from .cache_service import CacheService
from .console_services import ConsoleServices
from .data_container_service import DataContainerService

__all__ = [
    "BaseConsoleService",
    "CacheService",
    "ConsoleServices",
    "DataContainerService",
]
