"""Configuration module for grid-console."""

from .constants import (
    MediaTypes,
    HeaderNames,
    CacheTopologies,
    LOGIN_FAILED_MESSAGE,
    ContentType,
    Flags,
    ComponentStatus,
    ComponentHealth,
    CacheType,
)
from .logging_config import LoggingConfig, setup_logging, get_logger
from .settings import ConsoleSettings, get_settings

__all__ = [
    "MediaTypes",
    "HeaderNames",
    "CacheTopologies",
    "LOGIN_FAILED_MESSAGE",
    "ContentType",
    "Flags",
    "ComponentStatus",
    "ComponentHealth",
    "CacheType",
    "LoggingConfig",
    "setup_logging",
    "get_logger",
    "ConsoleSettings",
    "get_settings",
]
