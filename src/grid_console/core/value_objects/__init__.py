"""Value objects for grid-console."""

from .action_response import ActionResponse
from .failures import (
    ConnectivityFailure,
    HttpFailure,
    OtherFailure,
    Failure,
    read_text,
    to_failure,
)
from .cache import CacheEncoding, CacheEntry, CacheInfo, CacheManager
from .result import ServiceResult

__all__ = [
    "ActionResponse",
    "ConnectivityFailure",
    "HttpFailure",
    "OtherFailure",
    "Failure",
    "read_text",
    "to_failure",
    "CacheEncoding",
    "CacheEntry",
    "CacheInfo",
    "CacheManager",
    "ServiceResult",
]
