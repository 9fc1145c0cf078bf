"""Constants and enums for grid-console.

This module defines the content types, cache flags and server status values
exchanged with the data grid REST API, together with the media type strings
used on the wire.
"""

from enum import Enum
from typing import Final


class MediaTypes:
    """Wire-level media type strings."""

    JAVA_OBJECT_PREFIX: Final[str] = "application/x-java-object;type=java.lang."
    OCTET_STREAM: Final[str] = "application/octet-stream"
    OCTET_STREAM_HEX: Final[str] = "application/octet-stream; encoding=hex"
    JSON: Final[str] = "application/json"
    XML: Final[str] = "application/xml"
    PROTOSTREAM: Final[str] = "application/x-protostream"
    TEXT_PLAIN: Final[str] = "text/plain"


class HeaderNames:
    """HTTP header names used by the console."""

    ACCEPT: Final[str] = "Accept"
    AUTHORIZATION: Final[str] = "Authorization"
    CONTENT_TYPE: Final[str] = "Content-Type"
    KEY_CONTENT_TYPE: Final[str] = "Key-Content-Type"
    FLAGS: Final[str] = "flags"
    TIME_TO_LIVE: Final[str] = "timeToLiveSeconds"
    MAX_IDLE: Final[str] = "maxIdleTimeSeconds"


class CacheTopologies:
    """Top-level keys of a cache configuration document, in lookup order."""

    DISTRIBUTED: Final[str] = "distributed-cache"
    REPLICATED: Final[str] = "replicated-cache"
    INVALIDATION: Final[str] = "invalidation-cache"
    LOCAL: Final[str] = "local-cache"

    ORDERED: Final[tuple] = (DISTRIBUTED, REPLICATED, INVALIDATION, LOCAL)


LOGIN_FAILED_MESSAGE: Final[str] = "Login failed. Check your credentials and try again."


class ContentType(str, Enum):
    """Logical content kinds for cache keys and values."""

    STRING = "String"
    JSON = "Json"
    XML = "Xml"
    INTEGER = "Integer"
    DOUBLE = "Double"
    FLOAT = "Float"
    LONG = "Long"
    BOOLEAN = "Boolean"
    BYTES = "Bytes"
    OCTET_STREAM = "Base64"
    OCTET_STREAM_HEX = "Hex"


class Flags(str, Enum):
    """Cache operation modifiers sent with write requests."""

    CACHE_MODE_LOCAL = "CACHE_MODE_LOCAL"
    FAIL_SILENTLY = "FAIL_SILENTLY"
    FORCE_ASYNCHRONOUS = "FORCE_ASYNCHRONOUS"
    FORCE_SYNCHRONOUS = "FORCE_SYNCHRONOUS"
    FORCE_WRITE_LOCK = "FORCE_WRITE_LOCK"
    IGNORE_RETURN_VALUES = "IGNORE_RETURN_VALUES"
    IGNORE_TRANSACTION = "IGNORE_TRANSACTION"
    PUT_FOR_EXTERNAL_READ = "PUT_FOR_EXTERNAL_READ"
    REMOTE_ITERATION = "REMOTE_ITERATION"
    SKIP_CACHE_LOAD = "SKIP_CACHE_LOAD"
    SKIP_CACHE_STORE = "SKIP_CACHE_STORE"
    SKIP_INDEX_CLEANUP = "SKIP_INDEX_CLEANUP"
    SKIP_INDEXING = "SKIP_INDEXING"
    SKIP_LISTENER_NOTIFICATION = "SKIP_LISTENER_NOTIFICATION"
    SKIP_LOCKING = "SKIP_LOCKING"
    SKIP_OWNERSHIP_CHECK = "SKIP_OWNERSHIP_CHECK"
    SKIP_REMOTE_LOOKUP = "SKIP_REMOTE_LOOKUP"
    SKIP_SHARED_CACHE_STORE = "SKIP_SHARED_CACHE_STORE"
    SKIP_SIZE_OPTIMIZATION = "SKIP_SIZE_OPTIMIZATION"
    SKIP_STATISTICS = "SKIP_STATISTICS"
    SKIP_XSITE_BACKUP = "SKIP_XSITE_BACKUP"
    ZERO_LOCK_ACQUISITION_TIMEOUT = "ZERO_LOCK_ACQUISITION_TIMEOUT"


class ComponentStatus(str, Enum):
    """Lifecycle status reported for server components."""

    STOPPING = "STOPPING"
    RUNNING = "RUNNING"
    OK = "OK"
    CANCELLING = "CANCELLING"
    SENDING = "SENDING"
    ERROR = "ERROR"
    INSTANTIATED = "INSTANTIATED"
    INITIALIZING = "INITIALIZING"
    FAILED = "FAILED"
    TERMINATED = "TERMINATED"


class ComponentHealth(str, Enum):
    """Cluster health values."""

    HEALTHY = "HEALTHY"
    HEALTHY_REBALANCING = "HEALTHY_REBALANCING"
    DEGRADED = "DEGRADED"
    FAILED = "FAILED"


class CacheType(str, Enum):
    """Cache topologies as displayed by the console."""

    DISTRIBUTED = "Distributed"
    REPLICATED = "Replicated"
    LOCAL = "Local"
    INVALIDATED = "Invalidated"
    SCATTERED = "Scattered"
