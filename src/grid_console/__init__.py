"""Grid Console - REST access layer of the data grid management console.

Issues authenticated calls against the cache management server, maps content
types for cache keys and values, detects Protobuf encoded caches and
normalizes every outcome into an ActionResponse.
"""

from .__version__ import __version__

from .config import (
    ContentType,
    Flags,
    ComponentStatus,
    ComponentHealth,
    CacheType,
    ConsoleSettings,
    get_settings,
    setup_logging,
    get_logger,
)

from .core.exceptions import (
    GridConsoleError,
    ConfigurationError,
    MalformedCacheConfigurationError,
    AuthenticationError,
    TokenIdentityError,
)

from .core.value_objects import (
    ActionResponse,
    ConnectivityFailure,
    HttpFailure,
    OtherFailure,
    CacheEncoding,
    CacheEntry,
    CacheInfo,
    CacheManager,
    ServiceResult,
)

from .core.protocols import (
    TokenIdentityProvider,
    AuthenticatedClient,
    AuthenticationCapability,
)

from .rest import (
    AuthenticationDispatcher,
    ContentTypeCodec,
    ProtobufCacheDetector,
    ResponseNormalizer,
    TokenAuthTransport,
    ChallengeResponseTransport,
)

from .auth import (
    DigestAuthenticationService,
    KeycloakIdentityService,
    NoTokenIdentity,
)

from .services import (
    CacheService,
    ConsoleServices,
    DataContainerService,
)

__all__ = [
    "__version__",
    "ContentType",
    "Flags",
    "ComponentStatus",
    "ComponentHealth",
    "CacheType",
    "ConsoleSettings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "GridConsoleError",
    "ConfigurationError",
    "MalformedCacheConfigurationError",
    "AuthenticationError",
    "TokenIdentityError",
    "ActionResponse",
    "ConnectivityFailure",
    "HttpFailure",
    "OtherFailure",
    "CacheEncoding",
    "CacheEntry",
    "CacheInfo",
    "CacheManager",
    "ServiceResult",
    "TokenIdentityProvider",
    "AuthenticatedClient",
    "AuthenticationCapability",
    "AuthenticationDispatcher",
    "ContentTypeCodec",
    "ProtobufCacheDetector",
    "ResponseNormalizer",
    "TokenAuthTransport",
    "ChallengeResponseTransport",
    "DigestAuthenticationService",
    "KeycloakIdentityService",
    "NoTokenIdentity",
    "CacheService",
    "ConsoleServices",
    "DataContainerService",
]
