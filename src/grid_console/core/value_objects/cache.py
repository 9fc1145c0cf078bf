"""Cache related value objects returned by the console services."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from ...config.constants import ContentType


@dataclass(frozen=True)
class CacheEncoding:
    """Whether keys and values of a cache are encoded with Protobuf.

    Unpacks as a ``(key, value)`` pair.
    """

    key: bool = False
    value: bool = False

    def __iter__(self) -> Iterator[bool]:
        yield self.key
        yield self.value

    @property
    def any(self) -> bool:
        return self.key or self.value


@dataclass(frozen=True)
class CacheEntry:
    """A single key/value pair read from a cache."""

    key: str
    value: str
    key_content_type: ContentType = ContentType.STRING
    value_content_type: ContentType = ContentType.STRING
    time_to_live: Optional[int] = None
    max_idle: Optional[int] = None


@dataclass(frozen=True)
class CacheInfo:
    """Summary of a cache as listed by a cache manager."""

    name: str
    type: str
    started: bool = True
    status: Optional[str] = None
    health: Optional[str] = None
    features: dict = field(default_factory=dict)


@dataclass(frozen=True)
class CacheManager:
    """The cache container a console session is attached to."""

    name: str
    physical_addresses: str = ""
    coordinator: bool = False
    cluster_size: int = 0
    cache_manager_status: Optional[str] = None
    cluster_members: tuple = ()
