"""Detection of Protobuf encoded caches from their JSON configuration."""

import json
import logging
from typing import Any, Mapping, Optional

from ..config.constants import CacheTopologies, MediaTypes
from ..core.exceptions import MalformedCacheConfigurationError
from ..core.value_objects import CacheEncoding

logger = logging.getLogger(__name__)


def lookup_path(document: Any, *path: str) -> Optional[Any]:
    """Follow ``path`` through nested mappings.

    Returns None as soon as a step is missing or the current value is not a
    mapping.
    """
    current = document
    for step in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(step)
        if current is None:
            return None
    return current


class ProtobufCacheDetector:
    """Tells, for keys and values separately, whether a cache uses Protostream."""

    @staticmethod
    def parse(cache_config_json: str) -> Any:
        """Parse a configuration document, raising on malformed JSON."""
        try:
            return json.loads(cache_config_json)
        except (TypeError, ValueError) as e:
            raise MalformedCacheConfigurationError(
                "Cache configuration is not valid JSON",
                details={"error": str(e)}
            ) from e

    @staticmethod
    def topology_section(config: Any) -> Optional[Any]:
        """Configuration body under the first known topology key, if any."""
        if not isinstance(config, Mapping):
            return None
        for topology in CacheTopologies.ORDERED:
            if topology in config:
                return config[topology]
        return None

    @classmethod
    def detect(cls, cache_config_json: str) -> CacheEncoding:
        """Encoding of keys and values for a cache configuration.

        Args:
            cache_config_json: Cache configuration as returned by the server

        Returns:
            CacheEncoding with ``key`` and ``value`` flags

        Raises:
            MalformedCacheConfigurationError: If the document is not valid JSON
        """
        config = cls.parse(cache_config_json)
        section = cls.topology_section(config)
        if section is None:
            logger.debug("No known cache topology in configuration")
            return CacheEncoding(key=False, value=False)

        key_media_type = lookup_path(section, "encoding", "key", "media-type")
        value_media_type = lookup_path(section, "encoding", "value", "media-type")

        return CacheEncoding(
            key=key_media_type == MediaTypes.PROTOSTREAM,
            value=value_media_type == MediaTypes.PROTOSTREAM,
        )
