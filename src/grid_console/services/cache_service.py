"""Cache entry and cache configuration operations."""

import logging
from typing import Iterable, Optional
from urllib.parse import quote

import httpx

from ..config.constants import ContentType, Flags, HeaderNames, MediaTypes
from ..core.value_objects import ActionResponse, CacheEncoding, CacheEntry, ServiceResult
from ..rest.codec import ContentTypeCodec
from ..rest.protobuf import ProtobufCacheDetector
from .base import BaseConsoleService

logger = logging.getLogger(__name__)


def _int_header(response: httpx.Response, name: str) -> Optional[int]:
    value = response.headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class CacheService(BaseConsoleService):
    """Reads and writes entries of a cache and inspects its configuration."""

    def _entry_path(self, cache_name: str, key: str) -> str:
        return f"caches/{quote(cache_name, safe='')}/{quote(key, safe='')}"

    def _content_headers(
        self,
        key_content_type: Optional[ContentType],
        value_content_type: Optional[ContentType] = None
    ) -> httpx.Headers:
        headers = self.dispatcher.create_authenticated_headers()
        if key_content_type:
            key_media_type = ContentTypeCodec.to_wire_representation(key_content_type)
            if key_media_type:
                headers[HeaderNames.KEY_CONTENT_TYPE] = key_media_type
        if value_content_type:
            value_media_type = ContentTypeCodec.to_wire_representation(value_content_type)
            if value_media_type:
                headers[HeaderNames.CONTENT_TYPE] = value_media_type
        return headers

    async def get_entry(
        self,
        cache_name: str,
        key: str,
        key_content_type: Optional[ContentType] = None
    ) -> ServiceResult[CacheEntry]:
        """
        Look up an entry by key.

        Args:
            cache_name: Cache to read from
            key: Entry key
            key_content_type: Content type of the key, String when omitted

        Returns:
            ServiceResult with the entry, or the reason it could not be read
        """
        key_content_type = key_content_type or ContentType.STRING
        result = await self.fetch(
            self._entry_path(cache_name, key),
            "GET",
            f"An error occurred while retrieving the entry {key}",
            custom_headers=self._content_headers(key_content_type),
            not_found_message=f"Entry with key {key} not found.",
        )
        if result.is_left():
            return result

        response = result.value
        entry = CacheEntry(
            key=key,
            value=response.text,
            key_content_type=key_content_type,
            value_content_type=ContentTypeCodec.from_wire_representation(
                response.headers.get(HeaderNames.CONTENT_TYPE)
            ),
            time_to_live=_int_header(response, HeaderNames.TIME_TO_LIVE),
            max_idle=_int_header(response, HeaderNames.MAX_IDLE),
        )
        return ServiceResult.right(entry)

    async def add_entry(
        self,
        cache_name: str,
        key: str,
        value: str,
        key_content_type: ContentType = ContentType.STRING,
        value_content_type: ContentType = ContentType.STRING,
        time_to_live: Optional[int] = None,
        max_idle: Optional[int] = None,
        flags: Optional[Iterable[Flags]] = None,
        create: bool = True
    ) -> ActionResponse:
        """
        Create (POST) or replace (PUT) an entry.

        Args:
            cache_name: Target cache
            key: Entry key
            value: Entry value, sent as the request body
            key_content_type: Content type of the key
            value_content_type: Content type of the value
            time_to_live: Lifespan in seconds
            max_idle: Maximum idle time in seconds
            flags: Cache operation modifiers
            create: POST when True, PUT otherwise

        Returns:
            ActionResponse describing the outcome
        """
        headers = self._content_headers(key_content_type, value_content_type)
        if time_to_live is not None:
            headers[HeaderNames.TIME_TO_LIVE] = str(time_to_live)
        if max_idle is not None:
            headers[HeaderNames.MAX_IDLE] = str(max_idle)
        if flags:
            headers[HeaderNames.FLAGS] = ",".join(Flags(flag).value for flag in flags)

        method = "POST" if create else "PUT"
        verb = "added to" if create else "updated in"
        return await self.normalizer.normalize_crud_result(
            f"Entry {key} {verb} cache {cache_name}.",
            self.dispatcher.issue_request(
                self.url(self._entry_path(cache_name, key)),
                method,
                custom_headers=headers,
                body=value,
            ),
        )

    async def remove_entry(
        self,
        cache_name: str,
        key: str,
        key_content_type: Optional[ContentType] = None
    ) -> ActionResponse:
        """Delete an entry."""
        return await self.normalizer.normalize_crud_result(
            f"Entry {key} deleted.",
            self.dispatcher.issue_request(
                self.url(self._entry_path(cache_name, key)),
                "DELETE",
                custom_headers=self._content_headers(key_content_type or ContentType.STRING),
            ),
        )

    async def clear(self, cache_name: str) -> ActionResponse:
        """Remove every entry of a cache."""
        return await self.normalizer.normalize_crud_result(
            f"Cache {cache_name} cleared.",
            self.dispatcher.issue_request(
                self.url(f"caches/{quote(cache_name, safe='')}?action=clear"),
                "POST",
            ),
        )

    async def get_config(self, cache_name: str) -> ServiceResult[str]:
        """Raw JSON configuration of a cache."""
        result = await self.fetch(
            f"caches/{quote(cache_name, safe='')}?action=config",
            "GET",
            f"Unable to retrieve the configuration of cache {cache_name}",
            accept=MediaTypes.JSON,
        )
        if result.is_left():
            return result
        return ServiceResult.right(result.value.text)

    async def get_encoding(self, cache_name: str) -> ServiceResult[CacheEncoding]:
        """Whether keys and values of a cache are Protobuf encoded.

        Raises:
            MalformedCacheConfigurationError: If the server returns a configuration that is not JSON
        """
        result = await self.get_config(cache_name)
        if result.is_left():
            return result
        return ServiceResult.right(ProtobufCacheDetector.detect(result.value))
