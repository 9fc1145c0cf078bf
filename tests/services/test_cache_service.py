"""Tests for the cache service."""

import json

import httpx
import pytest

from grid_console.config.constants import ContentType, Flags
from grid_console.core.exceptions import MalformedCacheConfigurationError
from grid_console.core.value_objects import ActionResponse, CacheEncoding, CacheEntry
from grid_console.services.cache_service import CacheService

from conftest import (
    ENDPOINT,
    MockAuthenticatedClient,
    MockAuthentication,
    MockTokenProvider,
    RecordingHandler,
    make_dispatcher,
)

ENTRY_PATH = "GET /rest/v2/caches/people/k1"
CONFIG_PATH = "GET /rest/v2/caches/people?action=config"


def make_service(handler, **kwargs) -> CacheService:
    return CacheService(ENDPOINT, make_dispatcher(handler, **kwargs))


class TestGetEntry:

    @pytest.mark.asyncio
    async def test_entry_found(self):
        handler = RecordingHandler(routes={
            ENTRY_PATH: httpx.Response(
                200,
                text='{"name": "Ada"}',
                headers={
                    "Content-Type": "application/json",
                    "timeToLiveSeconds": "60",
                    "maxIdleTimeSeconds": "-1",
                },
            ),
        })
        result = await make_service(handler).get_entry("people", "k1")

        assert result.is_right()
        assert result.value == CacheEntry(
            key="k1",
            value='{"name": "Ada"}',
            key_content_type=ContentType.STRING,
            value_content_type=ContentType.JSON,
            time_to_live=60,
            max_idle=-1,
        )
        request = handler.last
        assert request.headers["Authorization"] == "Bearer token-abc"
        assert request.headers["Key-Content-Type"] == "application/x-java-object;type=java.lang.String"

    @pytest.mark.asyncio
    async def test_entry_not_found(self):
        handler = RecordingHandler(routes={ENTRY_PATH: httpx.Response(404)})
        result = await make_service(handler).get_entry("people", "k1")

        assert result.is_left()
        assert result.error == ActionResponse("Entry with key k1 not found.", False)

    @pytest.mark.asyncio
    async def test_unauthorized(self):
        handler = RecordingHandler(routes={ENTRY_PATH: httpx.Response(401, text="denied")})
        result = await make_service(handler).get_entry("people", "k1")
        assert result.error.message == "Login failed. Check your credentials and try again."

    @pytest.mark.asyncio
    async def test_key_is_encoded(self):
        handler = RecordingHandler()
        await make_service(handler).get_entry("people", "a/b c", ContentType.INTEGER)
        assert handler.last.url.raw_path == b"/rest/v2/caches/people/a%2Fb%20c"
        assert handler.last.headers["Key-Content-Type"] == "application/x-java-object;type=java.lang.Integer"

    @pytest.mark.asyncio
    async def test_connectivity_failure(self):
        client = MockAuthenticatedClient(error=httpx.ConnectError("Connection refused"))
        service = make_service(
            RecordingHandler(),
            token_provider=MockTokenProvider(initialized=False),
            authentication=MockAuthentication(client=client),
        )
        result = await service.get_entry("people", "k1")
        assert result.error == ActionResponse("Connection refused", False)

    @pytest.mark.asyncio
    async def test_invalid_url_is_a_failed_result(self):
        client = MockAuthenticatedClient(error=httpx.InvalidURL("Invalid port"))
        service = make_service(
            RecordingHandler(),
            token_provider=MockTokenProvider(initialized=False),
            authentication=MockAuthentication(client=client),
        )
        result = await service.get_entry("people", "k1")

        assert result.is_left()
        assert result.error == ActionResponse("An error occurred while retrieving the entry k1", False)


class TestWriteOperations:

    @pytest.mark.asyncio
    async def test_add_entry(self):
        handler = RecordingHandler()
        result = await make_service(handler).add_entry(
            "people",
            "k1",
            '{"name": "Ada"}',
            key_content_type=ContentType.LONG,
            value_content_type=ContentType.JSON,
            time_to_live=30,
            max_idle=10,
            flags=[Flags.SKIP_INDEXING, Flags.SKIP_CACHE_LOAD],
        )

        assert result == ActionResponse("Entry k1 added to cache people.", True)
        request = handler.last
        assert request.method == "POST"
        assert request.content == b'{"name": "Ada"}'
        assert request.headers["Key-Content-Type"] == "application/x-java-object;type=java.lang.Long"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["timeToLiveSeconds"] == "30"
        assert request.headers["maxIdleTimeSeconds"] == "10"
        assert request.headers["flags"] == "SKIP_INDEXING,SKIP_CACHE_LOAD"

    @pytest.mark.asyncio
    async def test_update_entry_uses_put(self):
        handler = RecordingHandler()
        result = await make_service(handler).add_entry("people", "k1", "v", create=False)
        assert handler.last.method == "PUT"
        assert result.message == "Entry k1 updated in cache people."

    @pytest.mark.asyncio
    async def test_unmapped_value_type_sends_no_content_type(self):
        handler = RecordingHandler()
        await make_service(handler).add_entry("people", "k1", "1.5", value_content_type=ContentType.FLOAT)
        assert "Content-Type" not in handler.last.headers

    @pytest.mark.asyncio
    async def test_add_entry_conflict(self):
        handler = RecordingHandler(default=httpx.Response(409, text="Entry already exists"))
        result = await make_service(handler).add_entry("people", "k1", "v")
        assert result == ActionResponse("Entry already exists", False)

    @pytest.mark.asyncio
    async def test_remove_entry(self):
        handler = RecordingHandler()
        result = await make_service(handler).remove_entry("people", "k1")
        assert result == ActionResponse("Entry k1 deleted.", True)
        assert handler.last.method == "DELETE"
        assert handler.last.content == b""

    @pytest.mark.asyncio
    async def test_clear(self):
        handler = RecordingHandler()
        result = await make_service(handler).clear("people")
        assert result.success is True
        assert handler.last.url.raw_path == b"/rest/v2/caches/people?action=clear"


class TestConfiguration:

    @pytest.mark.asyncio
    async def test_get_encoding(self):
        config = {"distributed-cache": {"encoding": {
            "key": {"media-type": "application/x-protostream"},
            "value": {"media-type": "application/x-protostream"},
        }}}
        handler = RecordingHandler(routes={CONFIG_PATH: httpx.Response(200, text=json.dumps(config))})
        result = await make_service(handler).get_encoding("people")

        assert result.value == CacheEncoding(key=True, value=True)
        assert handler.last.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_get_encoding_error(self):
        handler = RecordingHandler(routes={CONFIG_PATH: httpx.Response(500, text="")})
        result = await make_service(handler).get_encoding("people")
        assert result.error == ActionResponse("Unable to retrieve the configuration of cache people", False)

    @pytest.mark.asyncio
    async def test_malformed_configuration_raises(self):
        handler = RecordingHandler(routes={CONFIG_PATH: httpx.Response(200, text="<xml/>")})
        with pytest.raises(MalformedCacheConfigurationError):
            await make_service(handler).get_encoding("people")
