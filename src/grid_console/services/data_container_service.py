"""Cache manager and cache list lookups."""

import logging
from typing import Any, Dict, List
from urllib.parse import quote

from ..config.constants import ComponentStatus
from ..core.value_objects import ActionResponse, CacheInfo, CacheManager, ServiceResult
from .base import BaseConsoleService

logger = logging.getLogger(__name__)

CACHE_FEATURES = (
    "simple_cache",
    "transactional",
    "persistent",
    "bounded",
    "secured",
    "indexed",
    "has_remote_backup",
)


def to_cache_manager(data: Dict[str, Any]) -> CacheManager:
    """Build a CacheManager from the server's JSON description."""
    return CacheManager(
        name=data.get("name", ""),
        physical_addresses=data.get("physical_addresses", ""),
        coordinator=bool(data.get("coordinator", False)),
        cluster_size=int(data.get("cluster_size") or 0),
        cache_manager_status=data.get("cache_manager_status"),
        cluster_members=tuple(data.get("cluster_members") or ()),
    )


def to_cache_info(data: Dict[str, Any]) -> CacheInfo:
    """Build a CacheInfo from one element of the cache list."""
    status = data.get("status")
    return CacheInfo(
        name=data.get("name", ""),
        type=data.get("type", ""),
        started=status is None or status == ComponentStatus.RUNNING.value,
        status=status,
        health=data.get("health"),
        features={feature: bool(data.get(feature, False)) for feature in CACHE_FEATURES},
    )


class DataContainerService(BaseConsoleService):
    """Looks up the cache manager of the console session and its caches."""

    async def get_cache_manager_names(self) -> ServiceResult[List[str]]:
        return await self.fetch_json(
            "server/cache-managers",
            "An error occurred while retrieving the cache managers",
        )

    async def get_default_cache_manager(self) -> ServiceResult[CacheManager]:
        """
        Fetch the first cache manager declared by the server.

        Returns:
            ServiceResult with the cache manager, or the reason it is unavailable
        """
        names = await self.get_cache_manager_names()
        if names.is_left():
            return names
        if not isinstance(names.value, list):
            logger.warning(f"Unexpected cache manager list: {type(names.value).__name__}")
            return ServiceResult.left(ActionResponse.failed("An error occurred while retrieving the cache managers"))
        if not names.value:
            return ServiceResult.left(ActionResponse.failed("No cache manager found on the server"))

        name = names.value[0]
        result = await self.fetch_json(
            f"cache-managers/{quote(name, safe='')}",
            f"An error occurred while retrieving the cache manager {name}",
        )
        if result.is_left():
            return result
        if not isinstance(result.value, dict):
            return ServiceResult.left(
                ActionResponse.failed(f"An error occurred while retrieving the cache manager {name}")
            )
        return ServiceResult.right(to_cache_manager(result.value))

    async def get_caches(self, cache_manager_name: str) -> ServiceResult[List[CacheInfo]]:
        """List the caches of a cache manager, sorted by name."""
        result = await self.fetch_json(
            f"cache-managers/{quote(cache_manager_name, safe='')}/caches",
            f"An error occurred while retrieving the caches of {cache_manager_name}",
        )
        if result.is_left():
            return result
        if not isinstance(result.value, list):
            logger.warning(f"Unexpected cache list of {cache_manager_name}: {type(result.value).__name__}")
            return ServiceResult.left(
                ActionResponse.failed(f"An error occurred while retrieving the caches of {cache_manager_name}")
            )
        caches = [to_cache_info(item) for item in result.value]
        logger.debug(f"Loaded {len(caches)} caches of {cache_manager_name}")
        return ServiceResult.right(sorted(caches, key=lambda cache: cache.name))
