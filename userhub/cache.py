import json
import logging
from typing import Any

import redis.asyncio as redis

from userhub.errors import InternalError
from userhub.ports import CacheRepository

logger = logging.getLogger(__name__)


class RedisCache(CacheRepository):
    """
    ``CacheRepository`` backed by Redis.

    Values are stored as JSON text.  Unlike a best-effort cache, failures are
    reported to the caller as ``InternalError`` so the port never hides a
    fault; a cache that was never connected fails the same way.
    """

    def __init__(self, url: str, client: redis.Redis | None = None) -> None:
        self._url = url
        self._redis: redis.Redis | None = client

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def connect(self) -> None:
        """Open the connection pool.  Called once at application startup."""
        if self._redis is None:
            self._redis = redis.from_url(
                self._url,
                decode_responses=True,
                socket_connect_timeout=2,
                socket_timeout=2,
            )
        try:
            await self._redis.ping()
            logger.info("Redis connection established")
        except redis.RedisError as exc:
            logger.warning("Redis ping failed, cache unavailable: %s", exc)

    async def disconnect(self) -> None:
        """Close the connection pool.  Called once at application shutdown."""
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None

    @property
    def client(self) -> redis.Redis:
        if self._redis is None:
            raise InternalError("cache is not connected")
        return self._redis

    # ------------------------------------------------------------------
    # Port operations
    # ------------------------------------------------------------------

    async def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        serialised = json.dumps(value, default=str)
        expire = ttl if ttl is not None and ttl > 0 else None
        try:
            await self.client.set(key, serialised, ex=expire)
        except redis.RedisError as exc:
            logger.error("Cache SET error for key=%r: %s", key, exc)
            raise InternalError("cache set failed") from exc

    async def get(self, key: str) -> str | None:
        try:
            return await self.client.get(key)
        except redis.RedisError as exc:
            logger.error("Cache GET error for key=%r: %s", key, exc)
            raise InternalError("cache get failed") from exc

    async def delete(self, key: str) -> None:
        try:
            await self.client.delete(key)
        except redis.RedisError as exc:
            logger.error("Cache DELETE error for key=%r: %s", key, exc)
            raise InternalError("cache delete failed") from exc

    async def exists(self, key: str) -> bool:
        try:
            return await self.client.exists(key) > 0
        except redis.RedisError as exc:
            logger.error("Cache EXISTS error for key=%r: %s", key, exc)
            raise InternalError("cache exists failed") from exc
