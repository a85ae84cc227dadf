"""Redis adapter implementing RBACCacheProtocol.

Wraps an async Redis client for decision memoization. Redis exceptions are
mapped to CacheError; the decision engine lets them propagate.

Architecture:
- Implements RBACCacheProtocol without inheritance (structural typing)
- Values are the "1"/"0" decision markers
- TTL via SETEX when configured
"""

import logging

from redis.asyncio import Redis
from redis.exceptions import RedisError

from scoped_rbac.infrastructure.errors import CacheError, InfrastructureErrorCode

logger = logging.getLogger(__name__)


class RedisCacheAdapter:
    """Redis implementation of RBACCacheProtocol.

    Note: Does NOT inherit from RBACCacheProtocol (uses structural typing).

    Attributes:
        _redis: Async Redis client instance.
    """

    def __init__(self, redis_client: Redis) -> None:
        """Initialize Redis adapter.

        Args:
            redis_client: Async Redis client instance.
        """
        self._redis = redis_client

    @classmethod
    def from_url(cls, redis_url: str) -> "RedisCacheAdapter":
        """Create an adapter with its own client.

        Args:
            redis_url: Redis connection URL.

        Returns:
            RedisCacheAdapter bound to a new client.
        """
        client = Redis.from_url(
            redis_url,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
            health_check_interval=30,
        )
        return cls(client)

    async def get(self, key: str) -> str | None:
        """Get value from Redis.

        Args:
            key: Cache key.

        Returns:
            Decoded value, or None if not found.

        Raises:
            CacheError: If the Redis operation fails.
        """
        try:
            value = await self._redis.get(key)
        except RedisError as e:
            logger.error(f"Redis GET failed for key {key}: {e}")
            raise CacheError(
                f"Failed to get cache key: {key}",
                infrastructure_code=InfrastructureErrorCode.CACHE_GET_ERROR,
                key=key,
            ) from e

        # Redis returns bytes unless the client decodes responses
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """Set value in Redis.

        Args:
            key: Cache key.
            value: Value to cache.
            ttl: Time to live in seconds (None = no expiration).

        Raises:
            CacheError: If the Redis operation fails.
        """
        try:
            if ttl is not None:
                await self._redis.setex(key, ttl, value)
            else:
                await self._redis.set(key, value)
        except RedisError as e:
            logger.error(f"Redis SET failed for key {key}: {e}")
            raise CacheError(
                f"Failed to set cache key: {key}",
                infrastructure_code=InfrastructureErrorCode.CACHE_SET_ERROR,
                key=key,
            ) from e

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()
