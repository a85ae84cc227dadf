"""Cache adapters and key construction."""

from scoped_rbac.infrastructure.cache.cache_keys import CacheKeys
from scoped_rbac.infrastructure.cache.memory_adapter import MemoryCacheAdapter
from scoped_rbac.infrastructure.cache.redis_adapter import RedisCacheAdapter

__all__ = ["CacheKeys", "MemoryCacheAdapter", "RedisCacheAdapter"]
