"""Cache protocol for decision memoization.

Defines the key/value store the decision engine uses as a fast path.
Infrastructure adapters implement this protocol without inheritance
(structural typing).

Contract:
    - ``get`` returns the stored string, or None on a miss.
    - ``set`` stores a string, optionally with a TTL.
    - No eviction or invalidation policy is required.
    - Errors raised by an adapter propagate to the caller unchanged.
"""

from typing import Protocol


class RBACCacheProtocol(Protocol):
    """Cache protocol - what the decision engine needs from a cache.

    The engine never depends on a hit for correctness: every read has a
    persistence-backed fallback.
    """

    async def get(self, key: str) -> str | None:
        """Get value from cache.

        Args:
            key: Cache key.

        Returns:
            Stored value, or None if absent (or expired).
        """
        ...

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """Set value in cache.

        Args:
            key: Cache key.
            value: Value to store ("1" or "0" decision markers).
            ttl: Time to live in seconds (None = no expiration).
        """
        ...
