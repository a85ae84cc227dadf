"""In-memory cache adapter.

Reference implementation of RBACCacheProtocol for tests and single-process
embedders. State is owned by the instance, so several engines can coexist in
one process.

Note: Does NOT inherit from RBACCacheProtocol (uses structural typing).
"""

import time
from collections.abc import Callable


class MemoryCacheAdapter:
    """Dict-backed cache with optional per-entry TTL.

    Attributes:
        _entries: key -> (value, expires_at or None).
        _clock: Monotonic clock used for expiry.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize an empty cache.

        Args:
            clock: Time source in seconds (injectable for tests).
        """
        self._entries: dict[str, tuple[str, float | None]] = {}
        self._clock = clock

    async def get(self, key: str) -> str | None:
        """Get value, dropping it first if it has expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and expires_at <= self._clock():
            del self._entries[key]
            return None
        return value

    async def set(self, key: str, value: str, ttl: int | None = None) -> None:
        """Store value, with expiry when ttl is given."""
        expires_at = self._clock() + ttl if ttl is not None else None
        self._entries[key] = (value, expires_at)

    async def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
