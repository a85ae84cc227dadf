"""Tri-state cached decision marker.

A cache read can mean three different things: nothing is known, a positive
decision was recorded, or a negative one was (for example a revoked role).
Keeping DENIED distinct from "absent" is what makes revocation observable.

Wire format (cache values are strings):
    ALLOWED -> "1"
    DENIED  -> "0"
    UNKNOWN -> no entry
"""

from enum import Enum


class CachedDecision(str, Enum):
    """Decision recovered from (or written to) the cache."""

    UNKNOWN = "unknown"
    ALLOWED = "allowed"
    DENIED = "denied"

    @classmethod
    def from_cache_value(cls, value: str | bytes | int | None) -> "CachedDecision":
        """Interpret a raw cache value.

        Args:
            value: Value returned by the cache adapter (None on miss).

        Returns:
            CachedDecision: ALLOWED for "1", DENIED for "0", UNKNOWN otherwise.
        """
        if value is None:
            return cls.UNKNOWN
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        raw = str(value)
        if raw == "1":
            return cls.ALLOWED
        if raw == "0":
            return cls.DENIED
        return cls.UNKNOWN

    @classmethod
    def from_bool(cls, allowed: bool) -> "CachedDecision":
        """Map a computed decision to its marker."""
        return cls.ALLOWED if allowed else cls.DENIED

    def to_cache_value(self) -> str:
        """Serialize for the cache.

        Raises:
            ValueError: UNKNOWN is never written.
        """
        if self is CachedDecision.ALLOWED:
            return "1"
        if self is CachedDecision.DENIED:
            return "0"
        raise ValueError("UNKNOWN decisions are not cached")

    @property
    def is_known(self) -> bool:
        """True for ALLOWED and DENIED."""
        return self is not CachedDecision.UNKNOWN
