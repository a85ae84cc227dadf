"""Infrastructure layer error types.

Infrastructure errors represent failures in external systems (Redis,
databases). Adapters wrap client exceptions in these types; the decision
engine never catches them, so they reach the caller unchanged.
"""

from enum import Enum


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes."""

    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"


class CacheError(Exception):
    """Base exception for cache operations.

    Attributes:
        infrastructure_code: What kind of cache operation failed.
        key: Cache key involved, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        infrastructure_code: InfrastructureErrorCode,
        key: str | None = None,
    ) -> None:
        super().__init__(message)
        self.infrastructure_code = infrastructure_code
        self.key = key
