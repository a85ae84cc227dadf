"""Centralized dependency injection.

Application-scoped singletons (settings, logger, cache keys) are cached with
``lru_cache``. Backend factories decide which adapter to build from Settings,
so embedders only pick a backend through ``RBAC_*`` environment variables or
pass their own adapters.

Usage:
    from scoped_rbac.core.container import create_rbac

    rbac = await create_rbac(config)
    await rbac.can("user", "read:post")

    # Bring your own backends
    rbac = await create_rbac(config, persistence=my_store, cache=my_cache)
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from scoped_rbac.application.services import DecisionEngine, RBACSynchronizer
from scoped_rbac.core.config import Settings, get_settings
from scoped_rbac.core.enums import ErrorCode
from scoped_rbac.core.errors import ConfigurationError, ValidationError
from scoped_rbac.core.result import Failure
from scoped_rbac.domain.entities import RBACConfig
from scoped_rbac.domain.validators import validate_rbac_config
from scoped_rbac.infrastructure.cache import CacheKeys

if TYPE_CHECKING:
    from scoped_rbac.domain.protocols import (
        LoggerProtocol,
        RBACCacheProtocol,
        RBACPersistenceProtocol,
    )

__all__ = [
    "create_cache",
    "create_persistence",
    "create_rbac",
    "get_cache_keys",
    "get_logger",
    "get_settings",
]


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    Renders JSON when RBAC_LOG_JSON is set, console output otherwise.

    Returns:
        Logger implementing LoggerProtocol.
    """
    from scoped_rbac.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.log_json, level=settings.log_level)


@lru_cache()
def get_cache_keys() -> CacheKeys:
    """Get cache key builder singleton (app-scoped).

    Returns:
        CacheKeys using the configured prefix.
    """
    return CacheKeys(prefix=get_settings().cache_key_prefix)


# ============================================================================
# Backend Factories
# ============================================================================


def create_cache(settings: Settings) -> "RBACCacheProtocol":
    """Build the decision cache selected by settings.

    Args:
        settings: Engine settings.

    Returns:
        MemoryCacheAdapter or RedisCacheAdapter.

    Raises:
        ValueError: If the backend is not supported or its URL is missing.
    """
    if settings.cache_backend == "redis":
        from scoped_rbac.infrastructure.cache import RedisCacheAdapter

        if not settings.redis_url:
            raise ValueError("redis_url is required when cache_backend is 'redis'")
        return RedisCacheAdapter.from_url(settings.redis_url)

    elif settings.cache_backend == "memory":
        from scoped_rbac.infrastructure.cache import MemoryCacheAdapter

        return MemoryCacheAdapter()

    else:
        raise ValueError(
            f"Unsupported cache backend: {settings.cache_backend}. "
            "Supported: 'memory', 'redis'"
        )


async def create_persistence(settings: Settings) -> "RBACPersistenceProtocol":
    """Build the persistence backend selected by settings.

    For SQLAlchemy the authorization tables are created if missing.

    Args:
        settings: Engine settings.

    Returns:
        MemoryPersistenceAdapter or SQLAlchemyPersistenceAdapter.

    Raises:
        ValueError: If the backend is not supported or its URL is missing.
    """
    if settings.persistence_backend == "sqlalchemy":
        from scoped_rbac.infrastructure.persistence import (
            Database,
            SQLAlchemyPersistenceAdapter,
        )

        if not settings.database_url:
            raise ValueError(
                "database_url is required when persistence_backend is 'sqlalchemy'"
            )
        database = Database(settings.database_url, echo=settings.db_echo)
        await database.create_all()
        return SQLAlchemyPersistenceAdapter(database)

    elif settings.persistence_backend == "memory":
        from scoped_rbac.infrastructure.persistence import MemoryPersistenceAdapter

        return MemoryPersistenceAdapter()

    else:
        raise ValueError(
            f"Unsupported persistence backend: {settings.persistence_backend}. "
            "Supported: 'memory', 'sqlalchemy'"
        )


# ============================================================================
# Entry Point
# ============================================================================


def load_config(config: RBACConfig | Mapping[str, Any]) -> RBACConfig:
    """Build (if needed) and validate the authorization model.

    Raises:
        ConfigurationError: If the configuration is incomplete or invalid.
    """
    if not isinstance(config, RBACConfig):
        try:
            config = RBACConfig.from_mapping(config)
        except KeyError as e:
            raise ConfigurationError(
                ValidationError(
                    code=ErrorCode.INVALID_CONFIGURATION,
                    message=f"Missing configuration key {e}",
                    field=str(e.args[0]),
                )
            ) from e

    result = validate_rbac_config(config)
    if isinstance(result, Failure):
        raise ConfigurationError(result.error)
    return result.value


async def create_rbac(
    config: RBACConfig | Mapping[str, Any],
    *,
    persistence: "RBACPersistenceProtocol | None" = None,
    cache: "RBACCacheProtocol | None" = None,
    logger: "LoggerProtocol | None" = None,
    settings: Settings | None = None,
) -> DecisionEngine:
    """Build the decision engine and synchronize the configuration.

    The returned engine is ready: synchronization has completed.

    Args:
        config: RBACConfig or its camelCase mapping form.
        persistence: Persistence backend (default: from settings).
        cache: Decision cache (default: from settings).
        logger: Logger (default: app-scoped ConsoleAdapter).
        settings: Settings (default: loaded from the environment).

    Returns:
        DecisionEngine implementing AuthorizationProtocol.

    Raises:
        ConfigurationError: Invalid configuration.
        GrantNotRegisteredError: The role map gives an unregistered grant.
    """
    rbac_config = load_config(config)
    if settings is None:
        settings = get_settings()
        cache_keys = get_cache_keys()
    else:
        cache_keys = CacheKeys(prefix=settings.cache_key_prefix)
    logger = logger or get_logger()

    if persistence is None:
        persistence = await create_persistence(settings)
    if cache is None:
        cache = create_cache(settings)

    engine = DecisionEngine(
        config=rbac_config,
        persistence=persistence,
        cache=cache,
        cache_keys=cache_keys,
        logger=logger,
        cache_ttl=settings.cache_ttl_seconds,
        cache_negative_decisions=settings.cache_negative_decisions,
    )
    await RBACSynchronizer(rbac_config, persistence, engine, logger).initialize()
    return engine
