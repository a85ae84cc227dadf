"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from scoped_rbac.domain.protocols import (
        RBACCacheProtocol,
        RBACPersistenceProtocol,
    )
"""

from scoped_rbac.domain.protocols.authorization_protocol import AuthorizationProtocol
from scoped_rbac.domain.protocols.cache_keys_protocol import CacheKeysProtocol
from scoped_rbac.domain.protocols.cache_protocol import RBACCacheProtocol
from scoped_rbac.domain.protocols.logger_protocol import LoggerProtocol
from scoped_rbac.domain.protocols.persistence_protocol import RBACPersistenceProtocol

__all__ = [
    "AuthorizationProtocol",
    "CacheKeysProtocol",
    "LoggerProtocol",
    "RBACCacheProtocol",
    "RBACPersistenceProtocol",
]
