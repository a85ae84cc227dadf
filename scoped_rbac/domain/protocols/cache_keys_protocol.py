"""Cache keys protocol for decision key generation.

One builder produces every key, for reads and writes alike, so a value
primed by ``grant()`` is exactly the one ``can()`` later reads.

Architecture:
    - Domain layer protocol (port)
    - Infrastructure adapter: scoped_rbac/infrastructure/cache/cache_keys.py
"""

from collections.abc import Sequence
from typing import Protocol

from scoped_rbac.domain.value_objects import Subject


class CacheKeysProtocol(Protocol):
    """Protocol for generating decision cache keys.

    All keys follow hierarchical structure: {prefix}:{kind}:{...}
    """

    @property
    def prefix(self) -> str:
        """Cache key prefix (typically "rbac")."""
        ...

    def policy(self, role: str, permission: str, entity: str) -> str:
        """Unscoped policy decision key."""
        ...

    def scoped_policy(
        self,
        role: str,
        permission: str,
        entity: str,
        scope: str,
        subject: Subject | Sequence[Subject],
    ) -> str:
        """Scoped policy decision key (includes the subject set)."""
        ...

    def role_grant(self, role: str, grant: str) -> str:
        """Role grant decision key."""
        ...

    def subject_role(self, subject: Subject, role: str) -> str:
        """Subject role assignment key."""
        ...
