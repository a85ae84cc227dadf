"""Cache key construction utilities.

Centralized key construction so that the write path (``grant``,
``grant_role``) and the read path (``can``, ``has_grant``) always agree.
All keys follow the pattern: {prefix}:{kind}:{...}

Usage:
    from scoped_rbac.core.container import get_cache_keys

    keys = get_cache_keys()
    keys.policy("user", "read", "post")  # "rbac:policy:user:read:post"
"""

from collections.abc import Sequence
from dataclasses import dataclass

from scoped_rbac.domain.value_objects import ScopedArgs, Subject


@dataclass(frozen=True)
class CacheKeys:
    """Decision cache key construction.

    Attributes:
        prefix: Cache key prefix (typically "rbac").

    Example:
        keys = CacheKeys(prefix="rbac")
        key = keys.role_grant("guest", "register")  # "rbac:grant:guest:register"
    """

    prefix: str = "rbac"

    def policy(self, role: str, permission: str, entity: str) -> str:
        """Unscoped policy decision key.

        Pattern: {prefix}:policy:{role}:{permission}:{entity}

        Example:
            "rbac:policy:user:read:post"
        """
        return f"{self.prefix}:policy:{role}:{permission}:{entity}"

    def scoped_policy(
        self,
        role: str,
        permission: str,
        entity: str,
        scope: str,
        subject: Subject | Sequence[Subject],
    ) -> str:
        """Scoped policy decision key.

        Pattern: {prefix}:scoped:{role}:{permission}:{entity}:{scope}:{subjects}

        Multiple subjects are joined with commas in the order given.

        Example:
            "rbac:scoped:user:read:post_draft:org:1,2"
        """
        subjects = ",".join(
            str(s) for s in ScopedArgs(subject=subject, data={}).subjects
        )
        return f"{self.prefix}:scoped:{role}:{permission}:{entity}:{scope}:{subjects}"

    def role_grant(self, role: str, grant: str) -> str:
        """Role grant decision key.

        Pattern: {prefix}:grant:{role}:{grant}
        """
        return f"{self.prefix}:grant:{role}:{grant}"

    def subject_role(self, subject: Subject, role: str) -> str:
        """Subject role assignment key.

        Pattern: {prefix}:subject:{subject}:role:{role}
        """
        return f"{self.prefix}:subject:{subject}:role:{role}"
