"""Domain enums package."""

from scoped_rbac.domain.enums.cached_decision import CachedDecision

__all__ = ["CachedDecision"]
