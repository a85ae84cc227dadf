"""Domain validators package."""

from scoped_rbac.domain.validators.config_validator import validate_rbac_config

__all__ = ["validate_rbac_config"]
