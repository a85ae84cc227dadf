"""Core enums package.

Usage:
    from scoped_rbac.core.enums import ErrorCode
"""

from scoped_rbac.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode"]
