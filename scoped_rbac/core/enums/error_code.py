"""Machine-readable error codes.

Error codes follow ENTITY_REASON naming.

Categories:
- Configuration errors (INVALID_CONFIGURATION, GRANT_NOT_REGISTERED)
- Policy errors (POLICY_*)
- Scoped argument errors (SCOPED_ARGS_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Configuration errors
    INVALID_CONFIGURATION = "invalid_configuration"
    GRANT_NOT_REGISTERED = "grant_not_registered"

    # Policy errors
    POLICY_MALFORMED = "policy_malformed"
    POLICY_UNKNOWN_SEGMENT = "policy_unknown_segment"

    # Scoped argument errors
    SCOPED_ARGS_MISSING = "scoped_args_missing"
    SCOPED_ARGS_UNEXPECTED = "scoped_args_unexpected"
