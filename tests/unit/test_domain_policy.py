"""Unit tests for policy value objects and composite-string parsing."""

import pytest

from scoped_rbac.core.enums import ErrorCode
from scoped_rbac.core.errors import PolicyError
from scoped_rbac.core.result import Failure, Success
from scoped_rbac.domain.value_objects import (
    Policy,
    RolePermissionEdge,
    ScopedArgs,
    ScopedPermissionEdge,
    parse_policy,
    parse_role_permission,
    parse_scoped_role_permission,
)


@pytest.mark.unit
class TestParsePolicy:
    """Query policies: ``permission:entity[:scope]``."""

    def test_unscoped_policy(self, rbac_config):
        result = parse_policy("read:post", rbac_config)

        assert isinstance(result, Success)
        assert result.value == Policy(permission="read", entity="post")
        assert result.value.is_scoped is False

    def test_scoped_policy(self, rbac_config):
        result = parse_policy("read:post_draft:org", rbac_config)

        assert isinstance(result, Success)
        assert result.value.scope == "org"
        assert result.value.is_scoped is True
        assert str(result.value) == "read:post_draft:org"

    @pytest.mark.parametrize("raw", ["", "read", ":post", "read:", "a:b:c:d"])
    def test_malformed(self, rbac_config, raw):
        result = parse_policy(raw, rbac_config)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.POLICY_MALFORMED
        assert result.error.field == "policy"

    @pytest.mark.parametrize(
        ("raw", "field"),
        [
            ("publish:post", "permission"),
            ("read:comment", "entity"),
            ("read:post:team", "scope"),
        ],
    )
    def test_unknown_segment(self, rbac_config, raw, field):
        result = parse_policy(raw, rbac_config)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.POLICY_UNKNOWN_SEGMENT
        assert result.error.field == field
        assert result.error.details["policy"] == raw

    def test_entity_order_is_permission_first(self, rbac_config):
        # "post:read" is the configuration order, not a query policy
        result = parse_policy("post:read", rbac_config)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.POLICY_UNKNOWN_SEGMENT


@pytest.mark.unit
class TestParseRolePermissions:
    """Configuration entries: ``entity:permission[:scope]``."""

    def test_role_permission(self):
        result = parse_role_permission("post:read")

        assert result == Success(
            value=RolePermissionEdge(permission="read", entity="post")
        )

    def test_role_permission_rejects_scope(self):
        result = parse_role_permission("post:read:org")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.POLICY_MALFORMED

    def test_scoped_role_permission(self):
        result = parse_scoped_role_permission("post_draft:read:org")

        assert isinstance(result, Success)
        assert result.value == ScopedPermissionEdge(
            permission="read", entity="post_draft", scope="org"
        )
        assert result.value.unscoped == RolePermissionEdge(
            permission="read", entity="post_draft"
        )

    def test_scoped_role_permission_requires_scope(self):
        result = parse_scoped_role_permission("post:read")

        assert isinstance(result, Failure)
        assert result.error.field == "scoped_permissions"


@pytest.mark.unit
class TestScopedArgs:
    """Subject normalization."""

    def test_scalar_subject(self):
        args = ScopedArgs(subject=1, data={"id": 1})

        assert args.subjects == (1,)
        assert args.is_many is False

    def test_list_subject(self):
        args = ScopedArgs(subject=[1, 2], data={})

        assert args.subjects == (1, 2)
        assert args.is_many is True

    def test_string_subject_is_scalar(self):
        args = ScopedArgs(subject="alice", data={})

        assert args.subjects == ("alice",)

    def test_coerce_mapping(self):
        args = ScopedArgs.coerce({"subject": [3], "data": {"orgId": 3}})

        assert args == ScopedArgs(subject=[3], data={"orgId": 3})

    def test_coerce_passes_instances_through(self):
        args = ScopedArgs(subject=1, data={})

        assert ScopedArgs.coerce(args) is args

    def test_coerce_requires_subject_and_data(self):
        with pytest.raises(PolicyError) as exc_info:
            ScopedArgs.coerce({"subject": 1})

        assert exc_info.value.code == ErrorCode.SCOPED_ARGS_MISSING
        assert exc_info.value.error.details == {"missing": "data"}

    def test_coerce_reports_every_missing_key(self):
        with pytest.raises(PolicyError) as exc_info:
            ScopedArgs.coerce({})

        assert exc_info.value.error.details == {"missing": "subject, data"}
