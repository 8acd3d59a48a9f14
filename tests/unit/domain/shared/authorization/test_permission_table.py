"""Tests for the role -> action permission table."""

import pytest

from notesmate.domain.auth.model.role import Role
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.authorization.permission import (
    PERMISSION_TABLE,
    has_permission,
    permissions_for,
    validate_coverage,
)
from notesmate.domain.shared.error import ConfigurationError

# Expected grants, written out independently of the table under test.
EXPECTED: dict[Role, set[str]] = {
    Role.SUPER_ADMIN: {a.value for a in Action},
    Role.ORG_ADMIN: {
        "patient:read",
        "visit:read",
        "note:read",
        "organization:read",
        "organization:update",
        "employee:read",
        "employee:create",
        "employee:update",
        "report:export",
        "backup:create",
    },
    Role.DOCTOR: {
        "patient:read",
        "patient:create",
        "patient:update",
        "visit:read",
        "visit:create",
        "visit:update",
        "note:read",
        "note:create",
        "note:update",
        "organization:read",
        "report:export",
    },
    Role.STAFF: {
        "patient:read",
        "patient:create",
        "visit:read",
        "visit:create",
        "note:read",
        "organization:read",
    },
}


class TestHasPermission:
    @pytest.mark.parametrize("role", list(Role))
    @pytest.mark.parametrize("action", list(Action))
    def test_every_role_action_pair(self, role: Role, action: Action):
        assert has_permission(role, action) is (action.value in EXPECTED[role])

    def test_accepts_wire_literals(self):
        assert has_permission("doctor", "note:create")
        assert not has_permission("staff", "note:create")

    @pytest.mark.parametrize("role", [None, "", "root", "SUPER_ADMIN", "Doctor"])
    def test_unknown_role_granted_nothing(self, role):
        for action in Action:
            assert not has_permission(role, action)

    @pytest.mark.parametrize("action", ["", "patient:delete", "PATIENT:READ", "tenant"])
    def test_unknown_action_granted_to_nobody(self, action: str):
        for role in Role:
            assert not has_permission(role, action)

    def test_only_platform_role_administers_tenants(self):
        tenant_actions = [a for a in Action if a.value.startswith("tenant:")]
        for role in Role:
            granted = any(has_permission(role, a) for a in tenant_actions)
            assert granted is role.is_platform


class TestPermissionsFor:
    def test_matches_table(self):
        for role in Role:
            assert permissions_for(role) == PERMISSION_TABLE[role]


class TestValidateCoverage:
    def test_shipped_table_is_complete(self):
        validate_coverage()

    def test_missing_role_detected(self):
        table = {r: a for r, a in PERMISSION_TABLE.items() if r is not Role.STAFF}

        with pytest.raises(ConfigurationError, match="staff"):
            validate_coverage(table)

    def test_ungranted_action_detected(self):
        table = {
            r: a - {Action.BACKUP_CREATE} for r, a in PERMISSION_TABLE.items()
        }

        with pytest.raises(ConfigurationError, match="backup:create"):
            validate_coverage(table)

    def test_platform_role_must_be_superset(self):
        table = dict(PERMISSION_TABLE)
        table[Role.SUPER_ADMIN] = PERMISSION_TABLE[Role.SUPER_ADMIN] - {Action.NOTE_CREATE}

        with pytest.raises(ConfigurationError, match="note:create"):
            validate_coverage(table)
