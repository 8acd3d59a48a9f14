"""Unit tests for the Claims model invariants."""

import pytest
from pydantic import ValidationError

from factories import make_claims
from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.auth.model.role import Role
from notesmate.domain.tenant.model.value import TenantId


class TestClaimsInvariants:
    def test_active_role_may_be_secondary_role(self):
        claims = make_claims(
            role=Role.DOCTOR, secondary_role=Role.ORG_ADMIN, active_role=Role.ORG_ADMIN
        )

        assert claims.active_role is Role.ORG_ADMIN
        assert claims.eligible_roles == {Role.DOCTOR, Role.ORG_ADMIN}

    def test_active_role_outside_eligible_roles_rejected(self):
        with pytest.raises(ValidationError):
            make_claims(role=Role.STAFF, active_role=Role.DOCTOR)

    def test_non_platform_role_cannot_impersonate(self):
        with pytest.raises(ValidationError):
            make_claims(role=Role.ORG_ADMIN, impersonated_tenant_id=TenantId.generate())

    def test_claims_are_immutable(self):
        claims = make_claims()

        with pytest.raises(ValidationError):
            claims.active_role = Role.SUPER_ADMIN  # type: ignore[misc]

    def test_unknown_fields_rejected(self):
        data = make_claims().model_dump(by_alias=True)
        data["isRoot"] = True

        with pytest.raises(ValidationError):
            Claims.model_validate(data)


class TestEffectiveTenant:
    def test_home_tenant_when_not_impersonating(self):
        home = TenantId.generate()
        claims = make_claims(home_tenant_id=home)

        assert claims.effective_tenant_id == home
        assert not claims.is_impersonating

    def test_impersonated_tenant_wins(self):
        home = TenantId.generate()
        target = TenantId.generate()
        claims = make_claims(
            role=Role.SUPER_ADMIN, home_tenant_id=home, impersonated_tenant_id=target
        )

        assert claims.effective_tenant_id == target
        assert claims.is_impersonating
