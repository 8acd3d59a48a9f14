"""Unit tests for auth command and query handlers, including their __auth__ gates."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from pydantic import ValidationError

from factories import make_claims, make_employee, make_tenant, make_token_service
from notesmate.domain.auth.command.employee import (
    CreateEmployee,
    CreateEmployeeHandler,
    SetEmployeeActive,
    SetEmployeeActiveHandler,
)
from notesmate.domain.auth.command.login import Login, LoginHandler
from notesmate.domain.auth.command.session import (
    SwitchRole,
    SwitchRoleHandler,
    SwitchTenant,
)
from notesmate.domain.auth.model.role import Role
from notesmate.domain.auth.model.session import IssuedToken
from notesmate.domain.auth.query.get_session import GetSession, GetSessionHandler
from notesmate.domain.auth.query.list_employees import ListEmployees, ListEmployeesHandler
from notesmate.domain.auth.service.auth import LoginOutcome
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.error import AuthenticationError, AuthorizationError
from notesmate.domain.tenant.model.value import MAX_TENANT_CODE


def make_issued(claims) -> IssuedToken:
    service = make_token_service()
    return IssuedToken(token=service.encode(claims), claims=claims, expires_in=3600)


class TestLoginHandler:
    @pytest.mark.asyncio
    async def test_login_is_public_and_hides_password_hash(self):
        tenant = make_tenant()
        employee = make_employee(tenant_id=tenant.id)
        claims = make_claims(principal_id=employee.id, home_tenant_id=tenant.id)
        auth_service = MagicMock()
        auth_service.login = AsyncMock(
            return_value=LoginOutcome(employee=employee, tenant=tenant, session=make_issued(claims))
        )
        handler = LoginHandler(auth_service=auth_service)

        result = await handler.run(Login(tenant="1002", username="u", password="p"))

        auth_service.login.assert_awaited_once_with("1002", "u", "p")
        assert result.token_type == "Bearer"
        assert result.expires_in == 3600
        assert result.tenant.code == tenant.code
        assert "password_hash" not in result.model_dump()["employee"]


class TestLoginCommand:
    def test_numeric_tenant_code_becomes_text(self):
        assert Login(tenant=1002, username="u", password="p").tenant == "1002"

    def test_short_name_kept(self):
        assert Login(tenant="CityClinic").tenant == "CityClinic"

    def test_boolean_tenant_rejected(self):
        with pytest.raises(ValidationError):
            Login(tenant=True)


class TestSwitchTenantCommand:
    @pytest.mark.parametrize("code", [0, -1, MAX_TENANT_CODE + 1, int("9" * 30)])
    def test_code_outside_storable_range_rejected(self, code: int):
        with pytest.raises(ValidationError):
            SwitchTenant(tenant_code=code)

    def test_largest_storable_code_accepted(self):
        assert SwitchTenant(tenant_code=MAX_TENANT_CODE).tenant_code == MAX_TENANT_CODE


class TestGetSessionHandler:
    @pytest.mark.asyncio
    async def test_reports_active_role_permissions(self):
        claims = make_claims(role=Role.STAFF)
        handler = GetSessionHandler(claims=claims)

        result = await handler.run(GetSession())

        assert result.session.active_role == "staff"
        assert Action.PATIENT_CREATE in result.permissions
        assert Action.NOTE_CREATE not in result.permissions

    @pytest.mark.asyncio
    async def test_requires_session(self):
        handler = GetSessionHandler(claims=None)  # type: ignore[arg-type]

        with pytest.raises(AuthenticationError) as exc_info:
            await handler.run(GetSession())

        assert exc_info.value.code == "missing_token"


class TestSwitchRoleHandler:
    @pytest.mark.asyncio
    async def test_returns_new_session(self):
        claims = make_claims(role=Role.DOCTOR, secondary_role=Role.ORG_ADMIN)
        switched = make_claims(
            principal_id=claims.principal_id,
            home_tenant_id=claims.home_tenant_id,
            role=Role.DOCTOR,
            secondary_role=Role.ORG_ADMIN,
            active_role=Role.ORG_ADMIN,
        )
        session_service = MagicMock()
        session_service.switch_role = AsyncMock(return_value=make_issued(switched))
        handler = SwitchRoleHandler(claims=claims, session_service=session_service)

        result = await handler.run(SwitchRole(role="org_admin"))

        session_service.switch_role.assert_awaited_once_with(claims, "org_admin")
        assert result.session.active_role == "org_admin"
        assert result.session.effective_tenant_id == str(claims.home_tenant_id)


class TestEmployeeHandlerGates:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [Role.DOCTOR, Role.STAFF])
    async def test_clinical_roles_cannot_create_employees(self, role: Role):
        employee_service = MagicMock()
        employee_service.create = AsyncMock()
        handler = CreateEmployeeHandler(
            claims=make_claims(role=role), employee_service=employee_service
        )

        with pytest.raises(AuthorizationError) as exc_info:
            await handler.run(
                CreateEmployee(
                    username="x", password="y", first_name="A", last_name="B", role=Role.STAFF
                )
            )

        assert exc_info.value.code == "insufficient_permissions"
        employee_service.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_org_admin_creates_employee(self):
        created = make_employee(role=Role.STAFF)
        employee_service = MagicMock()
        employee_service.create = AsyncMock(return_value=created)
        claims = make_claims(role=Role.ORG_ADMIN)
        handler = CreateEmployeeHandler(claims=claims, employee_service=employee_service)

        result = await handler.run(
            CreateEmployee(
                username="x", password="y", first_name="A", last_name="B", role=Role.STAFF
            )
        )

        assert result.employee.id == str(created.id)
        assert result.employee.role == "staff"

    @pytest.mark.asyncio
    async def test_gate_uses_active_role_not_primary(self):
        """An org_admin currently acting as doctor cannot administer employees."""
        employee_service = MagicMock()
        employee_service.set_active = AsyncMock()
        claims = make_claims(
            role=Role.ORG_ADMIN, secondary_role=Role.DOCTOR, active_role=Role.DOCTOR
        )
        handler = SetEmployeeActiveHandler(claims=claims, employee_service=employee_service)

        with pytest.raises(AuthorizationError):
            await handler.run(SetEmployeeActive(employee_id=uuid4(), is_active=False))

    @pytest.mark.asyncio
    async def test_staff_cannot_list_employees(self):
        handler = ListEmployeesHandler(
            claims=make_claims(role=Role.STAFF), employee_service=MagicMock()
        )

        with pytest.raises(AuthorizationError):
            await handler.run(ListEmployees())
