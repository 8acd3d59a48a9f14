"""Employee administration, confined to the caller's effective tenant."""

import logging

from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.auth.model.employee import Employee
from notesmate.domain.auth.model.role import GRANTABLE_ROLES, Role
from notesmate.domain.auth.model.value import EmployeeId
from notesmate.domain.auth.port.password import PasswordHasher
from notesmate.domain.auth.port.repository import EmployeeRepository
from notesmate.domain.shared.authorization.tenancy import guard_tenant_access
from notesmate.domain.shared.error import (
    AuthorizationError,
    BadRequestError,
    ConflictError,
)
from notesmate.domain.shared.service import Service

logger = logging.getLogger(__name__)


def _check_grantable(role: Role, secondary_role: Role | None) -> None:
    for candidate in (role, secondary_role):
        if candidate is not None and candidate not in GRANTABLE_ROLES:
            raise AuthorizationError(
                f"Role {candidate} cannot be granted", code="role_not_grantable"
            )


class EmployeeService(Service):
    """Create, update and list employees of one tenant.

    Platform administrators must impersonate a tenant first. Employees are
    never deleted, only deactivated.
    """

    _employee_repo: EmployeeRepository
    _hasher: PasswordHasher

    async def create(
        self,
        claims: Claims,
        *,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        role: Role,
        secondary_role: Role | None = None,
        title: str | None = None,
    ) -> Employee:
        tenant_id = claims.effective_tenant_id
        guard_tenant_access(claims, tenant_id)
        assert tenant_id is not None

        if not username or not password:
            raise BadRequestError("Username and password are required", code="missing_fields")
        _check_grantable(role, secondary_role)

        if await self._employee_repo.get_by_username(username) is not None:
            raise ConflictError(f"Username {username!r} is already taken", code="username_taken")

        employee = Employee.create(
            tenant_id=tenant_id,
            username=username,
            password_hash=self._hasher.hash(password),
            first_name=first_name,
            last_name=last_name,
            role=role,
            secondary_role=secondary_role,
            title=title,
        )
        await self._employee_repo.save(employee)
        logger.info(
            "Employee created: id=%s tenant=%s role=%s by=%s",
            employee.id,
            tenant_id,
            role,
            claims.principal_id,
        )
        return employee

    async def update_roles(
        self,
        claims: Claims,
        employee_id: EmployeeId,
        role: Role,
        secondary_role: Role | None,
    ) -> Employee:
        employee = await self._load(claims, employee_id)
        _check_grantable(role, secondary_role)
        employee.change_roles(role, secondary_role)
        await self._employee_repo.save(employee)
        logger.info(
            "Employee roles changed: id=%s role=%s secondary=%s by=%s",
            employee.id,
            role,
            secondary_role,
            claims.principal_id,
        )
        return employee

    async def set_active(
        self, claims: Claims, employee_id: EmployeeId, is_active: bool
    ) -> Employee:
        if not is_active and employee_id == claims.principal_id:
            raise BadRequestError(
                "You cannot deactivate your own account", code="self_deactivation"
            )
        employee = await self._load(claims, employee_id)
        employee.set_active(is_active)
        await self._employee_repo.save(employee)
        logger.info(
            "Employee %s: id=%s by=%s",
            "activated" if is_active else "deactivated",
            employee.id,
            claims.principal_id,
        )
        return employee

    async def list_employees(self, claims: Claims) -> list[Employee]:
        tenant_id = claims.effective_tenant_id
        guard_tenant_access(claims, tenant_id)
        assert tenant_id is not None
        return await self._employee_repo.list_by_tenant(tenant_id)

    async def _load(self, claims: Claims, employee_id: EmployeeId) -> Employee:
        employee = await self._employee_repo.get(employee_id)
        guard_tenant_access(claims, employee.tenant_id if employee else None)
        assert employee is not None
        return employee
