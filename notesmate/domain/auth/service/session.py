"""Session service: issues new tokens for login, role switches and impersonation."""

import logging

from notesmate.domain.auth.model.claims import Claims, ClaimSet
from notesmate.domain.auth.model.employee import Employee
from notesmate.domain.auth.model.role import Role
from notesmate.domain.auth.model.session import IssuedToken
from notesmate.domain.auth.port.repository import EmployeeRepository
from notesmate.domain.auth.service.token import TokenService
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.authorization.permission import has_permission
from notesmate.domain.shared.error import (
    AuthenticationError,
    AuthorizationError,
    BadRequestError,
    NotFoundError,
)
from notesmate.domain.shared.service import Service
from notesmate.domain.tenant.model.value import TenantId
from notesmate.domain.tenant.port.repository import TenantRepository

logger = logging.getLogger(__name__)


class SessionService(Service):
    """Derives claims from the persisted employee record and signs them.

    Existing tokens are never modified: every operation returns a brand-new
    token and the old one stays valid until it expires. Role fields always come
    from the database, so a role removed since the old token was issued is
    honoured on the next switch.
    """

    _employee_repo: EmployeeRepository
    _tenant_repo: TenantRepository
    _token_service: TokenService

    def open_session(self, employee: Employee) -> IssuedToken:
        """Issue the first token of a session: primary role active, no impersonation."""
        return self._issue(employee, active_role=employee.role, impersonated_tenant_id=None)

    async def switch_tenant(self, claims: Claims, tenant_code: int) -> IssuedToken:
        """Impersonate the tenant with ``tenant_code`` (platform principals only).

        Switching to one's own home tenant ends impersonation.
        """
        employee = await self._current_employee(claims)
        self._require_platform(employee)

        tenant = await self._tenant_repo.get_by_code(tenant_code)
        if tenant is None:
            raise NotFoundError(f"Tenant {tenant_code} not found", code="tenant_not_found")
        if not tenant.is_active:
            raise AuthorizationError(f"Tenant {tenant_code} is inactive", code="tenant_inactive")

        impersonated = None if tenant.id == employee.tenant_id else tenant.id
        logger.info(
            "Tenant switch: principal=%s tenant=%s (%s)",
            employee.id,
            tenant.code,
            "impersonating" if impersonated else "home",
        )
        return self._issue(employee, claims.active_role, impersonated)

    async def clear_impersonation(self, claims: Claims) -> IssuedToken:
        employee = await self._current_employee(claims)
        self._require_platform(employee)
        logger.info("Impersonation cleared: principal=%s", employee.id)
        return self._issue(employee, claims.active_role, impersonated_tenant_id=None)

    async def switch_role(self, claims: Claims, target_role: str) -> IssuedToken:
        """Make ``target_role`` the active role, keeping any impersonation.

        The target must be the employee's current primary or secondary role.
        """
        if not target_role:
            raise BadRequestError("Target role is required", code="missing_fields", field="role")

        employee = await self._current_employee(claims)
        role = Role.parse(target_role)
        if role is None or role not in employee.eligible_roles:
            logger.warning(
                "Role switch denied: principal=%s target=%r eligible=%s",
                employee.id,
                target_role,
                sorted(employee.eligible_roles),
            )
            raise AuthorizationError(
                f"Role {target_role!r} is not assigned to this account",
                code="role_not_assigned",
            )

        logger.info("Role switch: principal=%s %s -> %s", employee.id, claims.active_role, role)
        return self._issue(employee, role, claims.impersonated_tenant_id)

    async def _current_employee(self, claims: Claims) -> Employee:
        employee = await self._employee_repo.get(claims.principal_id)
        if employee is None or not employee.is_active:
            logger.warning(
                "Session refused for missing or deactivated principal %s", claims.principal_id
            )
            raise AuthenticationError(
                "Account deactivated. Contact your administrator.",
                code="account_deactivated",
            )
        return employee

    @staticmethod
    def _require_platform(employee: Employee) -> None:
        if not has_permission(employee.role, Action.TENANT_IMPERSONATE):
            logger.warning("Tenant switch denied: principal=%s role=%s", employee.id, employee.role)
            raise AuthorizationError(
                "Only platform administrators can switch tenants",
                code="platform_role_required",
            )

    def _issue(
        self,
        employee: Employee,
        active_role: Role,
        impersonated_tenant_id: TenantId | None,
    ) -> IssuedToken:
        if active_role not in employee.eligible_roles:
            active_role = employee.role
        if not employee.role.is_platform:
            impersonated_tenant_id = None

        claims = self._token_service.stamp(
            ClaimSet(
                principal_id=employee.id,
                home_tenant_id=employee.tenant_id,
                role=employee.role,
                secondary_role=employee.secondary_role,
                active_role=active_role,
                impersonated_tenant_id=impersonated_tenant_id,
            )
        )
        return IssuedToken(
            token=self._token_service.encode(claims),
            claims=claims,
            expires_in=self._token_service.validity_seconds,
        )
