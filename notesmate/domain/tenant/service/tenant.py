"""Tenant administration and record-identifier minting."""

import logging

from pydantic import ValidationError

from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.auth.model.employee import Employee
from notesmate.domain.auth.model.role import Role
from notesmate.domain.auth.port.password import PasswordHasher
from notesmate.domain.auth.port.repository import EmployeeRepository
from notesmate.domain.shared.authorization.tenancy import (
    TenantScope,
    guard_platform_scope,
    guard_tenant_access,
)
from notesmate.domain.shared.error import (
    AuthorizationError,
    BadRequestError,
    ConflictError,
    NotFoundError,
)
from notesmate.domain.shared.model.value import ValueObject
from notesmate.domain.shared.service import Service
from notesmate.domain.tenant.model.tenant import Tenant
from notesmate.domain.tenant.model.value import (
    ShortName,
    format_record_identifier,
)
from notesmate.domain.tenant.port.repository import TenantRepository

logger = logging.getLogger(__name__)


class InitialAdmin(ValueObject):
    """Credentials for the first org_admin of a new tenant."""

    username: str
    password: str
    first_name: str
    last_name: str


class TenantService(Service):
    _tenant_repo: TenantRepository
    _employee_repo: EmployeeRepository
    _hasher: PasswordHasher

    async def create(
        self,
        claims: Claims,
        *,
        name: str,
        short_name: str,
        code: int | None = None,
        organization_type: str | None = None,
        admin: InitialAdmin | None = None,
    ) -> tuple[Tenant, Employee | None]:
        """Create a tenant, and optionally its first org_admin.

        Raises:
            AuthorizationError: caller is not acting for the whole platform.
            BadRequestError: malformed short name or missing fields.
            ConflictError: code, short name or admin username already in use.
        """
        guard_platform_scope(claims)
        if not name.strip():
            raise BadRequestError("Organization name is required", code="missing_fields")
        try:
            normalized = ShortName(short_name)
        except ValidationError as e:
            raise BadRequestError(
                "Short name must be 2-16 letters or digits",
                code="invalid_short_name",
                field="short_name",
            ) from e

        if await self._tenant_repo.get_by_short_name(str(normalized)) is not None:
            raise ConflictError(f"Short name {normalized} is already taken", code="tenant_exists")

        if code is None:
            code = await self._tenant_repo.next_code()
        elif await self._tenant_repo.get_by_code(code) is not None:
            raise ConflictError(f"Tenant code {code} is already taken", code="tenant_exists")

        if admin is not None:
            if not admin.username or not admin.password:
                raise BadRequestError(
                    "Admin username and password are required", code="missing_fields"
                )
            if await self._employee_repo.get_by_username(admin.username) is not None:
                raise ConflictError(
                    f"Username {admin.username!r} is already taken", code="username_taken"
                )

        tenant = Tenant.create(
            code=code,
            short_name=str(normalized),
            name=name.strip(),
            organization_type=organization_type,
        )
        await self._tenant_repo.save(tenant)

        admin_employee = None
        if admin is not None:
            admin_employee = Employee.create(
                tenant_id=tenant.id,
                username=admin.username,
                password_hash=self._hasher.hash(admin.password),
                first_name=admin.first_name,
                last_name=admin.last_name,
                role=Role.ORG_ADMIN,
            )
            await self._employee_repo.save(admin_employee)

        logger.info(
            "Tenant created: code=%s short_name=%s by=%s (initial admin: %s)",
            tenant.code,
            tenant.short_name,
            claims.principal_id,
            admin_employee.id if admin_employee else None,
        )
        return tenant, admin_employee

    async def list_tenants(self, claims: Claims) -> list[Tenant]:
        guard_platform_scope(claims)
        return await self._tenant_repo.list_all()

    async def get(self, claims: Claims, code: int) -> Tenant:
        """Read one tenant.

        Platform administrators see any tenant; everyone else only their effective one.
        """
        tenant = await self._tenant_repo.get_by_code(code)
        if tenant is None and claims.role.is_platform and not claims.is_impersonating:
            raise NotFoundError(f"Tenant {code} not found", code="tenant_not_found")
        guard_tenant_access(claims, tenant.id if tenant else None, TenantScope.ADMINISTRATION)
        assert tenant is not None
        return tenant

    async def mint_record_identifier(self, claims: Claims) -> str:
        """Allocate the effective tenant's next record identifier, e.g. ``CITYCLINIC-000042``."""
        tenant_id = claims.effective_tenant_id
        guard_tenant_access(claims, tenant_id)
        assert tenant_id is not None

        tenant = await self._tenant_repo.get(tenant_id)
        if tenant is None:
            raise NotFoundError("Tenant not found", code="tenant_not_found")
        if not tenant.is_active or tenant.is_platform:
            raise AuthorizationError(
                f"Tenant {tenant.code} cannot hold records", code="tenant_inactive"
            )

        number = await self._tenant_repo.allocate_record_number(tenant_id)
        identifier = format_record_identifier(tenant.short_name, number)
        logger.debug("Minted record identifier %s for tenant %s", identifier, tenant.code)
        return identifier
