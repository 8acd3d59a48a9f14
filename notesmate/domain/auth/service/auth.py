"""Login: credentials plus organization in, signed session out."""

import logging
from dataclasses import dataclass

from notesmate.domain.auth.model.employee import Employee
from notesmate.domain.auth.model.session import IssuedToken
from notesmate.domain.auth.service.credential import (
    INVALID_CREDENTIALS_MESSAGE,
    CredentialVerifier,
)
from notesmate.domain.auth.service.session import SessionService
from notesmate.domain.shared.error import AuthenticationError, BadRequestError
from notesmate.domain.shared.service import Service
from notesmate.domain.tenant.model.tenant import Tenant
from notesmate.domain.tenant.model.value import parse_tenant_code
from notesmate.domain.tenant.port.repository import TenantRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginOutcome:
    employee: Employee
    tenant: Tenant | None
    session: IssuedToken


class AuthService(Service):
    """Authenticates an employee within an organization.

    The organization is given by numeric code (``1002``) or short name
    (``cityclinic``, case-insensitive). Platform principals may omit it; everyone
    else must name their own organization, and naming another one fails exactly
    like a wrong password.
    """

    _verifier: CredentialVerifier
    _tenant_repo: TenantRepository
    _session_service: SessionService

    async def login(self, tenant_ref: str | None, username: str, password: str) -> LoginOutcome:
        if not username or not password:
            raise BadRequestError("Username and password are required", code="missing_fields")

        employee = await self._verifier.verify(username, password)
        tenant_ref = (tenant_ref or "").strip()

        if not tenant_ref and not employee.role.is_platform:
            raise BadRequestError("Organization code is required", code="tenant_required")

        if tenant_ref:
            tenant = await self._find_tenant(tenant_ref)
            if tenant is None or tenant.id != employee.tenant_id:
                logger.info(
                    "Login rejected: employee %s does not belong to organization %r",
                    employee.id,
                    tenant_ref,
                )
                raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE, code="invalid_credentials")
        elif employee.tenant_id is not None:
            tenant = await self._tenant_repo.get(employee.tenant_id)
        else:
            tenant = None

        if tenant is not None and not tenant.is_active:
            logger.info("Login rejected: organization %s is deactivated", tenant.code)
            raise AuthenticationError(
                "Organization deactivated. Contact support.",
                code="organization_deactivated",
            )

        session = self._session_service.open_session(employee)
        logger.info(
            "Login: employee=%s role=%s tenant=%s",
            employee.id,
            employee.role,
            tenant.code if tenant else None,
        )
        return LoginOutcome(employee=employee, tenant=tenant, session=session)

    async def _find_tenant(self, tenant_ref: str) -> Tenant | None:
        if tenant_ref.isascii() and tenant_ref.isdigit():
            code = parse_tenant_code(tenant_ref)
            return await self._tenant_repo.get_by_code(code) if code is not None else None
        return await self._tenant_repo.get_by_short_name(tenant_ref)
