"""CreateTenant command and handler."""

from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.auth.model.view import EmployeeProfile
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.authorization.gate import requires
from notesmate.domain.shared.command import Command, CommandHandler, Result
from notesmate.domain.tenant.model.value import TenantCode
from notesmate.domain.tenant.model.view import TenantSummary
from notesmate.domain.tenant.service.tenant import InitialAdmin, TenantService


class CreateTenant(Command):
    name: str
    short_name: str
    code: TenantCode | None = None  # next free code when omitted
    organization_type: str | None = None
    admin: InitialAdmin | None = None


class CreateTenantResult(Result):
    tenant: TenantSummary
    admin: EmployeeProfile | None = None


class CreateTenantHandler(CommandHandler[CreateTenant, CreateTenantResult]):
    __auth__ = requires(Action.TENANT_CREATE)
    claims: Claims
    tenant_service: TenantService

    async def run(self, cmd: CreateTenant) -> CreateTenantResult:
        tenant, admin = await self.tenant_service.create(
            self.claims,
            name=cmd.name,
            short_name=cmd.short_name,
            code=cmd.code,
            organization_type=cmd.organization_type,
            admin=cmd.admin,
        )
        return CreateTenantResult(
            tenant=TenantSummary.from_tenant(tenant),
            admin=EmployeeProfile.from_employee(admin) if admin else None,
        )
