"""Session switching commands: impersonate a tenant, stop impersonating, change active role.

Each returns a new token; the caller's current token is left untouched.
"""

from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.auth.model.session import IssuedToken
from notesmate.domain.auth.model.view import SessionView
from notesmate.domain.auth.service.session import SessionService
from notesmate.domain.shared.authorization.gate import authenticated
from notesmate.domain.shared.command import Command, CommandHandler, Result
from notesmate.domain.tenant.model.value import TenantCode


class SessionResult(Result):
    token: str
    token_type: str = "Bearer"
    expires_in: int
    session: SessionView

    @classmethod
    def from_issued(cls, issued: IssuedToken) -> "SessionResult":
        return cls(
            token=issued.token,
            expires_in=issued.expires_in,
            session=SessionView.from_claims(issued.claims),
        )


class SwitchTenant(Command):
    tenant_code: TenantCode


class SwitchTenantHandler(CommandHandler[SwitchTenant, SessionResult]):
    __auth__ = authenticated()
    claims: Claims
    session_service: SessionService

    async def run(self, cmd: SwitchTenant) -> SessionResult:
        issued = await self.session_service.switch_tenant(self.claims, cmd.tenant_code)
        return SessionResult.from_issued(issued)


class ClearImpersonation(Command): ...


class ClearImpersonationHandler(CommandHandler[ClearImpersonation, SessionResult]):
    __auth__ = authenticated()
    claims: Claims
    session_service: SessionService

    async def run(self, cmd: ClearImpersonation) -> SessionResult:
        issued = await self.session_service.clear_impersonation(self.claims)
        return SessionResult.from_issued(issued)


class SwitchRole(Command):
    role: str = ""


class SwitchRoleHandler(CommandHandler[SwitchRole, SessionResult]):
    __auth__ = authenticated()
    claims: Claims
    session_service: SessionService

    async def run(self, cmd: SwitchRole) -> SessionResult:
        issued = await self.session_service.switch_role(self.claims, cmd.role)
        return SessionResult.from_issued(issued)
