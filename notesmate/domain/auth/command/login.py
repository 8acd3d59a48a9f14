"""Login command and handler."""

from pydantic import field_validator

from notesmate.domain.auth.model.view import EmployeeProfile
from notesmate.domain.auth.service.auth import AuthService
from notesmate.domain.shared.authorization.gate import public
from notesmate.domain.shared.command import Command, CommandHandler, Result
from notesmate.domain.tenant.model.view import TenantSummary


class Login(Command):
    """Credentials for opening a session.

    ``tenant`` is the organization's numeric code (``1002`` or ``"1002"``) or
    its short name; platform administrators may leave it out.
    """

    tenant: str | None = None
    username: str = ""
    password: str = ""

    @field_validator("tenant", mode="before")
    @classmethod
    def code_as_text(cls, v: object) -> object:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class LoginResult(Result):
    employee: EmployeeProfile
    tenant: TenantSummary | None
    token: str
    token_type: str = "Bearer"
    expires_in: int


class LoginHandler(CommandHandler[Login, LoginResult]):
    __auth__ = public()
    auth_service: AuthService

    async def run(self, cmd: Login) -> LoginResult:
        outcome = await self.auth_service.login(cmd.tenant, cmd.username, cmd.password)
        return LoginResult(
            employee=EmployeeProfile.from_employee(outcome.employee),
            tenant=TenantSummary.from_tenant(outcome.tenant) if outcome.tenant else None,
            token=outcome.session.token,
            expires_in=outcome.session.expires_in,
        )
