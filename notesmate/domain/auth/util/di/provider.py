"""DI provider for the auth domain."""

import logging

from dishka import from_context, provide
from starlette.requests import Request

from notesmate.config import Config
from notesmate.domain.auth.command.employee import (
    CreateEmployeeHandler,
    SetEmployeeActiveHandler,
    UpdateEmployeeRolesHandler,
)
from notesmate.domain.auth.command.login import LoginHandler
from notesmate.domain.auth.command.session import (
    ClearImpersonationHandler,
    SwitchRoleHandler,
    SwitchTenantHandler,
)
from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.auth.port.password import PasswordHasher
from notesmate.domain.auth.port.repository import EmployeeRepository
from notesmate.domain.auth.query.get_session import GetSessionHandler
from notesmate.domain.auth.query.list_employees import ListEmployeesHandler
from notesmate.domain.auth.service.auth import AuthService
from notesmate.domain.auth.service.credential import CredentialVerifier
from notesmate.domain.auth.service.employee import EmployeeService
from notesmate.domain.auth.service.guard import AuthorizationGuard
from notesmate.domain.auth.service.session import SessionService
from notesmate.domain.auth.service.token import TokenService
from notesmate.domain.tenant.port.repository import TenantRepository
from notesmate.util.di.base import Provider
from notesmate.util.di.scope import Scope

logger = logging.getLogger(__name__)


class AuthProvider(Provider):
    """DI provider for auth domain services and handlers."""

    request = from_context(provides=Request, scope=Scope.UOW)

    # Command Handlers
    login_handler = provide(LoginHandler, scope=Scope.UOW)
    switch_tenant_handler = provide(SwitchTenantHandler, scope=Scope.UOW)
    clear_impersonation_handler = provide(ClearImpersonationHandler, scope=Scope.UOW)
    switch_role_handler = provide(SwitchRoleHandler, scope=Scope.UOW)
    create_employee_handler = provide(CreateEmployeeHandler, scope=Scope.UOW)
    update_employee_roles_handler = provide(UpdateEmployeeRolesHandler, scope=Scope.UOW)
    set_employee_active_handler = provide(SetEmployeeActiveHandler, scope=Scope.UOW)

    # Query Handlers
    get_session_handler = provide(GetSessionHandler, scope=Scope.UOW)
    list_employees_handler = provide(ListEmployeesHandler, scope=Scope.UOW)

    @provide(scope=Scope.APP)
    def get_token_service(self, config: Config) -> TokenService:
        return TokenService(_config=config.auth.token)

    @provide(scope=Scope.APP)
    def get_authorization_guard(self, token_service: TokenService) -> AuthorizationGuard:
        return AuthorizationGuard(_token_service=token_service)

    @provide(scope=Scope.UOW)
    def get_credential_verifier(
        self, employee_repo: EmployeeRepository, hasher: PasswordHasher
    ) -> CredentialVerifier:
        return CredentialVerifier(_employee_repo=employee_repo, _hasher=hasher)

    @provide(scope=Scope.UOW)
    def get_session_service(
        self,
        employee_repo: EmployeeRepository,
        tenant_repo: TenantRepository,
        token_service: TokenService,
    ) -> SessionService:
        return SessionService(
            _employee_repo=employee_repo,
            _tenant_repo=tenant_repo,
            _token_service=token_service,
        )

    @provide(scope=Scope.UOW)
    def get_auth_service(
        self,
        verifier: CredentialVerifier,
        tenant_repo: TenantRepository,
        session_service: SessionService,
    ) -> AuthService:
        return AuthService(
            _verifier=verifier,
            _tenant_repo=tenant_repo,
            _session_service=session_service,
        )

    @provide(scope=Scope.UOW)
    def get_employee_service(
        self, employee_repo: EmployeeRepository, hasher: PasswordHasher
    ) -> EmployeeService:
        return EmployeeService(_employee_repo=employee_repo, _hasher=hasher)

    @provide(scope=Scope.UOW)
    def get_claims(self, request: Request, guard: AuthorizationGuard) -> Claims:
        """Verified claims of the current request.

        Raises:
            AuthenticationError: no bearer token (missing_token).
            InvalidTokenError: bad or expired token (invalid_token).
        """
        claims = guard.authorize(request.headers.get("Authorization"))
        logger.debug(
            "Claims resolved: principal=%s active_role=%s effective_tenant=%s",
            claims.principal_id,
            claims.active_role,
            claims.effective_tenant_id,
        )
        return claims
