"""Auth domain services."""

from .auth import AuthService, LoginOutcome
from .credential import CredentialVerifier
from .employee import EmployeeService
from .guard import AuthorizationGuard
from .session import SessionService
from .token import TokenService

__all__ = [
    "AuthService",
    "AuthorizationGuard",
    "CredentialVerifier",
    "EmployeeService",
    "LoginOutcome",
    "SessionService",
    "TokenService",
]
