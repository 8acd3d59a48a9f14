"""Auth domain commands."""

from .employee import (
    CreateEmployee,
    CreateEmployeeHandler,
    EmployeeResult,
    SetEmployeeActive,
    SetEmployeeActiveHandler,
    UpdateEmployeeRoles,
    UpdateEmployeeRolesHandler,
)
from .login import Login, LoginHandler, LoginResult
from .session import (
    ClearImpersonation,
    ClearImpersonationHandler,
    SessionResult,
    SwitchRole,
    SwitchRoleHandler,
    SwitchTenant,
    SwitchTenantHandler,
)

__all__ = [
    "ClearImpersonation",
    "ClearImpersonationHandler",
    "CreateEmployee",
    "CreateEmployeeHandler",
    "EmployeeResult",
    "Login",
    "LoginHandler",
    "LoginResult",
    "SessionResult",
    "SetEmployeeActive",
    "SetEmployeeActiveHandler",
    "SwitchRole",
    "SwitchRoleHandler",
    "SwitchTenant",
    "SwitchTenantHandler",
    "UpdateEmployeeRoles",
    "UpdateEmployeeRolesHandler",
]
