"""Auth domain models."""

from .claims import Claims, ClaimSet
from .employee import Employee
from .role import GRANTABLE_ROLES, Role
from .session import IssuedToken
from .value import EmployeeId

__all__ = [
    "Claims",
    "ClaimSet",
    "Employee",
    "EmployeeId",
    "GRANTABLE_ROLES",
    "IssuedToken",
    "Role",
]
