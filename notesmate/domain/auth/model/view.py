"""Read models returned to API callers."""

from datetime import datetime

from pydantic import BaseModel

from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.auth.model.employee import Employee


class EmployeeProfile(BaseModel):
    """An employee as shown to callers. The password hash is never included."""

    id: str
    tenant_id: str | None
    username: str
    first_name: str
    last_name: str
    title: str | None
    role: str
    secondary_role: str | None
    is_active: bool
    created_at: datetime

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeProfile":
        return cls(
            id=str(employee.id),
            tenant_id=str(employee.tenant_id) if employee.tenant_id else None,
            username=employee.username,
            first_name=employee.first_name,
            last_name=employee.last_name,
            title=employee.title,
            role=employee.role.value,
            secondary_role=employee.secondary_role.value if employee.secondary_role else None,
            is_active=employee.is_active,
            created_at=employee.created_at,
        )


class SessionView(BaseModel):
    principal_id: str
    home_tenant_id: str | None
    effective_tenant_id: str | None
    role: str
    secondary_role: str | None
    active_role: str
    impersonated_tenant_id: str | None
    expires_at_epoch_ms: int

    @classmethod
    def from_claims(cls, claims: Claims) -> "SessionView":
        return cls(
            principal_id=str(claims.principal_id),
            home_tenant_id=_opt(claims.home_tenant_id),
            effective_tenant_id=_opt(claims.effective_tenant_id),
            role=claims.role.value,
            secondary_role=claims.secondary_role.value if claims.secondary_role else None,
            active_role=claims.active_role.value,
            impersonated_tenant_id=_opt(claims.impersonated_tenant_id),
            expires_at_epoch_ms=claims.expires_at_epoch_ms,
        )


def _opt(value: object | None) -> str | None:
    return str(value) if value is not None else None
