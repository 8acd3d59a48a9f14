"""Employee aggregate: a principal that can hold a session."""

from datetime import UTC, datetime

from notesmate.domain.auth.model.role import Role
from notesmate.domain.auth.model.value import EmployeeId
from notesmate.domain.shared.error import BadRequestError
from notesmate.domain.shared.model.aggregate import Aggregate
from notesmate.domain.tenant.model.value import TenantId


class Employee(Aggregate):
    """An employee of a tenant, or a platform principal.

    Invariants:
    - ``secondary_role`` differs from ``role``
    - employees are never deleted, only deactivated
    """

    id: EmployeeId
    tenant_id: TenantId | None
    username: str
    password_hash: str
    first_name: str
    last_name: str
    title: str | None = None
    role: Role
    secondary_role: Role | None = None
    is_active: bool = True
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        *,
        tenant_id: TenantId | None,
        username: str,
        password_hash: str,
        first_name: str,
        last_name: str,
        role: Role,
        secondary_role: Role | None = None,
        title: str | None = None,
    ) -> "Employee":
        _check_role_pair(role, secondary_role)
        return cls(
            id=EmployeeId.generate(),
            tenant_id=tenant_id,
            username=username,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
            title=title,
            role=role,
            secondary_role=secondary_role,
            created_at=datetime.now(UTC),
        )

    @property
    def eligible_roles(self) -> frozenset[Role]:
        if self.secondary_role is None:
            return frozenset({self.role})
        return frozenset({self.role, self.secondary_role})

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def change_roles(self, role: Role, secondary_role: Role | None) -> None:
        _check_role_pair(role, secondary_role)
        self.role = role
        self.secondary_role = secondary_role
        self.updated_at = datetime.now(UTC)

    def set_active(self, is_active: bool) -> None:
        self.is_active = is_active
        self.updated_at = datetime.now(UTC)


def _check_role_pair(role: Role, secondary_role: Role | None) -> None:
    if secondary_role is not None and secondary_role == role:
        raise BadRequestError(
            "Secondary role must differ from the primary role",
            code="invalid_role",
            field="secondary_role",
        )
