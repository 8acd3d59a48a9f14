"""Session claims carried inside a signed token."""

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel
from typing_extensions import Self

from notesmate.domain.auth.model.role import Role
from notesmate.domain.auth.model.value import EmployeeId
from notesmate.domain.tenant.model.value import TenantId


class ClaimSet(BaseModel):
    """Claims before an expiry has been stamped on them.

    Invariants:
    - ``active_role`` is the primary role or the secondary role
    - ``impersonated_tenant_id`` is only set for the platform role

    Immutable: any change means issuing a new token.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    principal_id: EmployeeId
    home_tenant_id: TenantId | None = None
    role: Role
    secondary_role: Role | None = None
    active_role: Role
    impersonated_tenant_id: TenantId | None = None

    @model_validator(mode="after")
    def check_invariants(self) -> Self:
        if self.active_role not in self.eligible_roles:
            raise ValueError(
                f"active role {self.active_role} is neither the primary nor the secondary role"
            )
        if self.impersonated_tenant_id is not None and not self.role.is_platform:
            raise ValueError("only platform principals may impersonate a tenant")
        return self

    @property
    def eligible_roles(self) -> frozenset[Role]:
        """Roles this session may switch its active role to."""
        if self.secondary_role is None:
            return frozenset({self.role})
        return frozenset({self.role, self.secondary_role})

    @property
    def is_impersonating(self) -> bool:
        return self.impersonated_tenant_id is not None

    @property
    def effective_tenant_id(self) -> TenantId | None:
        """Tenant all scoped operations run against: impersonated if set, else home."""
        return self.impersonated_tenant_id or self.home_tenant_id


class Claims(ClaimSet):
    """Claims decoded from, or about to be encoded into, a session token."""

    expires_at_epoch_ms: int

    def without_expiry(self) -> ClaimSet:
        return ClaimSet.model_validate(self.model_dump(exclude={"expires_at_epoch_ms"}))
