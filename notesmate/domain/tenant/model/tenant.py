"""Tenant (organization) aggregate."""

from datetime import UTC, datetime

from notesmate.domain.shared.model.aggregate import Aggregate
from notesmate.domain.tenant.model.value import (
    PLATFORM_TENANT_CODE,
    ShortName,
    TenantId,
)


class Tenant(Aggregate):
    """An organization whose clinical data is isolated from every other tenant.

    Invariants:
    - ``code`` and ``short_name`` are unique across tenants
    - ``next_record_number`` only ever increases, and only through the repository
    """

    id: TenantId
    code: int
    short_name: ShortName
    name: str
    organization_type: str | None = None
    is_active: bool = True
    next_record_number: int = 1
    created_at: datetime

    @classmethod
    def create(
        cls,
        *,
        code: int,
        short_name: str,
        name: str,
        organization_type: str | None = None,
    ) -> "Tenant":
        return cls(
            id=TenantId.generate(),
            code=code,
            short_name=ShortName(short_name),
            name=name,
            organization_type=organization_type,
            created_at=datetime.now(UTC),
        )

    @property
    def is_platform(self) -> bool:
        return self.code == PLATFORM_TENANT_CODE
