from datetime import datetime

from pydantic import BaseModel

from notesmate.domain.tenant.model.tenant import Tenant


class TenantSummary(BaseModel):
    id: str
    code: int
    short_name: str
    name: str
    organization_type: str | None
    is_active: bool
    created_at: datetime

    @classmethod
    def from_tenant(cls, tenant: Tenant) -> "TenantSummary":
        return cls(
            id=str(tenant.id),
            code=tenant.code,
            short_name=str(tenant.short_name),
            name=tenant.name,
            organization_type=tenant.organization_type,
            is_active=tenant.is_active,
            created_at=tenant.created_at,
        )
