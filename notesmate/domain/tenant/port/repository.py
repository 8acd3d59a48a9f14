"""Repository ports for the tenant domain."""

from abc import abstractmethod
from typing import Protocol

from notesmate.domain.shared.port import Port
from notesmate.domain.tenant.model.tenant import Tenant
from notesmate.domain.tenant.model.value import TenantId


class TenantRepository(Port, Protocol):
    """Repository for Tenant aggregate persistence."""

    @abstractmethod
    async def get(self, tenant_id: TenantId) -> Tenant | None:
        """Get a tenant by ID."""
        ...

    @abstractmethod
    async def get_by_code(self, code: int) -> Tenant | None:
        """Get a tenant by its numeric code."""
        ...

    @abstractmethod
    async def get_by_short_name(self, short_name: str) -> Tenant | None:
        """Get a tenant by short name, case-insensitively."""
        ...

    @abstractmethod
    async def list_all(self) -> list[Tenant]:
        """List all tenants ordered by code."""
        ...

    @abstractmethod
    async def next_code(self) -> int:
        """Next free numeric code (highest existing code + 1)."""
        ...

    @abstractmethod
    async def save(self, tenant: Tenant) -> None:
        """Save a tenant (create or update)."""
        ...

    @abstractmethod
    async def allocate_record_number(self, tenant_id: TenantId) -> int:
        """Atomically take the tenant's next record number and advance the counter.

        Concurrent callers must never receive the same number.
        """
        ...
