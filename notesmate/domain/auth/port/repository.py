"""Repository ports for the auth domain."""

from abc import abstractmethod
from typing import Protocol

from notesmate.domain.auth.model.employee import Employee
from notesmate.domain.auth.model.value import EmployeeId
from notesmate.domain.shared.port import Port
from notesmate.domain.tenant.model.value import TenantId


class EmployeeRepository(Port, Protocol):
    """Repository for Employee aggregate persistence.

    There is no delete: employees are deactivated instead.
    """

    @abstractmethod
    async def get(self, employee_id: EmployeeId) -> Employee | None:
        """Get an employee by ID."""
        ...

    @abstractmethod
    async def get_by_username(self, username: str) -> Employee | None:
        """Get an employee by exact (case-sensitive) username."""
        ...

    @abstractmethod
    async def list_by_tenant(self, tenant_id: TenantId) -> list[Employee]:
        """List all employees of a tenant, active or not."""
        ...

    @abstractmethod
    async def save(self, employee: Employee) -> None:
        """Save an employee (create or update)."""
        ...
