"""SQL repository for the Employee aggregate."""

from uuid import UUID

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from notesmate.domain.auth.model.employee import Employee
from notesmate.domain.auth.model.role import Role
from notesmate.domain.auth.model.value import EmployeeId
from notesmate.domain.auth.port.repository import EmployeeRepository
from notesmate.domain.tenant.model.value import TenantId
from notesmate.infrastructure.persistence.tables import employees_table


def _row_to_employee(row: dict) -> Employee:
    """Convert a database row to an Employee model."""
    return Employee(
        id=EmployeeId(UUID(row["id"])),
        tenant_id=TenantId(UUID(row["tenant_id"])) if row["tenant_id"] else None,
        username=row["username"],
        password_hash=row["password_hash"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        title=row["title"],
        role=Role(row["role"]),
        secondary_role=Role(row["secondary_role"]) if row["secondary_role"] else None,
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _employee_to_dict(employee: Employee) -> dict:
    """Convert an Employee model to a database row dict."""
    return {
        "id": str(employee.id),
        "tenant_id": str(employee.tenant_id) if employee.tenant_id else None,
        "username": employee.username,
        "password_hash": employee.password_hash,
        "first_name": employee.first_name,
        "last_name": employee.last_name,
        "title": employee.title,
        "role": employee.role.value,
        "secondary_role": employee.secondary_role.value if employee.secondary_role else None,
        "is_active": employee.is_active,
        "created_at": employee.created_at,
        "updated_at": employee.updated_at,
    }


class SqlEmployeeRepository(EmployeeRepository):
    """SQLAlchemy Core implementation of EmployeeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, employee_id: EmployeeId) -> Employee | None:
        stmt = select(employees_table).where(employees_table.c.id == str(employee_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_employee(dict(row)) if row else None

    async def get_by_username(self, username: str) -> Employee | None:
        stmt = select(employees_table).where(employees_table.c.username == username)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return _row_to_employee(dict(row)) if row else None

    async def list_by_tenant(self, tenant_id: TenantId) -> list[Employee]:
        stmt = (
            select(employees_table)
            .where(employees_table.c.tenant_id == str(tenant_id))
            .order_by(employees_table.c.last_name, employees_table.c.first_name)
        )
        result = await self.session.execute(stmt)
        return [_row_to_employee(dict(row)) for row in result.mappings().all()]

    async def save(self, employee: Employee) -> None:
        employee_dict = _employee_to_dict(employee)
        existing = await self.get(employee.id)

        if existing:
            stmt = (
                update(employees_table)
                .where(employees_table.c.id == str(employee.id))
                .values(**employee_dict)
            )
        else:
            stmt = insert(employees_table).values(**employee_dict)

        await self.session.execute(stmt)
        await self.session.flush()
