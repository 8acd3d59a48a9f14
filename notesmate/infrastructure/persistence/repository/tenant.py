"""SQL repository for the Tenant aggregate."""

from uuid import UUID

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from notesmate.domain.shared.error import NotFoundError
from notesmate.domain.tenant.model.tenant import Tenant
from notesmate.domain.tenant.model.value import PLATFORM_TENANT_CODE, ShortName, TenantId
from notesmate.domain.tenant.port.repository import TenantRepository
from notesmate.infrastructure.persistence.tables import organizations_table


def _row_to_tenant(row: dict) -> Tenant:
    return Tenant(
        id=TenantId(UUID(row["id"])),
        code=row["code"],
        short_name=ShortName(row["short_name"]),
        name=row["name"],
        organization_type=row["organization_type"],
        is_active=row["is_active"],
        next_record_number=row["next_record_number"],
        created_at=row["created_at"],
    )


def _tenant_to_dict(tenant: Tenant) -> dict:
    # next_record_number is only ever moved by allocate_record_number.
    return {
        "id": str(tenant.id),
        "code": tenant.code,
        "short_name": str(tenant.short_name),
        "name": tenant.name,
        "organization_type": tenant.organization_type,
        "is_active": tenant.is_active,
        "created_at": tenant.created_at,
    }


class SqlTenantRepository(TenantRepository):
    """SQLAlchemy Core implementation of TenantRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self, *criteria) -> Tenant | None:
        result = await self.session.execute(select(organizations_table).where(*criteria))
        row = result.mappings().first()
        return _row_to_tenant(dict(row)) if row else None

    async def get(self, tenant_id: TenantId) -> Tenant | None:
        return await self._first(organizations_table.c.id == str(tenant_id))

    async def get_by_code(self, code: int) -> Tenant | None:
        return await self._first(organizations_table.c.code == code)

    async def get_by_short_name(self, short_name: str) -> Tenant | None:
        return await self._first(organizations_table.c.short_name == short_name.strip().upper())

    async def list_all(self) -> list[Tenant]:
        result = await self.session.execute(
            select(organizations_table).order_by(organizations_table.c.code)
        )
        return [_row_to_tenant(dict(row)) for row in result.mappings().all()]

    async def next_code(self) -> int:
        result = await self.session.execute(select(func.max(organizations_table.c.code)))
        highest = result.scalar()
        return max(highest or 0, PLATFORM_TENANT_CODE) + 1

    async def save(self, tenant: Tenant) -> None:
        tenant_dict = _tenant_to_dict(tenant)
        existing = await self.get(tenant.id)

        if existing:
            stmt = (
                update(organizations_table)
                .where(organizations_table.c.id == str(tenant.id))
                .values(**tenant_dict)
            )
        else:
            stmt = insert(organizations_table).values(
                **tenant_dict, next_record_number=tenant.next_record_number
            )

        await self.session.execute(stmt)
        await self.session.flush()

    async def allocate_record_number(self, tenant_id: TenantId) -> int:
        # Single UPDATE ... RETURNING: the row lock serializes concurrent callers.
        stmt = (
            update(organizations_table)
            .where(organizations_table.c.id == str(tenant_id))
            .values(next_record_number=organizations_table.c.next_record_number + 1)
            .returning(organizations_table.c.next_record_number)
        )
        result = await self.session.execute(stmt)
        advanced = result.scalar_one_or_none()
        if advanced is None:
            raise NotFoundError(f"Tenant {tenant_id} not found", code="tenant_not_found")
        await self.session.flush()
        return advanced - 1
