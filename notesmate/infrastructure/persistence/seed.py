"""Database seed data: the platform tenant and an optional bootstrap administrator."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncEngine

from notesmate.config import BootstrapAdminConfig
from notesmate.domain.auth.model.role import Role
from notesmate.domain.auth.port.password import PasswordHasher
from notesmate.domain.tenant.model.value import PLATFORM_TENANT_CODE, PLATFORM_TENANT_SHORT_NAME
from notesmate.infrastructure.persistence.tables import employees_table, organizations_table

logger = logging.getLogger(__name__)


async def ensure_platform_tenant(engine: AsyncEngine) -> str:
    """Ensure the platform tenant (code 1001) exists. Idempotent. Returns its id."""
    async with engine.begin() as conn:
        existing = await conn.execute(
            select(organizations_table.c.id).where(
                organizations_table.c.code == PLATFORM_TENANT_CODE
            )
        )
        tenant_id = existing.scalar()
        if tenant_id is None:
            tenant_id = str(uuid4())
            await conn.execute(
                insert(organizations_table).values(
                    id=tenant_id,
                    code=PLATFORM_TENANT_CODE,
                    short_name=PLATFORM_TENANT_SHORT_NAME,
                    name="System Administration",
                    organization_type="system",
                    is_active=True,
                    next_record_number=1,
                    created_at=datetime.now(UTC),
                )
            )
            logger.info("Platform tenant seeded (code=%s)", PLATFORM_TENANT_CODE)
    return tenant_id


async def ensure_bootstrap_admin(
    engine: AsyncEngine,
    config: BootstrapAdminConfig,
    hasher: PasswordHasher,
    platform_tenant_id: str,
) -> None:
    """Create the configured super admin if that username does not exist yet.

    Does nothing when no bootstrap username/password is configured.
    """
    if not config.username or not config.password:
        return

    async with engine.begin() as conn:
        existing = await conn.execute(
            select(employees_table.c.id).where(employees_table.c.username == config.username)
        )
        if existing.scalar() is not None:
            return
        await conn.execute(
            insert(employees_table).values(
                id=str(uuid4()),
                tenant_id=platform_tenant_id,
                username=config.username,
                password_hash=hasher.hash(config.password),
                first_name=config.first_name,
                last_name=config.last_name,
                title=None,
                role=Role.SUPER_ADMIN.value,
                secondary_role=None,
                is_active=True,
                created_at=datetime.now(UTC),
                updated_at=None,
            )
        )
    logger.info("Bootstrap super admin %r created", config.username)
