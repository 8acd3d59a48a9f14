from typing import AsyncIterable

from dishka import from_context, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from notesmate.config import Config
from notesmate.domain.auth.port.repository import EmployeeRepository
from notesmate.domain.tenant.port.clinical import ClinicalRecordReader
from notesmate.domain.tenant.port.repository import TenantRepository
from notesmate.infrastructure.persistence.database import (
    create_db_engine,
    create_session_factory,
)
from notesmate.infrastructure.persistence.repository.clinical import SqlClinicalRecordReader
from notesmate.infrastructure.persistence.repository.employee import SqlEmployeeRepository
from notesmate.infrastructure.persistence.repository.tenant import SqlTenantRepository
from notesmate.util.di.base import Provider
from notesmate.util.di.scope import Scope


class PersistenceProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)

    # APP-scoped factories
    @provide(scope=Scope.APP)
    def get_engine(self, config: Config) -> AsyncEngine:
        return create_db_engine(config.database)

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    # UOW-scoped session (one per request), committed when the request succeeds
    @provide(scope=Scope.UOW)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        async with session_factory() as session:
            yield session
            await session.commit()

    employee_repo = provide(SqlEmployeeRepository, scope=Scope.UOW, provides=EmployeeRepository)
    tenant_repo = provide(SqlTenantRepository, scope=Scope.UOW, provides=TenantRepository)
    clinical_reader = provide(
        SqlClinicalRecordReader, scope=Scope.UOW, provides=ClinicalRecordReader
    )
