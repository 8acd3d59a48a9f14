from dishka import AsyncContainer, make_async_container

from notesmate.config import Config
from notesmate.domain.auth.util.di import AuthProvider
from notesmate.domain.tenant.util.di import TenantProvider
from notesmate.infrastructure.auth import AuthInfraProvider
from notesmate.infrastructure.persistence import PersistenceProvider
from notesmate.util.di.scope import Scope


def create_container(config: Config) -> AsyncContainer:
    return make_async_container(
        PersistenceProvider(),
        AuthInfraProvider(),
        AuthProvider(),
        TenantProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
