from dishka import provide

from notesmate.domain.auth.port.password import PasswordHasher
from notesmate.infrastructure.auth.hasher import BcryptPasswordHasher
from notesmate.util.di.base import Provider
from notesmate.util.di.scope import Scope


class AuthInfraProvider(Provider):
    """Infrastructure adapters for the auth domain."""

    @provide(scope=Scope.APP)
    def get_password_hasher(self) -> PasswordHasher:
        return BcryptPasswordHasher()
