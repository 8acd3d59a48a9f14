from abc import abstractmethod
from typing import Protocol

from notesmate.domain.shared.port import Port


class PasswordHasher(Port, Protocol):
    """Adaptive, salted one-way hashing of employee passwords."""

    @abstractmethod
    def hash(self, plaintext: str) -> str: ...

    @abstractmethod
    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True iff ``plaintext`` matches ``hashed``. Never raises on a bad hash."""
        ...

    @property
    @abstractmethod
    def dummy_hash(self) -> str:
        """A valid hash of a throwaway value, to keep unknown-user logins as slow as real ones."""
        ...
