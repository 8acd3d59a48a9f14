"""bcrypt implementation of the PasswordHasher port."""

import logging
from functools import cached_property

import bcrypt

from notesmate.domain.auth.port.password import PasswordHasher

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72
DEFAULT_ROUNDS = 10


def _normalize_password(plaintext: str) -> bytes:
    """UTF-8 encode and cut to bcrypt's 72-byte limit without splitting a character."""
    encoded = plaintext.encode("utf-8")
    if len(encoded) <= BCRYPT_MAX_BYTES:
        return encoded
    return encoded[:BCRYPT_MAX_BYTES].decode("utf-8", errors="ignore").encode("utf-8")


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_normalize_password(plaintext), salt).decode("ascii")

    def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_normalize_password(plaintext), hashed.encode("ascii"))
        except (ValueError, UnicodeEncodeError):
            logger.error("Stored password hash is not a valid bcrypt hash")
            return False

    @cached_property
    def dummy_hash(self) -> str:
        return self.hash("notesmate-dummy-password")
