import logging

from notesmate.domain.auth.model.employee import Employee
from notesmate.domain.auth.port.password import PasswordHasher
from notesmate.domain.auth.port.repository import EmployeeRepository
from notesmate.domain.shared.error import AuthenticationError
from notesmate.domain.shared.service import Service

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


class CredentialVerifier(Service):
    """Checks a username/password pair against the stored bcrypt hash.

    Unknown usernames and wrong passwords fail identically. A deactivated
    account is reported as such, but only to someone who knows its password.
    """

    _employee_repo: EmployeeRepository
    _hasher: PasswordHasher

    async def verify(self, username: str, password: str) -> Employee:
        employee = await self._employee_repo.get_by_username(username)

        if employee is None:
            # Burn the same hashing time as a real check.
            self._hasher.verify(password, self._hasher.dummy_hash)
            logger.info("Login rejected: unknown username")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE, code="invalid_credentials")

        if not self._hasher.verify(password, employee.password_hash):
            logger.info("Login rejected: wrong password for employee %s", employee.id)
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE, code="invalid_credentials")

        if not employee.is_active:
            logger.info("Login rejected: employee %s is deactivated", employee.id)
            raise AuthenticationError(
                "Account deactivated. Contact your administrator.",
                code="account_deactivated",
            )

        return employee
