"""Roles a principal can hold."""

from enum import StrEnum


class Role(StrEnum):
    """Closed set of roles.

    ``SUPER_ADMIN`` is the platform role: it belongs to the platform tenant and is
    the only role allowed to act inside other tenants (via impersonation).
    """

    SUPER_ADMIN = "super_admin"
    ORG_ADMIN = "org_admin"
    DOCTOR = "doctor"
    STAFF = "staff"

    @classmethod
    def parse(cls, value: str | None) -> "Role | None":
        """Return the Role for a wire literal, or None if it is not a known role."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def is_platform(self) -> bool:
        return self is Role.SUPER_ADMIN


GRANTABLE_ROLES: frozenset[Role] = frozenset({Role.ORG_ADMIN, Role.DOCTOR, Role.STAFF})
"""Roles that can be assigned through employee administration."""
