"""Static role -> action permission table."""

from __future__ import annotations

import logging
from typing import Mapping

from notesmate.domain.auth.model.role import Role
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.error import ConfigurationError

logger = logging.getLogger(__name__)

_CLINICAL_READ = frozenset(
    {
        Action.PATIENT_READ,
        Action.VISIT_READ,
        Action.NOTE_READ,
    }
)

PERMISSION_TABLE: Mapping[Role, frozenset[Action]] = {
    # Platform role holds everything, including tenant administration.
    Role.SUPER_ADMIN: frozenset(Action),
    Role.ORG_ADMIN: _CLINICAL_READ
    | {
        Action.ORGANIZATION_READ,
        Action.ORGANIZATION_UPDATE,
        Action.EMPLOYEE_READ,
        Action.EMPLOYEE_CREATE,
        Action.EMPLOYEE_UPDATE,
        Action.REPORT_EXPORT,
        Action.BACKUP_CREATE,
    },
    Role.DOCTOR: _CLINICAL_READ
    | {
        Action.ORGANIZATION_READ,
        Action.PATIENT_CREATE,
        Action.PATIENT_UPDATE,
        Action.VISIT_CREATE,
        Action.VISIT_UPDATE,
        Action.NOTE_CREATE,
        Action.NOTE_UPDATE,
        Action.REPORT_EXPORT,
    },
    Role.STAFF: _CLINICAL_READ
    | {
        Action.ORGANIZATION_READ,
        Action.PATIENT_CREATE,
        Action.VISIT_CREATE,
    },
}


def has_permission(role: Role | str | None, action: Action | str) -> bool:
    """Check whether ``role`` is granted ``action``.

    Unknown roles, unknown actions and ``None`` are never granted anything.
    """
    if role is None:
        return False
    resolved_role = role if isinstance(role, Role) else Role.parse(role)
    if resolved_role is None:
        return False
    try:
        resolved_action = Action(action)
    except ValueError:
        return False
    return resolved_action in PERMISSION_TABLE.get(resolved_role, frozenset())


def permissions_for(role: Role) -> frozenset[Action]:
    return PERMISSION_TABLE.get(role, frozenset())


def validate_coverage(table: Mapping[Role, frozenset[Action]] = PERMISSION_TABLE) -> None:
    """Check the permission table is complete.

    Every role has an entry, every action is granted to some role, and the
    platform role holds a superset of all other roles.

    Raises:
        ConfigurationError: listing every violation found.
    """
    violations: list[str] = []

    for role in Role:
        if role not in table:
            violations.append(f"Role {role} has no permission entry")

    granted = frozenset().union(*table.values()) if table else frozenset()
    for action in Action:
        if action not in granted:
            violations.append(f"Action {action} is not granted to any role")

    platform = table.get(Role.SUPER_ADMIN, frozenset())
    for role, actions in table.items():
        missing = actions - platform
        if missing:
            violations.append(
                f"{Role.SUPER_ADMIN} lacks {sorted(missing)} granted to {role}"
            )

    if violations:
        raise ConfigurationError(
            f"Permission table validation failed ({len(violations)} issue(s)):\n"
            + "\n".join(f"  - {v}" for v in violations)
        )

    logger.info("Permission table covers %d actions across %d roles", len(Action), len(table))
