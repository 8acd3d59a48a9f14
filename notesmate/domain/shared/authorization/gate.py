"""Handler-level authorization gates: public(), authenticated() and requires(Action)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.authorization.permission import has_permission
from notesmate.domain.shared.error import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
)

if TYPE_CHECKING:
    from notesmate.domain.auth.model.claims import Claims

logger = logging.getLogger("notesmate.authz")


class Gate:
    """Base for handler-level authorization gates.

    Every CommandHandler/QueryHandler must declare ``__auth__: ClassVar[Gate]``.
    """


@dataclass(frozen=True)
class Public(Gate):
    """No authentication required."""


@dataclass(frozen=True)
class Authenticated(Gate):
    """Any verified session may run the handler; finer checks happen in services."""


@dataclass(frozen=True)
class Requires(Gate):
    """The session's active role must be granted ``action``."""

    action: Action


_PUBLIC = Public()
_AUTHENTICATED = Authenticated()


def public() -> Public:
    """Mark a handler as publicly accessible (no auth required)."""
    return _PUBLIC


def authenticated() -> Authenticated:
    """Mark a handler as requiring a valid session, with no specific permission."""
    return _AUTHENTICATED


def requires(action: Action) -> Requires:
    """Mark a handler as requiring ``action`` for the active role."""
    return Requires(action=action)


def enforce_gate(handler: Any) -> None:
    """Evaluate the handler's ``__auth__`` gate against its injected ``claims``.

    Raises:
        ConfigurationError: handler declares no gate.
        AuthenticationError: gate needs a session and the handler has none (missing_token).
        AuthorizationError: active role lacks the required action (insufficient_permissions).
    """
    from notesmate.domain.auth.model.claims import Claims

    handler_name = type(handler).__name__
    auth_gate = getattr(type(handler), "__auth__", None)

    if not isinstance(auth_gate, Gate):
        raise ConfigurationError(f"Handler {handler_name} has no __auth__ declaration")

    if isinstance(auth_gate, Public):
        return

    claims: Claims | None = getattr(handler, "claims", None)
    if not isinstance(claims, Claims):
        raise AuthenticationError("Authentication required", code="missing_token")

    if isinstance(auth_gate, Authenticated):
        return

    if isinstance(auth_gate, Requires):
        logger.debug(
            "Auth check: handler=%s, required=%s, active_role=%s, principal=%s",
            handler_name,
            auth_gate.action,
            claims.active_role,
            claims.principal_id,
        )
        if not has_permission(claims.active_role, auth_gate.action):
            logger.warning(
                "Permission denied: handler=%s, required=%s, active_role=%s, principal=%s",
                handler_name,
                auth_gate.action,
                claims.active_role,
                claims.principal_id,
            )
            raise AuthorizationError("Insufficient permissions", code="insufficient_permissions")
        return

    raise ConfigurationError(
        f"Handler {handler_name} has unhandled __auth__ type: {type(auth_gate).__name__}"
    )
