"""Bearer-token authorization guard."""

import logging

from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.auth.service.token import TokenService
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.authorization.permission import has_permission
from notesmate.domain.shared.error import AuthenticationError, AuthorizationError
from notesmate.domain.shared.service import Service

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization_header: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` header, if well-formed.

    The scheme name is case-insensitive (``bearer``, ``BEARER``).
    """
    if not authorization_header:
        return None
    scheme, _, token = authorization_header.strip().partition(" ")
    if scheme.lower() != BEARER_SCHEME:
        return None
    return token.strip() or None


class AuthorizationGuard(Service):
    """Turns an Authorization header into verified claims.

    Pure gate: no data access, no side effects besides logging.
    """

    _token_service: TokenService

    def authorize(
        self,
        authorization_header: str | None,
        required_action: Action | None = None,
    ) -> Claims:
        """Verify the bearer token and, optionally, a permission of its active role.

        Raises:
            AuthenticationError: header missing or malformed (missing_token).
            InvalidTokenError: token invalid or expired (invalid_token).
            AuthorizationError: active role lacks ``required_action`` (insufficient_permissions).
        """
        token = extract_bearer_token(authorization_header)
        if token is None:
            raise AuthenticationError("Authentication required", code="missing_token")

        claims = self._token_service.verify(token)

        if required_action is not None and not has_permission(claims.active_role, required_action):
            logger.warning(
                "Permission denied: principal=%s active_role=%s required=%s",
                claims.principal_id,
                claims.active_role,
                required_action,
            )
            raise AuthorizationError("Insufficient permissions", code="insufficient_permissions")

        return claims
