"""Tenant scoping policy.

Every read or write of a tenant-owned resource is checked against the caller's
*effective* tenant: the impersonated tenant when a platform principal has
switched into one, the home tenant otherwise.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

from notesmate.domain.shared.error import AuthorizationError

if TYPE_CHECKING:
    from notesmate.domain.auth.model.claims import Claims
    from notesmate.domain.tenant.model.value import TenantId

logger = logging.getLogger("notesmate.authz")

ACCESS_DENIED_MESSAGE = "Access denied"


class Decision(StrEnum):
    ALLOW = "allow"
    DENY = "deny"


class TenantScope(StrEnum):
    """What kind of access is being checked.

    RESOURCE: clinical data and settings owned by the tenant.
    ADMINISTRATION: managing the tenant itself (platform level).
    """

    RESOURCE = "resource"
    ADMINISTRATION = "administration"


def authorize_tenant_access(
    claims: Claims,
    resource_tenant_id: TenantId | None,
    scope: TenantScope = TenantScope.RESOURCE,
) -> Decision:
    """Decide whether ``claims`` may touch something owned by ``resource_tenant_id``.

    - An unresolved owner (None) is always denied.
    - A platform principal that is not impersonating may administer any tenant,
      but is bound to no tenant's clinical resources.
    - Everyone else is allowed iff the owner is their effective tenant.
    """
    if resource_tenant_id is None:
        return Decision.DENY

    if claims.role.is_platform and not claims.is_impersonating:
        return Decision.ALLOW if scope is TenantScope.ADMINISTRATION else Decision.DENY

    effective = claims.effective_tenant_id
    if effective is not None and effective == resource_tenant_id:
        return Decision.ALLOW
    return Decision.DENY


def guard_tenant_access(
    claims: Claims,
    resource_tenant_id: TenantId | None,
    scope: TenantScope = TenantScope.RESOURCE,
) -> None:
    """Raise AuthorizationError(access_denied) unless access is allowed.

    The error is identical whether the resource is missing or belongs to another tenant.
    """
    decision = authorize_tenant_access(claims, resource_tenant_id, scope)
    if decision is Decision.DENY:
        logger.warning(
            "Tenant access denied: principal=%s effective_tenant=%s resource_tenant=%s scope=%s",
            claims.principal_id,
            claims.effective_tenant_id,
            resource_tenant_id,
            scope,
        )
        raise AuthorizationError(ACCESS_DENIED_MESSAGE, code="access_denied")


def guard_platform_scope(claims: Claims) -> None:
    """Raise AuthorizationError(access_denied) unless ``claims`` act for the whole platform.

    That is a platform principal that is not impersonating: once switched into a
    tenant, the session is bound to that tenant like any member's.
    """
    if claims.role.is_platform and not claims.is_impersonating:
        return
    logger.warning(
        "Platform scope denied: principal=%s role=%s impersonating=%s",
        claims.principal_id,
        claims.role,
        claims.impersonated_tenant_id,
    )
    raise AuthorizationError(ACCESS_DENIED_MESSAGE, code="access_denied")
