"""Resolve owning tenants of clinical records and gate access to them."""

import logging
from uuid import UUID

from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.authorization.permission import has_permission
from notesmate.domain.shared.authorization.tenancy import guard_tenant_access
from notesmate.domain.shared.error import AuthorizationError
from notesmate.domain.shared.service import Service
from notesmate.domain.tenant.model.clinical import NoteRef, PatientRef, VisitRef
from notesmate.domain.tenant.model.value import TenantId
from notesmate.domain.tenant.port.clinical import ClinicalRecordReader

logger = logging.getLogger(__name__)


class OwningTenantResolver(Service):
    """Walks Note -> Visit -> Patient -> Tenant.

    Any missing link resolves to None, which the scoping policy denies.
    """

    _reader: ClinicalRecordReader

    async def for_patient(self, patient_id: str) -> TenantId | None:
        patient = await self._reader.get_patient(patient_id)
        return patient.tenant_id if patient else None

    async def for_visit(self, visit_id: UUID) -> TenantId | None:
        visit = await self._reader.get_visit(visit_id)
        if visit is None:
            return None
        return await self.for_patient(visit.patient_id)

    async def for_note(self, note_id: UUID) -> TenantId | None:
        note = await self._reader.get_note(note_id)
        if note is None:
            return None
        return await self.for_visit(note.visit_id)


class ClinicalAccessService(Service):
    """Loads clinical records on behalf of a session, enforcing permission and tenancy.

    A record that does not exist and a record owned by another tenant produce
    the same ``access_denied`` error.
    """

    _reader: ClinicalRecordReader
    _resolver: OwningTenantResolver

    async def patient(self, claims: Claims, patient_id: str, action: Action) -> PatientRef:
        self._check_permission(claims, action)
        patient = await self._reader.get_patient(patient_id)
        guard_tenant_access(claims, patient.tenant_id if patient else None)
        assert patient is not None
        return patient

    async def visit(self, claims: Claims, visit_id: UUID, action: Action) -> VisitRef:
        self._check_permission(claims, action)
        visit = await self._reader.get_visit(visit_id)
        owner = await self._resolver.for_patient(visit.patient_id) if visit else None
        guard_tenant_access(claims, owner)
        assert visit is not None
        return visit

    async def note(self, claims: Claims, note_id: UUID, action: Action) -> NoteRef:
        self._check_permission(claims, action)
        note = await self._reader.get_note(note_id)
        owner = await self._resolver.for_visit(note.visit_id) if note else None
        guard_tenant_access(claims, owner)
        assert note is not None
        return note

    @staticmethod
    def _check_permission(claims: Claims, action: Action) -> None:
        if not has_permission(claims.active_role, action):
            logger.warning(
                "Permission denied: principal=%s active_role=%s required=%s",
                claims.principal_id,
                claims.active_role,
                action,
            )
            raise AuthorizationError("Insufficient permissions", code="insufficient_permissions")
