"""Ownership lookups of clinical records, gated by permission and tenant scope.

Missing records and records of another tenant both answer ``access_denied``.
"""

from uuid import UUID

from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.authorization.gate import requires
from notesmate.domain.shared.query import Query, QueryHandler, Result
from notesmate.domain.tenant.service.ownership import ClinicalAccessService


class RecordAccessResult(Result):
    kind: str
    record_id: str
    tenant_id: str


class GetPatientAccess(Query):
    patient_id: str


class GetPatientAccessHandler(QueryHandler[GetPatientAccess, RecordAccessResult]):
    __auth__ = requires(Action.PATIENT_READ)
    claims: Claims
    access_service: ClinicalAccessService

    async def run(self, query: GetPatientAccess) -> RecordAccessResult:
        patient = await self.access_service.patient(
            self.claims, query.patient_id, Action.PATIENT_READ
        )
        return RecordAccessResult(
            kind="patient",
            record_id=patient.patient_id,
            tenant_id=str(patient.tenant_id),
        )


class GetVisitAccess(Query):
    visit_id: UUID


class GetVisitAccessHandler(QueryHandler[GetVisitAccess, RecordAccessResult]):
    __auth__ = requires(Action.VISIT_READ)
    claims: Claims
    access_service: ClinicalAccessService

    async def run(self, query: GetVisitAccess) -> RecordAccessResult:
        visit = await self.access_service.visit(self.claims, query.visit_id, Action.VISIT_READ)
        return RecordAccessResult(
            kind="visit",
            record_id=str(visit.visit_id),
            tenant_id=str(self.claims.effective_tenant_id),
        )


class GetNoteAccess(Query):
    note_id: UUID


class GetNoteAccessHandler(QueryHandler[GetNoteAccess, RecordAccessResult]):
    __auth__ = requires(Action.NOTE_READ)
    claims: Claims
    access_service: ClinicalAccessService

    async def run(self, query: GetNoteAccess) -> RecordAccessResult:
        note = await self.access_service.note(self.claims, query.note_id, Action.NOTE_READ)
        return RecordAccessResult(
            kind="note",
            record_id=str(note.note_id),
            tenant_id=str(self.claims.effective_tenant_id),
        )
