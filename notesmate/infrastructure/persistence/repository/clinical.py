"""Ownership lookups over the clinical record tables."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notesmate.domain.tenant.model.clinical import NoteRef, PatientRef, VisitRef
from notesmate.domain.tenant.model.value import TenantId
from notesmate.domain.tenant.port.clinical import ClinicalRecordReader
from notesmate.infrastructure.persistence.tables import (
    patients_table,
    visit_notes_table,
    visits_table,
)


class SqlClinicalRecordReader(ClinicalRecordReader):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_patient(self, patient_id: str) -> PatientRef | None:
        stmt = select(patients_table.c.patient_id, patients_table.c.tenant_id).where(
            patients_table.c.patient_id == patient_id
        )
        row = (await self.session.execute(stmt)).mappings().first()
        if row is None:
            return None
        return PatientRef(patient_id=row["patient_id"], tenant_id=TenantId(UUID(row["tenant_id"])))

    async def get_visit(self, visit_id: UUID) -> VisitRef | None:
        stmt = select(visits_table.c.visit_id, visits_table.c.patient_id).where(
            visits_table.c.visit_id == str(visit_id)
        )
        row = (await self.session.execute(stmt)).mappings().first()
        if row is None:
            return None
        return VisitRef(visit_id=UUID(row["visit_id"]), patient_id=row["patient_id"])

    async def get_note(self, note_id: UUID) -> NoteRef | None:
        stmt = select(visit_notes_table.c.note_id, visit_notes_table.c.visit_id).where(
            visit_notes_table.c.note_id == str(note_id)
        )
        row = (await self.session.execute(stmt)).mappings().first()
        if row is None:
            return None
        return NoteRef(note_id=UUID(row["note_id"]), visit_id=UUID(row["visit_id"]))
