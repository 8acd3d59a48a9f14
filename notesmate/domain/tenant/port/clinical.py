from abc import abstractmethod
from typing import Protocol
from uuid import UUID

from notesmate.domain.shared.port import Port
from notesmate.domain.tenant.model.clinical import NoteRef, PatientRef, VisitRef


class ClinicalRecordReader(Port, Protocol):
    """Read-only access to the ownership links of clinical records."""

    @abstractmethod
    async def get_patient(self, patient_id: str) -> PatientRef | None: ...

    @abstractmethod
    async def get_visit(self, visit_id: UUID) -> VisitRef | None: ...

    @abstractmethod
    async def get_note(self, note_id: UUID) -> NoteRef | None: ...
