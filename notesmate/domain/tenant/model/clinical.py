"""Minimal views of clinical records, used only to resolve which tenant owns them.

The chain of ownership is Note -> Visit -> Patient -> Tenant.
"""

from uuid import UUID

from notesmate.domain.shared.model.value import ValueObject
from notesmate.domain.tenant.model.value import TenantId


class PatientRef(ValueObject):
    patient_id: str  # medical record number
    tenant_id: TenantId


class VisitRef(ValueObject):
    visit_id: UUID
    patient_id: str


class NoteRef(ValueObject):
    note_id: UUID
    visit_id: UUID
