"""Record access checks: which organization owns a patient, visit or note."""

from uuid import UUID

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter

from notesmate.domain.tenant.query.record_access import (
    GetNoteAccess,
    GetNoteAccessHandler,
    GetPatientAccess,
    GetPatientAccessHandler,
    GetVisitAccess,
    GetVisitAccessHandler,
    RecordAccessResult,
)

router = APIRouter(prefix="/records", tags=["Records"], route_class=DishkaRoute)


@router.get("/patients/{patient_id}", response_model=RecordAccessResult)
async def get_patient_access(
    patient_id: str, handler: FromDishka[GetPatientAccessHandler]
) -> RecordAccessResult:
    return await handler.run(GetPatientAccess(patient_id=patient_id))


@router.get("/visits/{visit_id}", response_model=RecordAccessResult)
async def get_visit_access(
    visit_id: UUID, handler: FromDishka[GetVisitAccessHandler]
) -> RecordAccessResult:
    return await handler.run(GetVisitAccess(visit_id=visit_id))


@router.get("/notes/{note_id}", response_model=RecordAccessResult)
async def get_note_access(
    note_id: UUID, handler: FromDishka[GetNoteAccessHandler]
) -> RecordAccessResult:
    return await handler.run(GetNoteAccess(note_id=note_id))
