"""Tenant (organization) routes."""

from typing import Annotated

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter, Path

from notesmate.domain.tenant.command.create_tenant import (
    CreateTenant,
    CreateTenantHandler,
    CreateTenantResult,
)
from notesmate.domain.tenant.command.mint_record_identifier import (
    MintRecordIdentifier,
    MintRecordIdentifierHandler,
    MintRecordIdentifierResult,
)
from notesmate.domain.tenant.model.value import MAX_TENANT_CODE
from notesmate.domain.tenant.query.tenants import (
    GetTenant,
    GetTenantHandler,
    GetTenantResult,
    ListTenants,
    ListTenantsHandler,
    ListTenantsResult,
)

router = APIRouter(prefix="/tenants", tags=["Tenants"], route_class=DishkaRoute)


@router.get("", response_model=ListTenantsResult)
async def list_tenants(handler: FromDishka[ListTenantsHandler]) -> ListTenantsResult:
    return await handler.run(ListTenants())


@router.post("", response_model=CreateTenantResult, status_code=201)
async def create_tenant(
    body: CreateTenant, handler: FromDishka[CreateTenantHandler]
) -> CreateTenantResult:
    """Create an organization, optionally with its first administrator."""
    return await handler.run(body)


@router.post("/current/record-identifiers", response_model=MintRecordIdentifierResult)
async def mint_record_identifier(
    handler: FromDishka[MintRecordIdentifierHandler],
) -> MintRecordIdentifierResult:
    """Reserve the next record identifier of the caller's organization."""
    return await handler.run(MintRecordIdentifier())


@router.get("/{code}", response_model=GetTenantResult)
async def get_tenant(
    code: Annotated[int, Path(gt=0, le=MAX_TENANT_CODE)],
    handler: FromDishka[GetTenantHandler],
) -> GetTenantResult:
    return await handler.run(GetTenant(code=code))
