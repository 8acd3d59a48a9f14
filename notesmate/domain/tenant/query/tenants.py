"""Tenant queries: list all tenants, read one."""

from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.authorization.gate import requires
from notesmate.domain.shared.query import Query, QueryHandler, Result
from notesmate.domain.tenant.model.value import TenantCode
from notesmate.domain.tenant.model.view import TenantSummary
from notesmate.domain.tenant.service.tenant import TenantService


class ListTenants(Query): ...


class ListTenantsResult(Result):
    tenants: list[TenantSummary]


class ListTenantsHandler(QueryHandler[ListTenants, ListTenantsResult]):
    __auth__ = requires(Action.TENANT_LIST)
    claims: Claims
    tenant_service: TenantService

    async def run(self, query: ListTenants) -> ListTenantsResult:
        tenants = await self.tenant_service.list_tenants(self.claims)
        return ListTenantsResult(tenants=[TenantSummary.from_tenant(t) for t in tenants])


class GetTenant(Query):
    code: TenantCode


class GetTenantResult(Result):
    tenant: TenantSummary


class GetTenantHandler(QueryHandler[GetTenant, GetTenantResult]):
    __auth__ = requires(Action.ORGANIZATION_READ)
    claims: Claims
    tenant_service: TenantService

    async def run(self, query: GetTenant) -> GetTenantResult:
        tenant = await self.tenant_service.get(self.claims, query.code)
        return GetTenantResult(tenant=TenantSummary.from_tenant(tenant))
