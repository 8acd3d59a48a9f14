"""DI provider for the tenant domain."""

from dishka import provide

from notesmate.domain.auth.port.password import PasswordHasher
from notesmate.domain.auth.port.repository import EmployeeRepository
from notesmate.domain.tenant.command.create_tenant import CreateTenantHandler
from notesmate.domain.tenant.command.mint_record_identifier import MintRecordIdentifierHandler
from notesmate.domain.tenant.port.clinical import ClinicalRecordReader
from notesmate.domain.tenant.port.repository import TenantRepository
from notesmate.domain.tenant.query.record_access import (
    GetNoteAccessHandler,
    GetPatientAccessHandler,
    GetVisitAccessHandler,
)
from notesmate.domain.tenant.query.tenants import GetTenantHandler, ListTenantsHandler
from notesmate.domain.tenant.service.ownership import ClinicalAccessService, OwningTenantResolver
from notesmate.domain.tenant.service.tenant import TenantService
from notesmate.util.di.base import Provider
from notesmate.util.di.scope import Scope


class TenantProvider(Provider):
    create_tenant_handler = provide(CreateTenantHandler, scope=Scope.UOW)
    mint_record_identifier_handler = provide(MintRecordIdentifierHandler, scope=Scope.UOW)
    list_tenants_handler = provide(ListTenantsHandler, scope=Scope.UOW)
    get_tenant_handler = provide(GetTenantHandler, scope=Scope.UOW)
    get_patient_access_handler = provide(GetPatientAccessHandler, scope=Scope.UOW)
    get_visit_access_handler = provide(GetVisitAccessHandler, scope=Scope.UOW)
    get_note_access_handler = provide(GetNoteAccessHandler, scope=Scope.UOW)

    @provide(scope=Scope.UOW)
    def get_tenant_service(
        self,
        tenant_repo: TenantRepository,
        employee_repo: EmployeeRepository,
        hasher: PasswordHasher,
    ) -> TenantService:
        return TenantService(
            _tenant_repo=tenant_repo,
            _employee_repo=employee_repo,
            _hasher=hasher,
        )

    @provide(scope=Scope.UOW)
    def get_owning_tenant_resolver(self, reader: ClinicalRecordReader) -> OwningTenantResolver:
        return OwningTenantResolver(_reader=reader)

    @provide(scope=Scope.UOW)
    def get_clinical_access_service(
        self, reader: ClinicalRecordReader, resolver: OwningTenantResolver
    ) -> ClinicalAccessService:
        return ClinicalAccessService(_reader=reader, _resolver=resolver)
