from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.authorization.gate import requires
from notesmate.domain.shared.command import Command, CommandHandler, Result
from notesmate.domain.tenant.service.tenant import TenantService


class MintRecordIdentifier(Command): ...


class MintRecordIdentifierResult(Result):
    identifier: str


class MintRecordIdentifierHandler(
    CommandHandler[MintRecordIdentifier, MintRecordIdentifierResult]
):
    """Reserve the next patient record number of the caller's effective tenant."""

    __auth__ = requires(Action.PATIENT_CREATE)
    claims: Claims
    tenant_service: TenantService

    async def run(self, cmd: MintRecordIdentifier) -> MintRecordIdentifierResult:
        identifier = await self.tenant_service.mint_record_identifier(self.claims)
        return MintRecordIdentifierResult(identifier=identifier)
