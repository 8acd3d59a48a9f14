"""GetSession query and handler."""

from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.auth.model.view import SessionView
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.authorization.gate import authenticated
from notesmate.domain.shared.authorization.permission import permissions_for
from notesmate.domain.shared.query import Query, QueryHandler, Result


class GetSession(Query): ...


class GetSessionResult(Result):
    session: SessionView
    permissions: list[Action]


class GetSessionHandler(QueryHandler[GetSession, GetSessionResult]):
    """Describe the caller's own session and what its active role may do."""

    __auth__ = authenticated()
    claims: Claims

    async def run(self, query: GetSession) -> GetSessionResult:
        return GetSessionResult(
            session=SessionView.from_claims(self.claims),
            permissions=sorted(permissions_for(self.claims.active_role)),
        )
