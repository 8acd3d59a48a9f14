"""Authentication routes: login and session switching."""

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter

from notesmate.domain.auth.command.login import Login, LoginHandler, LoginResult
from notesmate.domain.auth.command.session import (
    ClearImpersonation,
    ClearImpersonationHandler,
    SessionResult,
    SwitchRole,
    SwitchRoleHandler,
    SwitchTenant,
    SwitchTenantHandler,
)
from notesmate.domain.auth.query.get_session import (
    GetSession,
    GetSessionHandler,
    GetSessionResult,
)

router = APIRouter(prefix="/auth", tags=["Authentication"], route_class=DishkaRoute)


@router.post("/login", response_model=LoginResult)
async def login(body: Login, handler: FromDishka[LoginHandler]) -> LoginResult:
    """Exchange organization, username and password for a session token."""
    return await handler.run(body)


@router.get("/session", response_model=GetSessionResult)
async def get_session(handler: FromDishka[GetSessionHandler]) -> GetSessionResult:
    """Describe the caller's current session."""
    return await handler.run(GetSession())


@router.post("/switch-tenant", response_model=SessionResult)
async def switch_tenant(
    body: SwitchTenant, handler: FromDishka[SwitchTenantHandler]
) -> SessionResult:
    """Impersonate another organization (platform administrators only)."""
    return await handler.run(body)


@router.post("/clear-impersonation", response_model=SessionResult)
async def clear_impersonation(handler: FromDishka[ClearImpersonationHandler]) -> SessionResult:
    return await handler.run(ClearImpersonation())


@router.post("/switch-role", response_model=SessionResult)
async def switch_role(body: SwitchRole, handler: FromDishka[SwitchRoleHandler]) -> SessionResult:
    """Change the active role to the primary or secondary role."""
    return await handler.run(body)
