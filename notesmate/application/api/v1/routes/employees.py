"""Employee administration routes, scoped to the caller's organization."""

from uuid import UUID

from dishka import FromDishka
from dishka.integrations.fastapi import DishkaRoute
from fastapi import APIRouter
from pydantic import BaseModel

from notesmate.domain.auth.command.employee import (
    CreateEmployee,
    CreateEmployeeHandler,
    EmployeeResult,
    SetEmployeeActive,
    SetEmployeeActiveHandler,
    UpdateEmployeeRoles,
    UpdateEmployeeRolesHandler,
)
from notesmate.domain.auth.model.role import Role
from notesmate.domain.auth.query.list_employees import (
    ListEmployees,
    ListEmployeesHandler,
    ListEmployeesResult,
)

router = APIRouter(prefix="/employees", tags=["Employees"], route_class=DishkaRoute)


class RolesRequest(BaseModel):
    """Request body for changing an employee's roles."""

    role: Role
    secondary_role: Role | None = None


class StatusRequest(BaseModel):
    """Request body for activating or deactivating an employee."""

    is_active: bool


@router.get("", response_model=ListEmployeesResult)
async def list_employees(handler: FromDishka[ListEmployeesHandler]) -> ListEmployeesResult:
    return await handler.run(ListEmployees())


@router.post("", response_model=EmployeeResult, status_code=201)
async def create_employee(
    body: CreateEmployee, handler: FromDishka[CreateEmployeeHandler]
) -> EmployeeResult:
    return await handler.run(body)


@router.put("/{employee_id}/roles", response_model=EmployeeResult)
async def update_employee_roles(
    employee_id: UUID,
    body: RolesRequest,
    handler: FromDishka[UpdateEmployeeRolesHandler],
) -> EmployeeResult:
    return await handler.run(
        UpdateEmployeeRoles(
            employee_id=employee_id,
            role=body.role,
            secondary_role=body.secondary_role,
        )
    )


@router.put("/{employee_id}/status", response_model=EmployeeResult)
async def set_employee_status(
    employee_id: UUID,
    body: StatusRequest,
    handler: FromDishka[SetEmployeeActiveHandler],
) -> EmployeeResult:
    """Activate or deactivate an employee. Employees are never deleted."""
    return await handler.run(SetEmployeeActive(employee_id=employee_id, is_active=body.is_active))
