"""Employee administration commands."""

from uuid import UUID

from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.auth.model.role import Role
from notesmate.domain.auth.model.value import EmployeeId
from notesmate.domain.auth.model.view import EmployeeProfile
from notesmate.domain.auth.service.employee import EmployeeService
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.authorization.gate import requires
from notesmate.domain.shared.command import Command, CommandHandler, Result


class EmployeeResult(Result):
    employee: EmployeeProfile


class CreateEmployee(Command):
    username: str = ""
    password: str = ""
    first_name: str
    last_name: str
    title: str | None = None
    role: Role
    secondary_role: Role | None = None


class CreateEmployeeHandler(CommandHandler[CreateEmployee, EmployeeResult]):
    __auth__ = requires(Action.EMPLOYEE_CREATE)
    claims: Claims
    employee_service: EmployeeService

    async def run(self, cmd: CreateEmployee) -> EmployeeResult:
        employee = await self.employee_service.create(
            self.claims,
            username=cmd.username,
            password=cmd.password,
            first_name=cmd.first_name,
            last_name=cmd.last_name,
            role=cmd.role,
            secondary_role=cmd.secondary_role,
            title=cmd.title,
        )
        return EmployeeResult(employee=EmployeeProfile.from_employee(employee))


class UpdateEmployeeRoles(Command):
    employee_id: UUID
    role: Role
    secondary_role: Role | None = None


class UpdateEmployeeRolesHandler(CommandHandler[UpdateEmployeeRoles, EmployeeResult]):
    __auth__ = requires(Action.EMPLOYEE_UPDATE)
    claims: Claims
    employee_service: EmployeeService

    async def run(self, cmd: UpdateEmployeeRoles) -> EmployeeResult:
        employee = await self.employee_service.update_roles(
            self.claims,
            EmployeeId(cmd.employee_id),
            cmd.role,
            cmd.secondary_role,
        )
        return EmployeeResult(employee=EmployeeProfile.from_employee(employee))


class SetEmployeeActive(Command):
    employee_id: UUID
    is_active: bool


class SetEmployeeActiveHandler(CommandHandler[SetEmployeeActive, EmployeeResult]):
    __auth__ = requires(Action.EMPLOYEE_UPDATE)
    claims: Claims
    employee_service: EmployeeService

    async def run(self, cmd: SetEmployeeActive) -> EmployeeResult:
        employee = await self.employee_service.set_active(
            self.claims, EmployeeId(cmd.employee_id), cmd.is_active
        )
        return EmployeeResult(employee=EmployeeProfile.from_employee(employee))
