"""ListEmployees query and handler."""

from notesmate.domain.auth.model.claims import Claims
from notesmate.domain.auth.model.view import EmployeeProfile
from notesmate.domain.auth.service.employee import EmployeeService
from notesmate.domain.shared.authorization.action import Action
from notesmate.domain.shared.authorization.gate import requires
from notesmate.domain.shared.query import Query, QueryHandler, Result


class ListEmployees(Query): ...


class ListEmployeesResult(Result):
    employees: list[EmployeeProfile]


class ListEmployeesHandler(QueryHandler[ListEmployees, ListEmployeesResult]):
    __auth__ = requires(Action.EMPLOYEE_READ)
    claims: Claims
    employee_service: EmployeeService

    async def run(self, query: ListEmployees) -> ListEmployeesResult:
        employees = await self.employee_service.list_employees(self.claims)
        return ListEmployeesResult(
            employees=[EmployeeProfile.from_employee(e) for e in employees]
        )
