"""Value objects for the auth domain."""

from uuid import UUID, uuid4

from pydantic import RootModel


class EmployeeId(RootModel[UUID]):
    """Unique identifier for an Employee (principal)."""

    @classmethod
    def generate(cls) -> "EmployeeId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)
