from dataclasses import dataclass
from typing import dataclass_transform


@dataclass_transform(kw_only_default=True)
class _ServiceMeta(type):
    def __new__(mcs, name: str, bases: tuple, namespace: dict):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls, kw_only=True)
        return cls


class Service(metaclass=_ServiceMeta):
    """Domain service base.

    Subclasses become keyword-only dataclasses: collaborators are declared as
    annotated attributes (``_employee_repo: EmployeeRepository``) and passed by
    name, which is how the DI providers and the tests build them.
    """
