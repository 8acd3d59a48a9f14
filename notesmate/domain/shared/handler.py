"""Metaclass shared by command and query handlers."""

from abc import ABCMeta
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import Any, dataclass_transform

_Run = Callable[[Any, Any], Coroutine[Any, Any, Any]]


def _gated(run: _Run) -> _Run:
    @wraps(run)
    async def gated_run(self: Any, request: Any) -> Any:
        from notesmate.domain.shared.authorization.gate import enforce_gate

        enforce_gate(self)
        return await run(self, request)

    return gated_run


@dataclass_transform()
class GatedHandlerMeta(ABCMeta):
    """Makes every concrete handler a dataclass whose ``run`` checks ``__auth__`` first.

    The gate is evaluated against the handler instance, i.e. after DI has
    injected ``claims`` and before any line of ``run`` executes.
    """

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if not any(isinstance(base, mcs) for base in bases):
            # CommandHandler / QueryHandler themselves
            return cls

        cls = dataclass(cls)
        if "run" in cls.__dict__:
            cls.run = _gated(cls.__dict__["run"])
        return cls
