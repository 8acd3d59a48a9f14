"""Queries: read-only requests and their handlers."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from notesmate.domain.shared.handler import GatedHandlerMeta

if TYPE_CHECKING:
    from notesmate.domain.shared.authorization.gate import Gate


class Query(BaseModel): ...


class Result(BaseModel): ...


Q = TypeVar("Q", bound=Query)
R = TypeVar("R", bound=Result)


class QueryHandler(Generic[Q, R], metaclass=GatedHandlerMeta):
    """Base class for query handlers; same gate rules as CommandHandler."""

    __auth__: ClassVar[Gate]

    @abstractmethod
    async def run(self, query: Q) -> R: ...
