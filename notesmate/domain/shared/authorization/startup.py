"""Startup validation for handler authorization declarations."""

import logging

from notesmate.domain.shared.authorization.gate import Gate
from notesmate.domain.shared.authorization.permission import validate_coverage
from notesmate.domain.shared.command import CommandHandler
from notesmate.domain.shared.error import ConfigurationError
from notesmate.domain.shared.query import QueryHandler

logger = logging.getLogger(__name__)


def _all_subclasses(cls: type) -> list[type]:
    """Application handler subclasses of ``cls``, recursively."""
    found: list[type] = []
    for sub in cls.__subclasses__():
        if sub.__module__.startswith("notesmate."):
            found.append(sub)
        found.extend(_all_subclasses(sub))
    return found


def _check_handler_class(handler_cls: type) -> None:
    """Raise ConfigurationError if the handler lacks a Gate in __auth__."""
    if not isinstance(getattr(handler_cls, "__auth__", None), Gate):
        raise ConfigurationError(f"Handler {handler_cls.__name__} has no __auth__ declaration")


def validate_all_handlers() -> None:
    """Scan all registered handlers and the permission table.

    Raises ConfigurationError listing every handler missing an __auth__ declaration.
    """
    violations: list[str] = []

    for handler_cls in _all_subclasses(CommandHandler) + _all_subclasses(QueryHandler):
        try:
            _check_handler_class(handler_cls)
        except ConfigurationError as e:
            violations.append(str(e))

    if violations:
        raise ConfigurationError(
            f"Authorization validation failed for {len(violations)} handler(s):\n"
            + "\n".join(f"  - {v}" for v in violations)
        )

    validate_coverage()
    logger.info("Authorization startup validation passed for all handlers")
