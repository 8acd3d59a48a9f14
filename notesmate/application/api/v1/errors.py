"""Translate NotesMate exceptions into HTTP responses.

Bodies are ``{"code", "message"}``, plus ``field`` when bad input names one.
"""

from typing import Any

from fastapi import HTTPException
from fastapi.exceptions import RequestValidationError

from notesmate.domain.shared.error import (
    AuthenticationError,
    AuthorizationError,
    BadRequestError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotesMateError,
    NotFoundError,
)

STATUS_BY_ERROR: dict[type[NotesMateError], int] = {
    BadRequestError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    NotFoundError: 404,
    ConflictError: 409,
    InfrastructureError: 503,
}

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def status_for(error: NotesMateError) -> int:
    """Most specific registered status; other domain errors are 400, anything else 500."""
    for cls in type(error).__mro__:
        status = STATUS_BY_ERROR.get(cls)
        if status is not None:
            return status
    return 400 if isinstance(error, DomainError) else 500


def map_error(error: NotesMateError) -> HTTPException:
    detail: dict[str, Any] = {"code": error.code, "message": error.message}
    if isinstance(error, BadRequestError) and error.field is not None:
        detail["field"] = error.field

    status = status_for(error)
    headers = dict(BEARER_CHALLENGE) if status == 401 else None
    return HTTPException(status_code=status, detail=detail, headers=headers)


def _field_name(loc: tuple[int | str, ...]) -> str:
    # loc starts with where the value came from: ("body", "tenant_code"), ("path", "code")
    parts = loc[1:] or loc
    return ".".join(str(part) for part in parts)


def from_validation_error(exc: RequestValidationError) -> BadRequestError:
    """Turn FastAPI's request validation failure into a 400 ``BadRequestError``.

    Absent required fields give ``missing_fields``; anything else (wrong type,
    out of range, unparseable JSON) gives ``invalid_request``. ``field`` names
    the first offending input.
    """
    errors = exc.errors()
    missing = [_field_name(e["loc"]) for e in errors if e["type"] == "missing"]
    if missing:
        return BadRequestError(
            f"Missing required fields: {', '.join(missing)}",
            code="missing_fields",
            field=missing[0],
        )
    field = _field_name(errors[0]["loc"]) if errors else None
    return BadRequestError("Invalid request", code="invalid_request", field=field)
