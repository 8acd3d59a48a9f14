"""Value objects for the tenant domain."""

import re
from typing import Annotated
from uuid import UUID, uuid4

from pydantic import Field, RootModel, field_validator

PLATFORM_TENANT_CODE = 1001
"""Numeric code of the platform tenant that super admins belong to."""

PLATFORM_TENANT_SHORT_NAME = "SYSTEM"

MAX_TENANT_CODE = 2**31 - 1
"""Largest code the organizations table can hold (signed 32-bit INTEGER)."""

TenantCode = Annotated[int, Field(gt=0, le=MAX_TENANT_CODE)]

SHORT_NAME_PATTERN = re.compile(r"^[A-Z0-9]{2,16}$")


class TenantId(RootModel[UUID]):
    """Unique identifier for a Tenant (organization)."""

    @classmethod
    def generate(cls) -> "TenantId":
        return cls(uuid4())

    def __str__(self) -> str:
        return str(self.root)

    def __hash__(self) -> int:
        return hash(self.root)


class ShortName(RootModel[str]):
    """A tenant's short alphanumeric identifier, stored upper-cased (e.g. ``CITYCLINIC``)."""

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("root")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if not SHORT_NAME_PATTERN.match(v):
            raise ValueError(f"Invalid short name: {v!r} (2-16 letters or digits)")
        return v

    def __str__(self) -> str:
        return self.root

    def __hash__(self) -> int:
        return hash(self.root)


def format_record_identifier(short_name: ShortName, number: int) -> str:
    """Human-readable record identifier, e.g. ``CITYCLINIC-000042``."""
    return f"{short_name}-{number:06d}"


def parse_tenant_code(text: str) -> int | None:
    """``"1002"`` -> 1002; None for anything that is not a storable code."""
    if not (text.isascii() and text.isdigit()):
        return None
    code = int(text)
    return code if 0 < code <= MAX_TENANT_CODE else None
