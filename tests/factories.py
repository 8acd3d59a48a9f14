"""Builders shared by the unit tests."""

from datetime import UTC, datetime
from uuid import uuid4

from notesmate.config import TokenConfig
from notesmate.domain.auth.model.claims import Claims, ClaimSet
from notesmate.domain.auth.model.employee import Employee
from notesmate.domain.auth.model.role import Role
from notesmate.domain.auth.model.value import EmployeeId
from notesmate.domain.auth.service.token import TokenService
from notesmate.domain.tenant.model.tenant import Tenant
from notesmate.domain.tenant.model.value import ShortName, TenantId

TEST_SECRET = "test-secret-key-256-bits-long-xx"
FAR_FUTURE_MS = 4_102_444_800_000  # 2100-01-01


def make_token_service(
    secret: str = TEST_SECRET,
    validity_hours: float = 24,
    now_ms: int | None = None,
) -> TokenService:
    config = TokenConfig(secret=secret, validity_hours=validity_hours)
    if now_ms is None:
        return TokenService(_config=config)
    return TokenService(_config=config, _now_ms=lambda: now_ms)


def make_claims(
    *,
    role: Role = Role.DOCTOR,
    secondary_role: Role | None = None,
    active_role: Role | None = None,
    home_tenant_id: TenantId | None = None,
    impersonated_tenant_id: TenantId | None = None,
    principal_id: EmployeeId | None = None,
    expires_at_epoch_ms: int = FAR_FUTURE_MS,
) -> Claims:
    return Claims(
        principal_id=principal_id or EmployeeId.generate(),
        home_tenant_id=home_tenant_id if home_tenant_id is not None else TenantId.generate(),
        role=role,
        secondary_role=secondary_role,
        active_role=active_role or role,
        impersonated_tenant_id=impersonated_tenant_id,
        expires_at_epoch_ms=expires_at_epoch_ms,
    )


def make_claim_set(**kwargs) -> ClaimSet:
    return make_claims(**kwargs).without_expiry()


def make_employee(
    *,
    tenant_id: TenantId | None = None,
    username: str | None = None,
    password_hash: str = "hashed:secret",
    role: Role = Role.DOCTOR,
    secondary_role: Role | None = None,
    is_active: bool = True,
) -> Employee:
    return Employee(
        id=EmployeeId.generate(),
        tenant_id=tenant_id if tenant_id is not None else TenantId.generate(),
        username=username or f"user-{uuid4().hex[:8]}",
        password_hash=password_hash,
        first_name="Ada",
        last_name="Lovelace",
        role=role,
        secondary_role=secondary_role,
        is_active=is_active,
        created_at=datetime.now(UTC),
    )


def make_tenant(
    *,
    code: int = 1002,
    short_name: str = "CITYCLINIC",
    is_active: bool = True,
    tenant_id: TenantId | None = None,
) -> Tenant:
    return Tenant(
        id=tenant_id or TenantId.generate(),
        code=code,
        short_name=ShortName(short_name),
        name=f"{short_name.title()} Health",
        organization_type="clinic",
        is_active=is_active,
        created_at=datetime.now(UTC),
    )


class FakeHasher:
    """Deterministic stand-in for bcrypt: ``hash(p) == "hashed:" + p``."""

    dummy_hash = "hashed:__dummy__"

    def __init__(self) -> None:
        self.verify_calls: list[tuple[str, str]] = []

    def hash(self, plaintext: str) -> str:
        return f"hashed:{plaintext}"

    def verify(self, plaintext: str, hashed: str) -> bool:
        self.verify_calls.append((plaintext, hashed))
        return hashed == f"hashed:{plaintext}"
