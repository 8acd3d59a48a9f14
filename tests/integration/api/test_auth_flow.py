"""End-to-end tests through the HTTP API, against a migrated SQLite file."""

import json
from base64 import urlsafe_b64decode
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, insert

from notesmate.application.api.rest.app import create_app
from notesmate.config import (
    AuthConfig,
    BootstrapAdminConfig,
    Config,
    DatabaseConfig,
    Server,
    TokenConfig,
)
from notesmate.infrastructure.persistence.tables import patients_table

API = "/api/v1"
SECRET = "integration-test-secret-not-for-production"


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "notesmate.db"


@pytest.fixture
def client(db_path):
    config = Config(
        server=Server(environment="test"),
        database=DatabaseConfig(url=f"sqlite+aiosqlite:///{db_path}"),
        auth=AuthConfig(
            token=TokenConfig(secret=SECRET),
            bootstrap_admin=BootstrapAdminConfig(username="root", password="rootpass"),
        ),
    )
    with TestClient(create_app(config)) as client:
        yield client


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def decode_payload(token: str) -> dict:
    payload_b64 = token.split(".")[0]
    return json.loads(urlsafe_b64decode(payload_b64 + "=" * (-len(payload_b64) % 4)))


def login(client: TestClient, username: str, password: str, tenant: str | None = None) -> str:
    body = {"username": username, "password": password}
    if tenant is not None:
        body["tenant"] = tenant
    response = client.post(f"{API}/auth/login", json=body)
    assert response.status_code == 200, response.text
    return response.json()["token"]


def create_clinic(client: TestClient, root_token: str, short_name: str, admin: str) -> dict:
    response = client.post(
        f"{API}/tenants",
        headers=bearer(root_token),
        json={
            "name": f"{short_name.title()} Clinic",
            "short_name": short_name,
            "admin": {
                "username": admin,
                "password": "adminpw",
                "first_name": "Ann",
                "last_name": "Admin",
            },
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["tenant"]


def insert_patient(db_path, patient_id: str, tenant_id: str) -> None:
    engine = create_engine(f"sqlite:///{db_path}")
    with engine.begin() as conn:
        conn.execute(
            insert(patients_table).values(
                patient_id=patient_id,
                tenant_id=tenant_id,
                first_name="Jo",
                last_name="Doe",
                created_at=datetime.now(UTC),
            )
        )
    engine.dispose()


@pytest.fixture
def world(client, db_path) -> dict:
    """Two clinics (1002, 1003), a doctor in 1002 and one patient in each clinic."""
    root = login(client, "root", "rootpass")
    city = create_clinic(client, root, "cityclinic", "city.admin")
    river = create_clinic(client, root, "riverside", "river.admin")

    city_admin = login(client, "city.admin", "adminpw", tenant="1002")
    response = client.post(
        f"{API}/employees",
        headers=bearer(city_admin),
        json={
            "username": "dr.smith",
            "password": "docpw",
            "first_name": "Sam",
            "last_name": "Smith",
            "role": "doctor",
        },
    )
    assert response.status_code == 201, response.text

    insert_patient(db_path, "CITYCLINIC-000001", city["id"])
    insert_patient(db_path, "RIVERSIDE-000001", river["id"])
    return {"root": root, "city": city, "river": river, "city_admin": city_admin}


class TestHealth:
    def test_health(self, client):
        response = client.get(f"{API}/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestLogin:
    def test_bootstrap_admin_logs_in_without_tenant(self, client):
        response = client.post(
            f"{API}/auth/login", json={"username": "root", "password": "rootpass"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["token_type"] == "Bearer"
        assert body["employee"]["role"] == "super_admin"
        assert "password_hash" not in body["employee"]
        assert body["tenant"]["code"] == 1001

    def test_doctor_login_by_code(self, client, world):
        response = client.post(
            f"{API}/auth/login",
            json={"tenant": "1002", "username": "dr.smith", "password": "docpw"},
        )

        assert response.status_code == 200
        payload = decode_payload(response.json()["token"])
        assert payload["activeRole"] == "doctor"
        assert "impersonatedTenantId" not in payload
        assert payload["homeTenantId"] == world["city"]["id"]

    def test_doctor_login_by_short_name(self, client, world):
        token = login(client, "dr.smith", "docpw", tenant="CityClinic")

        assert decode_payload(token)["role"] == "doctor"

    def test_doctor_login_with_numeric_code(self, client, world):
        response = client.post(
            f"{API}/auth/login",
            json={"tenant": 1002, "username": "dr.smith", "password": "docpw"},
        )

        assert response.status_code == 200
        assert decode_payload(response.json()["token"])["homeTenantId"] == world["city"]["id"]

    def test_code_too_large_to_store_looks_like_wrong_password(self, client, world):
        response = client.post(
            f"{API}/auth/login",
            json={"tenant": "9" * 30, "username": "dr.smith", "password": "docpw"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "invalid_credentials"

    def test_wrong_password_issues_no_token(self, client, world):
        response = client.post(
            f"{API}/auth/login",
            json={"tenant": "1002", "username": "dr.smith", "password": "wrong"},
        )

        assert response.status_code == 401
        assert response.json() == {"code": "invalid_credentials", "message": "Invalid credentials"}
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert "token" not in response.json()

    def test_other_clinic_looks_like_wrong_password(self, client, world):
        response = client.post(
            f"{API}/auth/login",
            json={"tenant": "1003", "username": "dr.smith", "password": "docpw"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "invalid_credentials"

    def test_tenant_required_for_clinic_staff(self, client, world):
        response = client.post(
            f"{API}/auth/login", json={"username": "dr.smith", "password": "docpw"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "tenant_required"


class TestSession:
    def test_missing_token(self, client):
        response = client.get(f"{API}/auth/session")

        assert response.status_code == 401
        assert response.json()["code"] == "missing_token"

    def test_tampered_token_rejected(self, client, world):
        token = login(client, "dr.smith", "docpw", tenant="1002")
        payload_b64, signature = token.split(".")
        flipped = "A" if signature[0] != "A" else "B"

        response = client.get(
            f"{API}/auth/session", headers=bearer(f"{payload_b64}.{flipped}{signature[1:]}")
        )

        assert response.status_code == 401
        assert response.json()["code"] == "invalid_token"

    def test_scheme_is_case_insensitive(self, client, world):
        token = login(client, "dr.smith", "docpw", tenant="1002")

        response = client.get(f"{API}/auth/session", headers={"Authorization": f"bearer {token}"})

        assert response.status_code == 200

    def test_session_lists_permissions(self, client, world):
        token = login(client, "dr.smith", "docpw", tenant="1002")

        response = client.get(f"{API}/auth/session", headers=bearer(token))

        assert response.status_code == 200
        body = response.json()
        assert body["session"]["active_role"] == "doctor"
        assert "note:create" in body["permissions"]
        assert "tenant:create" not in body["permissions"]


class TestRoleEnforcement:
    def test_doctor_cannot_create_employees(self, client, world):
        token = login(client, "dr.smith", "docpw", tenant="1002")

        response = client.post(
            f"{API}/employees",
            headers=bearer(token),
            json={
                "username": "sneaky",
                "password": "pw",
                "first_name": "S",
                "last_name": "N",
                "role": "staff",
            },
        )

        assert response.status_code == 403
        assert response.json()["code"] == "insufficient_permissions"

    def test_doctor_cannot_create_tenants(self, client, world):
        token = login(client, "dr.smith", "docpw", tenant="1002")

        response = client.post(
            f"{API}/tenants", headers=bearer(token), json={"name": "X", "short_name": "X"}
        )

        assert response.status_code == 403

    def test_org_admin_lists_only_own_employees(self, client, world):
        response = client.get(f"{API}/employees", headers=bearer(world["city_admin"]))

        assert response.status_code == 200
        usernames = {e["username"] for e in response.json()["employees"]}
        assert usernames == {"city.admin", "dr.smith"}

    def test_deactivated_employee_cannot_log_in(self, client, world):
        listed = client.get(f"{API}/employees", headers=bearer(world["city_admin"])).json()
        doctor_id = next(e["id"] for e in listed["employees"] if e["username"] == "dr.smith")

        response = client.put(
            f"{API}/employees/{doctor_id}/status",
            headers=bearer(world["city_admin"]),
            json={"is_active": False},
        )
        assert response.status_code == 200

        response = client.post(
            f"{API}/auth/login",
            json={"tenant": "1002", "username": "dr.smith", "password": "docpw"},
        )
        assert response.status_code == 401
        assert response.json()["code"] == "account_deactivated"


class TestTenantIsolation:
    def test_doctor_reads_own_patient(self, client, world):
        token = login(client, "dr.smith", "docpw", tenant="1002")

        response = client.get(f"{API}/records/patients/CITYCLINIC-000001", headers=bearer(token))

        assert response.status_code == 200
        assert response.json()["tenant_id"] == world["city"]["id"]

    def test_doctor_denied_other_clinic_patient(self, client, world):
        token = login(client, "dr.smith", "docpw", tenant="1002")

        other = client.get(f"{API}/records/patients/RIVERSIDE-000001", headers=bearer(token))
        missing = client.get(f"{API}/records/patients/NOPE-000001", headers=bearer(token))

        assert other.status_code == missing.status_code == 403
        assert other.json() == missing.json()
        assert other.json() == {"code": "access_denied", "message": "Access denied"}

    def test_platform_admin_switches_tenant_then_denied_elsewhere(self, client, world):
        switched = client.post(
            f"{API}/auth/switch-tenant",
            headers=bearer(world["root"]),
            json={"tenant_code": 1003},
        )
        assert switched.status_code == 200
        token = switched.json()["token"]
        assert decode_payload(token)["impersonatedTenantId"] == world["river"]["id"]

        denied = client.get(f"{API}/records/patients/CITYCLINIC-000001", headers=bearer(token))
        allowed = client.get(f"{API}/records/patients/RIVERSIDE-000001", headers=bearer(token))

        assert denied.status_code == 403
        assert denied.json()["code"] == "access_denied"
        assert allowed.status_code == 200

    def test_platform_admin_without_impersonation_has_no_clinical_access(self, client, world):
        response = client.get(
            f"{API}/records/patients/CITYCLINIC-000001", headers=bearer(world["root"])
        )

        assert response.status_code == 403

    def test_clear_impersonation(self, client, world):
        switched = client.post(
            f"{API}/auth/switch-tenant",
            headers=bearer(world["root"]),
            json={"tenant_code": 1002},
        ).json()["token"]

        response = client.post(f"{API}/auth/clear-impersonation", headers=bearer(switched))

        assert response.status_code == 200
        assert response.json()["session"]["impersonated_tenant_id"] is None

    def test_impersonating_platform_admin_cannot_administer_tenants(self, client, world):
        switched = client.post(
            f"{API}/auth/switch-tenant",
            headers=bearer(world["root"]),
            json={"tenant_code": 1003},
        ).json()["token"]

        listed = client.get(f"{API}/tenants", headers=bearer(switched))
        created = client.post(
            f"{API}/tenants",
            headers=bearer(switched),
            json={"name": "X Clinic", "short_name": "xclinic"},
        )

        assert listed.status_code == created.status_code == 403
        assert created.json()["code"] == "access_denied"
        all_codes = {
            t["code"]
            for t in client.get(f"{API}/tenants", headers=bearer(world["root"])).json()["tenants"]
        }
        assert all_codes == {1001, 1002, 1003}

    def test_org_admin_cannot_switch_tenant(self, client, world):
        response = client.post(
            f"{API}/auth/switch-tenant",
            headers=bearer(world["city_admin"]),
            json={"tenant_code": 1003},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "platform_role_required"


class TestRecordIdentifiers:
    def test_identifiers_are_sequential_per_tenant(self, client, world):
        token = login(client, "dr.smith", "docpw", tenant="1002")
        url = f"{API}/tenants/current/record-identifiers"

        first = client.post(url, headers=bearer(token)).json()["identifier"]
        second = client.post(url, headers=bearer(token)).json()["identifier"]

        assert (first, second) == ("CITYCLINIC-000001", "CITYCLINIC-000002")


class TestRoleSwitch:
    @pytest.mark.parametrize(
        "username,password", [("dr.smith", "docpw"), ("city.admin", "adminpw")]
    )
    def test_clinic_staff_cannot_become_platform_admin(self, client, world, username, password):
        token = login(client, username, password, tenant="1002")

        response = client.post(
            f"{API}/auth/switch-role", headers=bearer(token), json={"role": "super_admin"}
        )

        assert response.status_code == 403
        assert response.json()["code"] == "role_not_assigned"
        assert "token" not in response.json()


class TestRequestValidation:
    def test_missing_tenant_code(self, client, world):
        response = client.post(f"{API}/auth/switch-tenant", headers=bearer(world["root"]), json={})

        assert response.status_code == 400
        assert response.json() == {
            "code": "missing_fields",
            "message": "Missing required fields: tenant_code",
            "field": "tenant_code",
        }

    def test_tenant_code_too_large(self, client, world):
        response = client.post(
            f"{API}/auth/switch-tenant",
            headers=bearer(world["root"]),
            json={"tenant_code": int("9" * 30)},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_request"

    def test_tenant_path_code_too_large(self, client, world):
        response = client.get(f"{API}/tenants/{'9' * 30}", headers=bearer(world["root"]))

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_request"

    def test_unparseable_body(self, client):
        response = client.post(
            f"{API}/auth/login",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "invalid_request"
