"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

metadata = MetaData()


# ============================================================================
# ORGANIZATIONS TABLE (Tenants)
# ============================================================================
organizations_table = Table(
    "organizations",
    metadata,
    Column("id", String, primary_key=True),  # UUID as string
    Column("code", Integer, nullable=False, unique=True),  # 1001 is the platform tenant
    Column("short_name", String(16), nullable=False, unique=True),  # stored upper-cased
    Column("name", String(255), nullable=False),
    Column("organization_type", String(64), nullable=True),
    Column("is_active", Boolean, nullable=False, default=True),
    Column("next_record_number", Integer, nullable=False, default=1),
    Column("created_at", DateTime(timezone=True), nullable=False),
)


# ============================================================================
# EMPLOYEES TABLE (Principals)
# ============================================================================
employees_table = Table(
    "employees",
    metadata,
    Column("id", String, primary_key=True),  # UUID as string
    Column("tenant_id", String, ForeignKey("organizations.id"), nullable=True),
    Column("username", String(100), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),  # bcrypt
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("title", String(100), nullable=True),
    Column("role", String(32), nullable=False),
    Column("secondary_role", String(32), nullable=True),
    Column("is_active", Boolean, nullable=False, default=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=True),
)

Index("ix_employees_tenant_id", employees_table.c.tenant_id)


# ============================================================================
# CLINICAL RECORDS (ownership columns only; owned by the clinical services)
# ============================================================================
patients_table = Table(
    "patients",
    metadata,
    Column("patient_id", String(50), primary_key=True),  # medical record number
    Column("tenant_id", String, ForeignKey("organizations.id"), nullable=False),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("date_of_birth", Date, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("ix_patients_tenant_id", patients_table.c.tenant_id)

visits_table = Table(
    "visits",
    metadata,
    Column("visit_id", String, primary_key=True),  # UUID as string
    Column("patient_id", String(50), ForeignKey("patients.patient_id"), nullable=False),
    Column("employee_id", String, ForeignKey("employees.id"), nullable=False),
    Column("visit_date", Date, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("ix_visits_patient_id", visits_table.c.patient_id)

visit_notes_table = Table(
    "visit_notes",
    metadata,
    Column("note_id", String, primary_key=True),  # UUID as string
    Column("visit_id", String, ForeignKey("visits.visit_id"), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=True),
)

Index("ix_visit_notes_visit_id", visit_notes_table.c.visit_id)
