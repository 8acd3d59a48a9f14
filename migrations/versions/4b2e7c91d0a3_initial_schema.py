"""initial_schema

Revision ID: 4b2e7c91d0a3
Revises:
Create Date: 2026-10-18 09:14:02.118406

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4b2e7c91d0a3"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ORGANIZATIONS
    op.create_table(
        "organizations",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("code", sa.Integer(), nullable=False),
        sa.Column("short_name", sa.String(16), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("organization_type", sa.String(64), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("next_record_number", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
        sa.UniqueConstraint("short_name"),
    )

    # EMPLOYEES
    op.create_table(
        "employees",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=True),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("title", sa.String(100), nullable=True),
        sa.Column("role", sa.String(32), nullable=False),
        sa.Column("secondary_role", sa.String(32), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["tenant_id"], ["organizations.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )
    op.create_index("ix_employees_tenant_id", "employees", ["tenant_id"])

    # PATIENTS
    op.create_table(
        "patients",
        sa.Column("patient_id", sa.String(50), nullable=False),
        sa.Column("tenant_id", sa.String(), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["organizations.id"]),
        sa.PrimaryKeyConstraint("patient_id"),
    )
    op.create_index("ix_patients_tenant_id", "patients", ["tenant_id"])

    # VISITS
    op.create_table(
        "visits",
        sa.Column("visit_id", sa.String(), nullable=False),
        sa.Column("patient_id", sa.String(50), nullable=False),
        sa.Column("employee_id", sa.String(), nullable=False),
        sa.Column("visit_date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["patient_id"], ["patients.patient_id"]),
        sa.ForeignKeyConstraint(["employee_id"], ["employees.id"]),
        sa.PrimaryKeyConstraint("visit_id"),
    )
    op.create_index("ix_visits_patient_id", "visits", ["patient_id"])

    # VISIT NOTES
    op.create_table(
        "visit_notes",
        sa.Column("note_id", sa.String(), nullable=False),
        sa.Column("visit_id", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["visit_id"], ["visits.visit_id"]),
        sa.PrimaryKeyConstraint("note_id"),
    )
    op.create_index("ix_visit_notes_visit_id", "visit_notes", ["visit_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_visit_notes_visit_id", table_name="visit_notes")
    op.drop_table("visit_notes")

    op.drop_index("ix_visits_patient_id", table_name="visits")
    op.drop_table("visits")

    op.drop_index("ix_patients_tenant_id", table_name="patients")
    op.drop_table("patients")

    op.drop_index("ix_employees_tenant_id", table_name="employees")
    op.drop_table("employees")

    op.drop_table("organizations")
