"""Authorization actions: every operation subject to access control."""

from enum import StrEnum


class Action(StrEnum):
    """Closed set of authorization-relevant operations, as ``resource:verb``."""

    # Platform: tenant administration
    TENANT_CREATE = "tenant:create"
    TENANT_LIST = "tenant:list"
    TENANT_UPDATE = "tenant:update"
    TENANT_IMPERSONATE = "tenant:impersonate"

    # Organization settings (own tenant)
    ORGANIZATION_READ = "organization:read"
    ORGANIZATION_UPDATE = "organization:update"

    # Employees
    EMPLOYEE_READ = "employee:read"
    EMPLOYEE_CREATE = "employee:create"
    EMPLOYEE_UPDATE = "employee:update"

    # Patients
    PATIENT_READ = "patient:read"
    PATIENT_CREATE = "patient:create"
    PATIENT_UPDATE = "patient:update"

    # Visits
    VISIT_READ = "visit:read"
    VISIT_CREATE = "visit:create"
    VISIT_UPDATE = "visit:update"

    # Visit notes
    NOTE_READ = "note:read"
    NOTE_CREATE = "note:create"
    NOTE_UPDATE = "note:update"

    # Reports and backups
    REPORT_EXPORT = "report:export"
    BACKUP_CREATE = "backup:create"
