"""Tenant domain services."""

from .ownership import ClinicalAccessService, OwningTenantResolver
from .tenant import InitialAdmin, TenantService

__all__ = ["ClinicalAccessService", "InitialAdmin", "OwningTenantResolver", "TenantService"]
