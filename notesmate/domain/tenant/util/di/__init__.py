from notesmate.domain.tenant.util.di.provider import TenantProvider

__all__ = ["TenantProvider"]
