"""HTTP middleware. Applied in main app; order matters (last added = outermost)."""

from tenant_users.middleware.tenant_context import TenantContextMiddleware

__all__ = ["TenantContextMiddleware"]
