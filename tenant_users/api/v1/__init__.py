"""API v1."""

from tenant_users.api.v1.router import api_router

__all__ = ["api_router"]
