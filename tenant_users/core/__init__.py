"""Core: config, tenant context, and application bootstrap."""

from tenant_users.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
