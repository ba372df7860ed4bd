"""Small cross-cutting helpers."""

from tenant_users.shared.utils.generators import generate_cuid

__all__ = ["generate_cuid"]
