"""Entity <-> DTO mappers."""

from tenant_users.application.mappers.user import to_record, to_transfer_object

__all__ = ["to_record", "to_transfer_object"]
