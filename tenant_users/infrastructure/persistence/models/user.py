"""User ORM model (tenant-scoped)."""

from sqlalchemy import JSON, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tenant_users.infrastructure.persistence.database import Base
from tenant_users.infrastructure.persistence.models.mixins import MultiTenantModel


def normalize_username(username: str) -> str:
    """Case-folded form used for lookups and the per-tenant unique constraint.

    Folding happens in Python so every backend compares the same value;
    SQLite's lower() only folds ASCII.
    """
    return username.casefold()


class User(MultiTenantModel, Base):
    """User model. Table: app_user. Unique (tenant_id, username_normalized)."""

    __tablename__ = "app_user"

    username: Mapped[str] = mapped_column(String(255), nullable=False)
    username_normalized: Mapped[str] = mapped_column(String(255), nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    roles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    __table_args__ = (
        UniqueConstraint(
            "tenant_id", "username_normalized", name="uq_app_user_tenant_username_ci"
        ),
    )
