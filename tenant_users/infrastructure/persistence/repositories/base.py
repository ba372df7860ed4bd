"""Base repository: tenant-scoped CRUD."""

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from tenant_users.core.tenant_context import require_tenant_id
from tenant_users.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class TenantScopedRepository(Generic[ModelType]):
    """Base repository whose every query is filtered by the tenant in context.

    Callers never pass a tenant ID: _scoped() adds tenant_id = current tenant
    to each SELECT and _add() stamps it on insert. A row that belongs to
    another tenant is indistinguishable from a missing one.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    def _scoped(self) -> Select[tuple[ModelType]]:
        """SELECT over model restricted to the current tenant."""
        model: Any = self.model
        return select(self.model).where(model.tenant_id == require_tenant_id())

    async def _get_row(self, entity_id: str) -> ModelType | None:
        """Return the ORM row by primary key in the current tenant, or None."""
        model: Any = self.model
        result = await self.db.execute(self._scoped().where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _list_rows(self) -> list[ModelType]:
        """Return all ORM rows of the current tenant in insertion order."""
        model: Any = self.model
        result = await self.db.execute(
            self._scoped().order_by(model.created_at, model.id)
        )
        return list(result.scalars().all())

    async def _add(self, obj: ModelType) -> ModelType:
        """Stamp the current tenant and persist a new row."""
        row: Any = obj
        row.tenant_id = require_tenant_id()
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def _flush_update(self, obj: ModelType) -> ModelType:
        """Flush changes of an attached row."""
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def _remove(self, obj: ModelType) -> None:
        """Delete the row."""
        await self.db.delete(obj)
        await self.db.flush()
