"""Application lifespan: startup and shutdown.

Only wiring of infrastructure (logging, tables, engine dispose); no
business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from tenant_users.core.config import get_settings
from tenant_users.infrastructure.persistence.database import (
    create_tables,
    dispose_engine,
)
from tenant_users.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit dispose the SQL engine."""
    settings = get_settings()
    setup_logging()

    if settings.database_create_tables:
        await create_tables()
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    await dispose_engine()
