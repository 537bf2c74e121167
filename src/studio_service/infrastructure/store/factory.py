"""Store Factory

Builds the store selected by the STORE_BACKEND setting and loads its seed data.
"""

import logging
from typing import Optional

from studio_service.config.settings import Settings
from studio_service.infrastructure.database.client import DatabaseClient
from studio_service.infrastructure.store.database_store import DatabaseStore
from studio_service.infrastructure.store.memory_store import MemoryStore
from studio_service.infrastructure.store.provider import StudioStore
from studio_service.infrastructure.store.seed import seed_admin, seed_sample_portfolio

logger = logging.getLogger(__name__)


async def build_store(settings: Settings, db_client: Optional[DatabaseClient] = None) -> StudioStore:
    """Create and seed the configured store.

    STORE_BACKEND:
        "memory" (default): process-local store, seeded with the admin account
            and (when SEED_SAMPLE_PORTFOLIO is on) the sample portfolio
        "database": SQLAlchemy store on DATABASE_URL, seeded with the admin
            account if it is missing

    Args:
        settings: Service settings
        db_client: Initialized database client (required for "database")

    Returns:
        Ready-to-use StudioStore
    """
    backend = settings.store_backend.lower()
    logger.info(f"Initializing store backend: {backend}")

    if backend == "database":
        if db_client is None:
            raise ValueError("A database client is required for STORE_BACKEND=database")
        store = DatabaseStore(db_client)
        await seed_admin(store, settings)
        return store

    if backend != "memory":
        raise ValueError(f"Unknown store backend: {settings.store_backend}")

    store = MemoryStore()
    await seed_admin(store, settings)
    if settings.seed_sample_portfolio:
        await seed_sample_portfolio(store)
    return store
