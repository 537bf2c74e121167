"""Session Store Factory

Chooses the session store once at startup from the SESSION_BACKEND setting.
"""

import logging
from typing import Optional

from studio_service.config.settings import Settings
from studio_service.infrastructure.database.client import DatabaseClient
from studio_service.infrastructure.sessions.database import DatabaseSessionStore
from studio_service.infrastructure.sessions.memory import MemorySessionStore
from studio_service.infrastructure.sessions.provider import SessionStore

logger = logging.getLogger(__name__)


def build_session_store(settings: Settings, db_client: Optional[DatabaseClient] = None) -> SessionStore:
    """Create the configured session store.

    SESSION_BACKEND:
        "memory" (default): sessions live in this process only
        "database": sessions table on DATABASE_URL
    """
    backend = settings.session_backend.lower()

    if backend == "database":
        if db_client is None:
            raise ValueError("A database client is required for SESSION_BACKEND=database")
        logger.info("Session store: database")
        return DatabaseSessionStore(db_client)

    if backend != "memory":
        raise ValueError(f"Unknown session backend: {settings.session_backend}")

    logger.info("Session store: memory")
    return MemorySessionStore()
