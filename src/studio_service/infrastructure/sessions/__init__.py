"""Admin session storage"""

from studio_service.infrastructure.sessions.factory import build_session_store
from studio_service.infrastructure.sessions.provider import SessionStore
from studio_service.infrastructure.sessions.memory import MemorySessionStore
from studio_service.infrastructure.sessions.database import DatabaseSessionStore

__all__ = [
    "build_session_store",
    "SessionStore",
    "MemorySessionStore",
    "DatabaseSessionStore",
]
