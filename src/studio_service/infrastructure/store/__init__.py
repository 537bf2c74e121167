"""Store infrastructure module.

Portfolio items, contact submissions and admin users behind the StudioStore interface.
"""

from studio_service.infrastructure.store.factory import build_store
from studio_service.infrastructure.store.provider import StudioStore
from studio_service.infrastructure.store.memory_store import MemoryStore
from studio_service.infrastructure.store.database_store import DatabaseStore

__all__ = [
    "build_store",
    "StudioStore",
    "MemoryStore",
    "DatabaseStore",
]
