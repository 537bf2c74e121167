"""Session Store Interface

Server-side storage for admin sessions: opaque session id -> session data,
with expiry. Expired sessions read as absent.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class SessionStore(ABC):
    """Abstract session store."""

    @abstractmethod
    async def get(self, sid: str) -> Optional[Dict[str, Any]]:
        """Return session data, or None when missing or expired."""

    @abstractmethod
    async def set(self, sid: str, data: Dict[str, Any], ttl_seconds: int) -> None:
        """Create or replace a session that expires after ttl_seconds."""

    @abstractmethod
    async def destroy(self, sid: str) -> None:
        """Remove a session; unknown ids are ignored."""

    @abstractmethod
    async def prune_expired(self) -> int:
        """Drop expired sessions and return how many were removed."""
