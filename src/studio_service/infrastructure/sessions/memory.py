"""In-process session store for development and tests"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Tuple

from studio_service.infrastructure.sessions.provider import SessionStore

logger = logging.getLogger(__name__)


class MemorySessionStore(SessionStore):
    """Dict of sid -> (data, expires_at); expired entries pruned lazily."""

    def __init__(self, prune_interval_seconds: int = 24 * 60 * 60):
        self._sessions: Dict[str, Tuple[Dict[str, Any], datetime]] = {}
        self._prune_interval = timedelta(seconds=prune_interval_seconds)
        self._last_prune = self._now()

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    async def get(self, sid: str) -> Optional[Dict[str, Any]]:
        entry = self._sessions.get(sid)
        if entry is None:
            return None
        data, expires_at = entry
        if expires_at <= self._now():
            self._sessions.pop(sid, None)
            return None
        return dict(data)

    async def set(self, sid: str, data: Dict[str, Any], ttl_seconds: int) -> None:
        now = self._now()
        self._sessions[sid] = (dict(data), now + timedelta(seconds=ttl_seconds))
        if now - self._last_prune >= self._prune_interval:
            await self.prune_expired()

    async def destroy(self, sid: str) -> None:
        self._sessions.pop(sid, None)

    async def prune_expired(self) -> int:
        now = self._now()
        self._last_prune = now
        expired = [sid for sid, (_, expires_at) in self._sessions.items() if expires_at <= now]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info(f"Pruned {len(expired)} expired session(s)")
        return len(expired)
