"""Session store on the sessions table"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from sqlalchemy import delete

from studio_service.infrastructure.database.client import DatabaseClient
from studio_service.infrastructure.database.models import SessionDB
from studio_service.infrastructure.sessions.provider import SessionStore

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class DatabaseSessionStore(SessionStore):
    """Persistent sessions shared by every worker using the same database."""

    def __init__(self, db_client: DatabaseClient):
        self.db = db_client

    async def get(self, sid: str) -> Optional[Dict[str, Any]]:
        async with self.db.session() as session:
            row = await session.get(SessionDB, sid)
            if row is None:
                return None
            if _as_utc(row.expire) <= datetime.now(timezone.utc):
                await session.delete(row)
                return None
            return dict(row.sess)

    async def set(self, sid: str, data: Dict[str, Any], ttl_seconds: int) -> None:
        expire = datetime.now(timezone.utc) + timedelta(seconds=ttl_seconds)
        async with self.db.session() as session:
            row = await session.get(SessionDB, sid)
            if row is None:
                session.add(SessionDB(sid=sid, sess=dict(data), expire=expire))
            else:
                row.sess = dict(data)
                row.expire = expire

    async def destroy(self, sid: str) -> None:
        async with self.db.session() as session:
            await session.execute(delete(SessionDB).where(SessionDB.sid == sid))

    async def prune_expired(self) -> int:
        async with self.db.session() as session:
            result = await session.execute(
                delete(SessionDB).where(SessionDB.expire <= datetime.now(timezone.utc))
            )
            removed = result.rowcount or 0
        if removed:
            logger.info(f"Pruned {removed} expired session(s)")
        return removed
