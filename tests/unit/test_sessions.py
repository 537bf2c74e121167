"""Session store tests for the memory and database backends"""

import pytest

from studio_service.config.settings import Settings
from studio_service.infrastructure.database.client import DatabaseClient
from studio_service.infrastructure.sessions import (
    DatabaseSessionStore,
    MemorySessionStore,
    build_session_store,
)


@pytest.fixture(params=["memory", "database"])
async def sessions(request, tmp_path):
    if request.param == "memory":
        yield MemorySessionStore()
        return

    db_client = DatabaseClient(f"sqlite+aiosqlite:///{tmp_path / 'sessions.db'}")
    await db_client.initialize()
    yield DatabaseSessionStore(db_client)
    await db_client.close()


@pytest.mark.unit
class TestSessionStore:

    async def test_set_and_get(self, sessions):
        await sessions.set("sid-1", {"admin_id": 1, "admin_username": "admin"}, ttl_seconds=60)

        assert await sessions.get("sid-1") == {"admin_id": 1, "admin_username": "admin"}

    async def test_unknown_session_is_absent(self, sessions):
        assert await sessions.get("missing") is None

    async def test_set_replaces_existing(self, sessions):
        await sessions.set("sid-1", {"admin_id": 1}, ttl_seconds=60)
        await sessions.set("sid-1", {"admin_id": 2}, ttl_seconds=60)

        assert await sessions.get("sid-1") == {"admin_id": 2}

    async def test_expired_session_reads_as_absent(self, sessions):
        await sessions.set("sid-1", {"admin_id": 1}, ttl_seconds=-1)

        assert await sessions.get("sid-1") is None

    async def test_destroy(self, sessions):
        await sessions.set("sid-1", {"admin_id": 1}, ttl_seconds=60)

        await sessions.destroy("sid-1")
        await sessions.destroy("sid-1")

        assert await sessions.get("sid-1") is None

    async def test_prune_expired(self, sessions):
        await sessions.set("old-1", {"admin_id": 1}, ttl_seconds=-10)
        await sessions.set("old-2", {"admin_id": 1}, ttl_seconds=-10)
        await sessions.set("live", {"admin_id": 1}, ttl_seconds=60)

        assert await sessions.prune_expired() == 2
        assert await sessions.get("live") == {"admin_id": 1}
        assert await sessions.prune_expired() == 0

    async def test_returned_data_is_a_copy(self, sessions):
        await sessions.set("sid-1", {"admin_id": 1}, ttl_seconds=60)

        data = await sessions.get("sid-1")
        data["admin_id"] = 99

        assert await sessions.get("sid-1") == {"admin_id": 1}


@pytest.mark.unit
class TestMemorySessionPruning:

    async def test_set_prunes_once_interval_elapsed(self):
        sessions = MemorySessionStore(prune_interval_seconds=0)
        await sessions.set("old", {"admin_id": 1}, ttl_seconds=-10)

        await sessions.set("new", {"admin_id": 2}, ttl_seconds=60)

        assert "old" not in sessions._sessions
        assert "new" in sessions._sessions


@pytest.mark.unit
class TestBuildSessionStore:

    def test_memory_backend(self):
        store = build_session_store(Settings(_env_file=None, session_backend="memory"))
        assert isinstance(store, MemorySessionStore)

    def test_database_backend_requires_client(self):
        with pytest.raises(ValueError):
            build_session_store(Settings(_env_file=None, session_backend="database"))

    def test_database_backend(self):
        db_client = DatabaseClient("sqlite+aiosqlite:///:memory:")
        store = build_session_store(Settings(_env_file=None, session_backend="database"), db_client)
        assert isinstance(store, DatabaseSessionStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            build_session_store(Settings(_env_file=None, session_backend="redis"))
