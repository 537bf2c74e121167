"""Shared fixtures: settings, stores, a recording Telegram transport and an API client"""

import json
from typing import List, Optional, Set, Tuple

import httpx
import pytest
from httpx import ASGITransport

from studio_service.config.settings import Settings
from studio_service.core.dispatch import Attachment, NotificationDispatcher
from studio_service.infrastructure.sessions.memory import MemorySessionStore
from studio_service.infrastructure.store.memory_store import MemoryStore
from studio_service.infrastructure.store.seed import seed_admin
from studio_service.infrastructure.telegram.client import TelegramClient
from studio_service.main import create_app

TEST_TOKEN = "123456:TEST-TOKEN"
TEST_CHAT_ID = "42"


class TelegramRecorder:
    """MockTransport handler that records Bot API calls and can be told to fail"""

    def __init__(self):
        self.calls: List[Tuple[str, httpx.Request]] = []
        self.reject_methods: Set[str] = set()
        self.unreachable_methods: Set[str] = set()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        method = request.url.path.rsplit("/", 1)[-1]
        request.read()
        self.calls.append((method, request))
        if method in self.unreachable_methods:
            raise httpx.ConnectError("connection refused", request=request)
        if method in self.reject_methods:
            return httpx.Response(400, json={"ok": False, "description": "Bad Request: test failure"})
        return httpx.Response(200, json={"ok": True, "result": {"message_id": len(self.calls)}})

    @property
    def methods(self) -> List[str]:
        return [method for method, _ in self.calls]

    def requests_for(self, method: str) -> List[httpx.Request]:
        return [request for name, request in self.calls if name == method]


def multipart_field(request: httpx.Request, name: str) -> Optional[str]:
    """Value of a plain (non-file) multipart field"""
    marker = f'name="{name}"\r\n\r\n'.encode()
    body = request.content
    start = body.find(marker)
    if start == -1:
        return None
    start += len(marker)
    end = body.find(b"\r\n--", start)
    return body[start:end].decode("utf-8")


def media_group_items(request: httpx.Request) -> list:
    return json.loads(multipart_field(request, "media"))


def make_attachment(name: str, content_type: str, size: int = 16) -> Attachment:
    return Attachment(filename=name, content_type=content_type, content=b"x" * size)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        telegram_bot_token=TEST_TOKEN,
        telegram_chat_id=TEST_CHAT_ID,
        seed_sample_portfolio=False,
    )


@pytest.fixture
def recorder() -> TelegramRecorder:
    return TelegramRecorder()


@pytest.fixture
async def telegram_client(recorder):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    client = TelegramClient(token=TEST_TOKEN, chat_id=TEST_CHAT_ID, http_client=http_client)
    yield client
    await http_client.aclose()


@pytest.fixture
def dispatcher(telegram_client) -> NotificationDispatcher:
    return NotificationDispatcher(telegram_client)


@pytest.fixture
async def store(settings) -> MemoryStore:
    memory_store = MemoryStore()
    await seed_admin(memory_store, settings)
    return memory_store


@pytest.fixture
def session_store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def app(settings, store, session_store, dispatcher):
    return create_app(
        settings=settings,
        store=store,
        session_store=session_store,
        dispatcher=dispatcher,
    )


@pytest.fixture
async def client(app):
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as api_client:
        yield api_client


@pytest.fixture
async def admin_client(client):
    """API client holding a logged-in admin session"""
    response = await client.post("/api/admin/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    return client
