"""
API Dependencies

Components are attached to app.state by the application factory; routes
reach them through these dependencies.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request

from studio_service.config.settings import Settings
from studio_service.core.contact_manager import ContactManager
from studio_service.infrastructure.sessions.provider import SessionStore
from studio_service.infrastructure.store.provider import StudioStore
from studio_service.models.admin import AdminUser

logger = logging.getLogger(__name__)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> StudioStore:
    return request.app.state.store


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_contact_manager(request: Request) -> ContactManager:
    """Dependency for getting a ContactManager bound to the app's components"""
    state = request.app.state
    return ContactManager(
        store=state.store,
        dispatcher=state.dispatcher,
        display_timezone=state.settings.display_timezone,
    )


async def get_session_admin(
    request: Request,
    settings: Settings = Depends(get_settings),
    store: StudioStore = Depends(get_store),
    sessions: SessionStore = Depends(get_session_store),
) -> Optional[AdminUser]:
    """Admin bound to the request's session cookie, if the account is still active"""
    sid = request.cookies.get(settings.session_cookie_name)
    if not sid:
        return None

    data = await sessions.get(sid)
    if not data or "admin_username" not in data:
        return None

    admin = await store.get_admin_user(data["admin_username"])
    if admin is None or not admin.is_active or admin.id != data.get("admin_id"):
        return None
    return admin


async def require_admin(admin: Optional[AdminUser] = Depends(get_session_admin)) -> AdminUser:
    """Reject requests without an active admin session"""
    if admin is None:
        raise HTTPException(status_code=401, detail="Потрібна авторизація")
    return admin
