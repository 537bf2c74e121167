"""
Admin Authentication Routes

Username/password login backed by a server-side session store.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from studio_service.api.dependencies import (
    get_session_admin,
    get_session_store,
    get_settings,
    get_store,
)
from studio_service.config.settings import Settings
from studio_service.core.security import new_session_id
from studio_service.infrastructure.sessions.provider import SessionStore
from studio_service.infrastructure.store.provider import StudioStore
from studio_service.models import (
    AdminLoginRequest,
    AdminUser,
    AuthCheckResponse,
    LoginResponse,
    SuccessResponse,
)

router = APIRouter(prefix="/api/admin", tags=["admin"])
logger = logging.getLogger(__name__)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Admin Login",
    description="""
Verifies admin credentials and starts a session.

**Workflow**:
1. Looks up the admin by username; inactive accounts are rejected
2. Compares the password with the stored salted hash
3. Stores {admin_id, admin_username} under a new opaque session id
4. Sets the session id as an HttpOnly cookie (24h by default)
    """,
    responses={
        400: {"description": "Username or password missing"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    credentials: AdminLoginRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
    store: StudioStore = Depends(get_store),
    sessions: SessionStore = Depends(get_session_store),
) -> LoginResponse:
    """Admin login"""
    admin = await store.verify_admin_password(credentials.username, credentials.password)
    if admin is None:
        logger.warning(f"Failed admin login for username: {credentials.username}")
        raise HTTPException(status_code=401, detail="Невірні дані для входу")

    sid = new_session_id()
    await sessions.set(
        sid,
        {"admin_id": admin.id, "admin_username": admin.username},
        ttl_seconds=settings.session_max_age_seconds,
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=sid,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )

    logger.info(f"Admin logged in: {admin.username}")
    return LoginResponse(success=True, admin=admin.summary())


@router.post(
    "/logout",
    response_model=SuccessResponse,
    summary="Admin Logout",
    description="Destroys the current session and clears the session cookie.",
    responses={500: {"description": "Session store error"}},
)
async def logout(
    request: Request,
    response: Response,
    settings: Settings = Depends(get_settings),
    sessions: SessionStore = Depends(get_session_store),
) -> SuccessResponse:
    """Admin logout"""
    sid = request.cookies.get(settings.session_cookie_name)
    if sid:
        try:
            await sessions.destroy(sid)
        except Exception:
            logger.exception("Error destroying session")
            raise HTTPException(status_code=500, detail="Помилка виходу")

    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    return SuccessResponse()


async def _optional_session_admin(
    request: Request,
    settings: Settings = Depends(get_settings),
    store: StudioStore = Depends(get_store),
    sessions: SessionStore = Depends(get_session_store),
) -> Optional[AdminUser]:
    # Session check never fails outward
    try:
        return await get_session_admin(request, settings, store, sessions)
    except Exception:
        logger.exception("Error checking admin session")
        return None


@router.get(
    "/check",
    response_model=AuthCheckResponse,
    response_model_exclude_none=True,
    summary="Check Admin Session",
    description="Reports whether the request carries a session of an active admin. Never errors.",
)
async def check(admin: Optional[AdminUser] = Depends(_optional_session_admin)) -> AuthCheckResponse:
    """Admin session check"""
    if admin is None:
        return AuthCheckResponse(authenticated=False)
    return AuthCheckResponse(authenticated=True, admin=admin.summary())
