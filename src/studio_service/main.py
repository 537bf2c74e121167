"""
Studio Service - Main Application

FastAPI application for the wedding studio site: contact leads, portfolio and admin panel.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from studio_service.api.routes.admin import router as admin_router
from studio_service.api.routes.contact import router as contact_router
from studio_service.api.routes.portfolio import router as portfolio_router
from studio_service.config.settings import Settings, settings as default_settings
from studio_service.core.dispatch import NotificationDispatcher
from studio_service.infrastructure.database.client import DatabaseClient
from studio_service.infrastructure.sessions import SessionStore, build_session_store
from studio_service.infrastructure.store import StudioStore, build_store
from studio_service.infrastructure.telegram import TelegramClient
from studio_service.models import ErrorResponse, HealthResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def _needs_database(settings: Settings, store: Optional[StudioStore], session_store: Optional[SessionStore]) -> bool:
    return (store is None and settings.store_backend.lower() == "database") or (
        session_store is None and settings.session_backend.lower() == "database"
    )


def _build_dispatcher(settings: Settings) -> NotificationDispatcher:
    if not settings.telegram_bot_token:
        logger.warning("TELEGRAM_BOT_TOKEN is not set; lead notifications are disabled")
        return NotificationDispatcher(None)
    client = TelegramClient(
        token=settings.telegram_bot_token,
        chat_id=settings.telegram_chat_id,
        api_base=settings.telegram_api_base,
        timeout=settings.telegram_timeout_seconds,
    )
    return NotificationDispatcher(client)


def _field_name(loc) -> str:
    # Drop the "body"/"path"/"query" prefix FastAPI puts first
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Invalid bodies and path parameters are client errors (400)"""
    errors = [
        {"field": _field_name(err.get("loc", ())), "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    logger.warning(f"Request validation failed on {request.url.path}: {[e['field'] for e in errors]}")
    body = ErrorResponse(message="Невірні дані", errors=errors)
    return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTP errors carry the same {success, message} body as the rest of the API"""
    body = ErrorResponse(message=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[StudioStore] = None,
    session_store: Optional[SessionStore] = None,
    dispatcher: Optional[NotificationDispatcher] = None,
) -> FastAPI:
    """
    Build the application

    Components passed in are used as-is and placed on app.state right away;
    anything missing is built from settings when the app starts.

    Args:
        settings: Service settings (defaults to environment-loaded settings)
        store: Portfolio/submission/admin store
        session_store: Admin session store
        dispatcher: Lead notification dispatcher

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager"""
        # Startup
        logger.info(f"Starting {settings.service_name} ({settings.environment})")

        db_client = None
        if _needs_database(settings, app.state.store, app.state.session_store):
            db_client = DatabaseClient(settings.database_url)
            await db_client.initialize()

        if app.state.store is None:
            app.state.store = await build_store(settings, db_client)
        if app.state.session_store is None:
            app.state.session_store = build_session_store(settings, db_client)
        owns_dispatcher = app.state.dispatcher is None
        if owns_dispatcher:
            app.state.dispatcher = _build_dispatcher(settings)

        yield

        # Shutdown
        logger.info("Shutting down Studio Service")
        if owns_dispatcher and app.state.dispatcher.client is not None:
            await app.state.dispatcher.client.aclose()
        if db_client is not None:
            await db_client.close()

    app = FastAPI(
        title="Studio Service",
        description="Wedding videography studio backend: contact leads, portfolio and admin panel",
        version=VERSION,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.store = store
    app.state.session_store = session_store
    app.state.dispatcher = dispatcher

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Include routers
    app.include_router(contact_router)
    app.include_router(portfolio_router)
    app.include_router(admin_router)

    @app.get(
        "/",
        summary="Service Information",
        description="Returns service identification, version and environment.",
    )
    async def root():
        """Root endpoint"""
        return {
            "service": settings.service_name,
            "version": VERSION,
            "status": "running",
            "environment": settings.environment
        }

    @app.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="""
Returns the health status of the service including store availability.

**Response Example**:
```json
{
  "status": "healthy",
  "service": "kubenko-studio-service",
  "store_available": true
}
```

Responds with 503 when the store cannot be reached.
        """,
        responses={
            200: {"description": "Service is healthy"},
            503: {"description": "Store unavailable"}
        }
    )
    async def health(request: Request):
        """Health check"""
        store_ok = False
        try:
            store_ok = await request.app.state.store.health_check()
        except Exception as e:
            logger.error(f"Store health check failed: {e}")

        body = HealthResponse(
            status="healthy" if store_ok else "unhealthy",
            service=settings.service_name,
            store_available=store_ok,
        )
        if not store_ok:
            return JSONResponse(status_code=503, content=jsonable_encoder(body))
        return body

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "studio_service.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=True if default_settings.environment == "development" else False
    )
