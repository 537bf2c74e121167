"""
Studio Service Settings

Configuration management using Pydantic settings with environment variable support.
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Studio Service configuration"""

    # Service Configuration
    service_name: str = Field(default="kubenko-studio-service", description="Service name")
    environment: str = Field(default="development", description="Environment (development, production)")
    port: int = Field(default=5000, description="Service port")
    host: str = Field(default="0.0.0.0", description="Service host")

    # Backends
    # STORE_BACKEND / SESSION_BACKEND: "memory" (default) or "database"
    store_backend: str = Field(default="memory", description="Portfolio/submission store backend")
    session_backend: str = Field(default="memory", description="Admin session store backend")

    # Database Configuration
    database_url: str = Field(
        default="sqlite+aiosqlite:///./studio.db",
        description="Database connection URL"
    )

    # Upload Configuration
    max_file_size_mb: int = Field(default=10, description="Maximum size of one uploaded file in MB")

    # Telegram Configuration
    telegram_bot_token: Optional[str] = Field(
        default=None,
        description="Bot token; notifications are skipped when unset"
    )
    telegram_chat_id: str = Field(default="", description="Chat that receives new leads")
    telegram_api_base: str = Field(default="https://api.telegram.org", description="Bot API base URL")
    telegram_timeout_seconds: float = Field(default=15.0, description="Timeout for one Bot API call")

    display_timezone: str = Field(default="Europe/Kyiv", description="Timezone used in notifications")

    # Admin Sessions
    session_cookie_name: str = Field(default="studio_admin_session", description="Session cookie name")
    session_max_age_seconds: int = Field(default=24 * 60 * 60, description="Session lifetime")

    # Seed Data
    admin_username: str = Field(default="admin", description="Seeded admin username")
    admin_email: str = Field(default="admin@kubenko.com", description="Seeded admin email")
    admin_password: str = Field(default="admin123", description="Seeded admin password")
    seed_sample_portfolio: bool = Field(
        default=True,
        description="Seed sample portfolio items into the memory store"
    )

    # CORS Configuration
    cors_origins: List[str] = Field(
        default=["http://localhost:5000", "http://localhost:5173"],
        description="Allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def max_file_size_bytes(self) -> int:
        """Convert max file size from MB to bytes"""
        return self.max_file_size_mb * 1024 * 1024

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def session_cookie_secure(self) -> bool:
        """Session cookies are HTTPS-only in production"""
        return self.is_production


# Global settings instance
settings = Settings()
