"""Admin user models. Password hashes never leave the store."""

from datetime import datetime

from pydantic import BaseModel, Field

from .base import CamelModel


class AdminUser(CamelModel):
    """Admin account as seen outside the store"""

    id: int
    username: str
    email: str
    is_active: bool = True
    created_at: datetime
    updated_at: datetime

    def summary(self) -> "AdminSummary":
        return AdminSummary(id=self.id, username=self.username, email=self.email)


class AdminSummary(BaseModel):
    """Public admin identity returned by login and session checks"""

    id: int
    username: str
    email: str


class AdminLoginRequest(BaseModel):
    """Admin login credentials"""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
