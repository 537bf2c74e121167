"""
API Request and Response Models

Pydantic models for API input/output validation.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .admin import AdminSummary
from .base import utc_now


class ViolationItem(BaseModel):
    """One field-level validation failure"""

    field: str
    message: str


class ContactResponse(BaseModel):
    """Response after a contact submission is stored"""

    success: bool = True
    id: int = Field(..., description="New submission id")


class ErrorResponse(BaseModel):
    """Error body shared by the public endpoints"""

    success: bool = False
    message: str
    errors: Optional[List[ViolationItem]] = None


class SuccessResponse(BaseModel):
    success: bool = True


class LoginResponse(BaseModel):
    """Successful admin login"""

    success: bool = True
    admin: AdminSummary


class AuthCheckResponse(BaseModel):
    """Session status for the admin panel"""

    authenticated: bool
    admin: Optional[AdminSummary] = None


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(default="healthy")
    service: str = Field(default="kubenko-studio-service")
    timestamp: datetime = Field(default_factory=utc_now)
    store_available: bool = Field(default=True)
