"""Data models for Studio Service"""

from .admin import AdminLoginRequest, AdminSummary, AdminUser
from .contact import ContactSubmission, ContactSubmissionCreate
from .portfolio import (
    PortfolioItem,
    PortfolioItemCreate,
    PortfolioItemUpdate,
    PortfolioType,
)
from .requests import (
    AuthCheckResponse,
    ContactResponse,
    ErrorResponse,
    HealthResponse,
    LoginResponse,
    SuccessResponse,
    ViolationItem,
)

__all__ = [
    "AdminLoginRequest",
    "AdminSummary",
    "AdminUser",
    "ContactSubmission",
    "ContactSubmissionCreate",
    "PortfolioItem",
    "PortfolioItemCreate",
    "PortfolioItemUpdate",
    "PortfolioType",
    "AuthCheckResponse",
    "ContactResponse",
    "ErrorResponse",
    "HealthResponse",
    "LoginResponse",
    "SuccessResponse",
    "ViolationItem",
]
