"""Database layer"""

from .client import DatabaseClient
from .models import AdminUserDB, Base, ContactSubmissionDB, PortfolioItemDB, SessionDB

__all__ = [
    "DatabaseClient",
    "AdminUserDB",
    "Base",
    "ContactSubmissionDB",
    "PortfolioItemDB",
    "SessionDB",
]
