"""Studio Store Interface

Abstract base class for the single source of truth for portfolio items,
contact submissions and admin users. Implemented in memory (development,
tests) and on SQLAlchemy (persistent deployments).
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import List, Optional, Union

from studio_service.models.admin import AdminUser
from studio_service.models.base import utc_now
from studio_service.models.contact import ContactSubmission, ContactSubmissionCreate
from studio_service.models.portfolio import (
    PortfolioItem,
    PortfolioItemCreate,
    PortfolioItemUpdate,
)


def next_timestamp(previous: Optional[datetime] = None) -> datetime:
    """Current UTC time, strictly later than previous when given"""
    now = utc_now()
    if previous is not None:
        if previous.tzinfo is None:
            previous = previous.replace(tzinfo=now.tzinfo)
        if now <= previous:
            now = previous + timedelta(microseconds=1)
    return now


def normalize_portfolio_fields(fields: dict) -> dict:
    """Empty optional URLs are stored as null"""
    for key in ("video_url", "thumbnail"):
        if key in fields and fields[key] == "":
            fields[key] = None
    return fields


class StudioStore(ABC):
    """Abstract store for portfolio items, contact submissions and admin users."""

    # Portfolio

    @abstractmethod
    async def create_portfolio_item(self, data: PortfolioItemCreate) -> PortfolioItem:
        """Store a new item with a fresh id, timestamps and defaults applied."""

    @abstractmethod
    async def update_portfolio_item(
        self,
        item_id: int,
        changes: Union[PortfolioItemUpdate, dict],
    ) -> PortfolioItem:
        """Merge provided fields onto an existing item and refresh updated_at.

        Raises:
            NotFoundError: If no item has this id
        """

    @abstractmethod
    async def delete_portfolio_item(self, item_id: int) -> None:
        """Remove an item; unknown ids are ignored."""

    @abstractmethod
    async def get_portfolio_item(self, item_id: int) -> Optional[PortfolioItem]:
        pass

    @abstractmethod
    async def get_portfolio_items(self) -> List[PortfolioItem]:
        """All items by order_index ascending, ties in insertion order."""

    @abstractmethod
    async def get_published_portfolio_items(self) -> List[PortfolioItem]:
        """Published items, same ordering as get_portfolio_items."""

    # Contact submissions

    @abstractmethod
    async def create_contact_submission(self, data: ContactSubmissionCreate) -> ContactSubmission:
        """Store a submission with a fresh id and created_at."""

    @abstractmethod
    async def get_contact_submissions(self) -> List[ContactSubmission]:
        """All submissions, newest first."""

    # Admin users

    @abstractmethod
    async def create_admin_user(
        self,
        username: str,
        email: str,
        password: str,
        is_active: bool = True,
    ) -> AdminUser:
        """Create an admin account; the password is hashed before it is stored.

        Raises:
            ValueError: If the username or email is already taken
        """

    @abstractmethod
    async def get_admin_user(self, username: str) -> Optional[AdminUser]:
        pass

    @abstractmethod
    async def verify_admin_password(self, username: str, password: str) -> Optional[AdminUser]:
        """Return the admin when it exists, is active and the password matches.

        A mismatch is a normal None result, never an exception.
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable."""

    async def close(self) -> None:
        """Release resources held by the store."""
