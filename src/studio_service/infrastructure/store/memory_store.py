"""In-Memory Store Implementation

Single-process store for development and tests. Ids come from monotonic
counters and are never reused.
"""

import itertools
import logging
from typing import Dict, List, Optional, Union

from studio_service.core.errors import NotFoundError
from studio_service.core.security import hash_password, verify_password
from studio_service.infrastructure.store.provider import (
    StudioStore,
    next_timestamp,
    normalize_portfolio_fields,
)
from studio_service.models.admin import AdminUser
from studio_service.models.contact import ContactSubmission, ContactSubmissionCreate
from studio_service.models.portfolio import (
    PortfolioItem,
    PortfolioItemCreate,
    PortfolioItemUpdate,
)

logger = logging.getLogger(__name__)


class MemoryStore(StudioStore):
    """Dict-backed store; no locking, one record touched per mutation."""

    def __init__(self):
        self._portfolio: Dict[int, PortfolioItem] = {}
        self._submissions: Dict[int, ContactSubmission] = {}
        self._admins: Dict[str, AdminUser] = {}
        self._password_hashes: Dict[str, str] = {}

        self._portfolio_ids = itertools.count(1)
        self._submission_ids = itertools.count(1)
        self._admin_ids = itertools.count(1)

    # Portfolio

    async def create_portfolio_item(self, data: PortfolioItemCreate) -> PortfolioItem:
        now = next_timestamp()
        fields = normalize_portfolio_fields(data.model_dump())
        item = PortfolioItem(
            id=next(self._portfolio_ids),
            created_at=now,
            updated_at=now,
            **fields,
        )
        self._portfolio[item.id] = item
        return item

    async def update_portfolio_item(
        self,
        item_id: int,
        changes: Union[PortfolioItemUpdate, dict],
    ) -> PortfolioItem:
        existing = self._portfolio.get(item_id)
        if existing is None:
            raise NotFoundError(f"Portfolio item with id {item_id} not found")

        if isinstance(changes, PortfolioItemUpdate):
            changes = changes.changes()
        changes = normalize_portfolio_fields(dict(changes))
        changes.pop("id", None)
        changes.pop("created_at", None)
        changes["updated_at"] = next_timestamp(existing.updated_at)

        updated = PortfolioItem.model_validate({**existing.model_dump(), **changes})
        # Reassigning an existing key keeps its insertion position
        self._portfolio[item_id] = updated
        return updated

    async def delete_portfolio_item(self, item_id: int) -> None:
        self._portfolio.pop(item_id, None)

    async def get_portfolio_item(self, item_id: int) -> Optional[PortfolioItem]:
        return self._portfolio.get(item_id)

    async def get_portfolio_items(self) -> List[PortfolioItem]:
        # sorted() is stable, so equal order_index keeps insertion order
        return sorted(self._portfolio.values(), key=lambda item: item.order_index)

    async def get_published_portfolio_items(self) -> List[PortfolioItem]:
        return [item for item in await self.get_portfolio_items() if item.is_published]

    # Contact submissions

    async def create_contact_submission(self, data: ContactSubmissionCreate) -> ContactSubmission:
        submission = ContactSubmission(
            id=next(self._submission_ids),
            created_at=next_timestamp(),
            **data.model_dump(),
        )
        self._submissions[submission.id] = submission
        return submission

    async def get_contact_submissions(self) -> List[ContactSubmission]:
        return sorted(
            self._submissions.values(),
            key=lambda s: (s.created_at, s.id),
            reverse=True,
        )

    # Admin users

    async def create_admin_user(
        self,
        username: str,
        email: str,
        password: str,
        is_active: bool = True,
    ) -> AdminUser:
        if username in self._admins:
            raise ValueError(f"Admin username already exists: {username}")
        if any(admin.email == email for admin in self._admins.values()):
            raise ValueError(f"Admin email already exists: {email}")

        now = next_timestamp()
        admin = AdminUser(
            id=next(self._admin_ids),
            username=username,
            email=email,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )
        self._admins[username] = admin
        self._password_hashes[username] = hash_password(password)
        logger.info(f"Created admin user: {username}")
        return admin

    async def get_admin_user(self, username: str) -> Optional[AdminUser]:
        return self._admins.get(username)

    async def verify_admin_password(self, username: str, password: str) -> Optional[AdminUser]:
        admin = self._admins.get(username)
        if admin is None or not admin.is_active:
            return None
        if not verify_password(password, self._password_hashes[username]):
            return None
        return admin

    async def health_check(self) -> bool:
        return True
