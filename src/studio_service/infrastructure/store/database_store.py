"""SQLAlchemy Store Implementation

Persistent store on the async database client. Each operation runs in its
own session, so every create/update/delete is an atomic single-row change.
"""

import logging
from contextlib import asynccontextmanager
from datetime import timezone
from typing import AsyncIterator, List, Optional, Union

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from studio_service.core.errors import NotFoundError, StoreError
from studio_service.core.security import hash_password, verify_password
from studio_service.infrastructure.database.client import DatabaseClient
from studio_service.infrastructure.database.models import (
    AdminUserDB,
    ContactSubmissionDB,
    PortfolioItemDB,
)
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
    PortfolioType,
)

logger = logging.getLogger(__name__)

PORTFOLIO_COLUMNS = (
    "type", "category", "couple", "title", "description", "video_url",
    "thumbnail", "photos", "is_published", "order_index",
)


def _aware(value):
    # SQLite hands back naive datetimes; everything is stored as UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_portfolio_item(row: PortfolioItemDB) -> PortfolioItem:
    return PortfolioItem(
        id=row.id,
        type=PortfolioType(row.type),
        category=row.category,
        couple=row.couple,
        title=row.title,
        description=row.description,
        video_url=row.video_url,
        thumbnail=row.thumbnail,
        photos=row.photos,
        is_published=row.is_published,
        order_index=row.order_index,
        created_at=_aware(row.created_at),
        updated_at=_aware(row.updated_at),
    )


def _to_submission(row: ContactSubmissionDB) -> ContactSubmission:
    return ContactSubmission(
        id=row.id,
        bride_name=row.bride_name,
        groom_name=row.groom_name,
        phone=row.phone,
        email=row.email,
        wedding_date=row.wedding_date,
        location=row.location,
        services=row.services or [],
        additional_info=row.additional_info,
        attachments=row.attachments or [],
        created_at=_aware(row.created_at),
    )


def _to_admin(row: AdminUserDB) -> AdminUser:
    return AdminUser(
        id=row.id,
        username=row.username,
        email=row.email,
        is_active=row.is_active,
        created_at=_aware(row.created_at),
        updated_at=_aware(row.updated_at),
    )


class DatabaseStore(StudioStore):
    """Store backed by SQLAlchemy async sessions."""

    def __init__(self, db_client: DatabaseClient):
        self.db = db_client

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self.db.session() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Database operation failed: {type(e).__name__}: {e}")
            raise StoreError("Database operation failed") from e

    # Portfolio

    async def create_portfolio_item(self, data: PortfolioItemCreate) -> PortfolioItem:
        now = next_timestamp()
        fields = normalize_portfolio_fields(data.model_dump())
        fields["type"] = data.type.value
        row = PortfolioItemDB(created_at=now, updated_at=now, **fields)

        async with self._session() as session:
            session.add(row)
            await session.flush()
            item = _to_portfolio_item(row)

        logger.info(f"Created portfolio item: {item.id}")
        return item

    async def update_portfolio_item(
        self,
        item_id: int,
        changes: Union[PortfolioItemUpdate, dict],
    ) -> PortfolioItem:
        if isinstance(changes, PortfolioItemUpdate):
            changes = changes.changes()
        changes = normalize_portfolio_fields(dict(changes))

        async with self._session() as session:
            row = await session.get(PortfolioItemDB, item_id)
            if row is None:
                raise NotFoundError(f"Portfolio item with id {item_id} not found")

            for key, value in changes.items():
                if key not in PORTFOLIO_COLUMNS:
                    continue
                if isinstance(value, PortfolioType):
                    value = value.value
                setattr(row, key, value)
            row.updated_at = next_timestamp(_aware(row.updated_at))
            await session.flush()
            item = _to_portfolio_item(row)

        logger.info(f"Updated portfolio item: {item_id}")
        return item

    async def delete_portfolio_item(self, item_id: int) -> None:
        async with self._session() as session:
            row = await session.get(PortfolioItemDB, item_id)
            if row is not None:
                await session.delete(row)
                logger.info(f"Deleted portfolio item: {item_id}")

    async def get_portfolio_item(self, item_id: int) -> Optional[PortfolioItem]:
        async with self._session() as session:
            row = await session.get(PortfolioItemDB, item_id)
            return _to_portfolio_item(row) if row else None

    async def _list_portfolio(self, published_only: bool) -> List[PortfolioItem]:
        stmt = select(PortfolioItemDB).order_by(PortfolioItemDB.order_index, PortfolioItemDB.id)
        if published_only:
            stmt = stmt.where(PortfolioItemDB.is_published.is_(True))

        async with self._session() as session:
            result = await session.execute(stmt)
            return [_to_portfolio_item(row) for row in result.scalars().all()]

    async def get_portfolio_items(self) -> List[PortfolioItem]:
        return await self._list_portfolio(published_only=False)

    async def get_published_portfolio_items(self) -> List[PortfolioItem]:
        return await self._list_portfolio(published_only=True)

    # Contact submissions

    async def create_contact_submission(self, data: ContactSubmissionCreate) -> ContactSubmission:
        row = ContactSubmissionDB(created_at=next_timestamp(), **data.model_dump())

        async with self._session() as session:
            session.add(row)
            await session.flush()
            submission = _to_submission(row)

        logger.info(f"Created contact submission: {submission.id}")
        return submission

    async def get_contact_submissions(self) -> List[ContactSubmission]:
        stmt = select(ContactSubmissionDB).order_by(
            ContactSubmissionDB.created_at.desc(),
            ContactSubmissionDB.id.desc(),
        )
        async with self._session() as session:
            result = await session.execute(stmt)
            return [_to_submission(row) for row in result.scalars().all()]

    # Admin users

    async def create_admin_user(
        self,
        username: str,
        email: str,
        password: str,
        is_active: bool = True,
    ) -> AdminUser:
        now = next_timestamp()
        try:
            async with self.db.session() as session:
                existing = await session.execute(
                    select(AdminUserDB.id).where(
                        or_(AdminUserDB.username == username, AdminUserDB.email == email)
                    )
                )
                if existing.first() is not None:
                    raise ValueError(f"Admin username or email already exists: {username}")

                row = AdminUserDB(
                    username=username,
                    email=email,
                    password_hash=hash_password(password),
                    is_active=is_active,
                    created_at=now,
                    updated_at=now,
                )
                session.add(row)
                await session.flush()
                admin = _to_admin(row)
        except IntegrityError as e:
            raise ValueError(f"Admin username or email already exists: {username}") from e
        except SQLAlchemyError as e:
            raise StoreError("Database operation failed") from e

        logger.info(f"Created admin user: {username}")
        return admin

    async def get_admin_user(self, username: str) -> Optional[AdminUser]:
        async with self._session() as session:
            result = await session.execute(select(AdminUserDB).where(AdminUserDB.username == username))
            row = result.scalar_one_or_none()
            return _to_admin(row) if row else None

    async def verify_admin_password(self, username: str, password: str) -> Optional[AdminUser]:
        async with self._session() as session:
            result = await session.execute(select(AdminUserDB).where(AdminUserDB.username == username))
            row = result.scalar_one_or_none()
            if row is None or not row.is_active:
                return None
            if not verify_password(password, row.password_hash):
                return None
            return _to_admin(row)

    async def health_check(self) -> bool:
        return await self.db.health_check()

    async def close(self) -> None:
        await self.db.close()
