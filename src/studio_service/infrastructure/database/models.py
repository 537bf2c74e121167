"""
Database Models

SQLAlchemy ORM models for submissions, portfolio items, admin users and sessions.
"""

from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class ContactSubmissionDB(Base):
    """Contact form submission"""

    __tablename__ = "contact_submissions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    bride_name = Column(Text, nullable=False)
    groom_name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    wedding_date = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    services = Column(JSON, nullable=False, default=list)
    additional_info = Column(Text, nullable=True)
    attachments = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)

    def __repr__(self):
        return f"<ContactSubmissionDB(id={self.id}, bride_name='{self.bride_name}')>"


class PortfolioItemDB(Base):
    """Portfolio showcase entry"""

    __tablename__ = "portfolio_items"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(20), nullable=False)
    category = Column(String(100), nullable=False)
    couple = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    video_url = Column(Text, nullable=True)
    thumbnail = Column(Text, nullable=True)
    photos = Column(JSON, nullable=True)
    is_published = Column(Boolean, nullable=False, default=True, index=True)
    order_index = Column(Integer, nullable=False, default=0, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<PortfolioItemDB(id={self.id}, title='{self.title}')>"


class AdminUserDB(Base):
    """Admin panel account"""

    __tablename__ = "admin_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False, unique=True)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<AdminUserDB(id={self.id}, username='{self.username}')>"


class SessionDB(Base):
    """Admin session record (opaque id -> session blob)"""

    __tablename__ = "sessions"

    sid = Column(String(255), primary_key=True)
    sess = Column(JSON, nullable=False)
    expire = Column(DateTime(timezone=True), nullable=False, index=True)
