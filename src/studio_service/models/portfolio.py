"""
Portfolio Models

Video and photo showcase entries managed from the admin panel.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from .base import CamelModel


class PortfolioType(str, Enum):
    """Portfolio entry kind"""
    VIDEO = "video"
    PHOTO = "photo"


class PortfolioItemCreate(CamelModel):
    """Admin input for a new portfolio item"""

    type: PortfolioType
    category: str = Field(..., min_length=1, max_length=100)
    couple: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    video_url: Optional[str] = Field(None, description="Embed URL for video items")
    thumbnail: Optional[str] = None
    photos: Optional[List[str]] = Field(None, description="Photo URLs for photo items")
    is_published: bool = True
    order_index: int = 0


class PortfolioItemUpdate(CamelModel):
    """Partial admin update; only the fields sent are applied"""

    type: Optional[PortfolioType] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    couple: Optional[str] = Field(None, min_length=1, max_length=255)
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    video_url: Optional[str] = None
    thumbnail: Optional[str] = None
    photos: Optional[List[str]] = None
    is_published: Optional[bool] = None
    order_index: Optional[int] = None

    @field_validator(
        "type", "category", "couple", "title", "description", "is_published", "order_index",
        mode="before",
    )
    @classmethod
    def reject_null(cls, value):
        # Defaults are not validated, so this only fires for explicit nulls
        if value is None:
            raise ValueError("must not be null")
        return value

    def changes(self) -> dict:
        """Fields explicitly provided by the client"""
        return self.model_dump(exclude_unset=True)


class PortfolioItem(CamelModel):
    """Stored portfolio item"""

    id: int
    type: PortfolioType
    category: str
    couple: str
    title: str
    description: str
    video_url: Optional[str] = None
    thumbnail: Optional[str] = None
    photos: Optional[List[str]] = None
    is_published: bool = True
    order_index: int = 0
    created_at: datetime
    updated_at: datetime
