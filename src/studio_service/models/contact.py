"""
Contact Submission Models

A submission is one lead captured by the public contact form.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import CamelModel, utc_now


class ContactSubmissionCreate(CamelModel):
    """Validated contact form data, before the store assigns identity"""

    bride_name: str
    groom_name: str
    phone: str
    email: str
    wedding_date: str
    location: str
    services: List[str] = Field(default_factory=list)
    additional_info: Optional[str] = None
    attachments: List[str] = Field(default_factory=list)


class ContactSubmission(ContactSubmissionCreate):
    """Stored contact submission"""

    id: int = Field(..., description="Auto-incrementing submission id")
    created_at: datetime = Field(default_factory=utc_now, description="Server-assigned creation time")

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": 12,
                "brideName": "Anna",
                "groomName": "Oleksiy",
                "phone": "380972056022",
                "email": "anna@example.com",
                "weddingDate": "2025-09-01",
                "location": "Kyiv",
                "services": ["Love Story"],
                "additionalInfo": None,
                "attachments": [],
                "createdAt": "2025-06-01T10:30:00Z"
            }
        }
    }
