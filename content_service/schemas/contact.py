from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from content_service.models.contact_submission import CONTACT_STATUSES
from content_service.schemas.common import PHONE_PATTERN


class ContactSubmissionIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, pattern=PHONE_PATTERN)
    inquiryType: str = Field(..., min_length=1, max_length=50)
    message: str = Field(..., min_length=1, max_length=2000)


class ContactStatusUpdate(BaseModel):
    status: str
    adminNotes: Optional[str] = Field(None, max_length=1000)

    @field_validator("status")
    @classmethod
    def _known_status(cls, v: str) -> str:
        v = (v or "").strip().lower()
        if v not in CONTACT_STATUSES:
            raise ValueError(f"Status must be one of: {', '.join(CONTACT_STATUSES)}")
        return v


class ContactSubmissionOut(BaseModel):
    id: UUID
    name: str
    email: str
    phone: Optional[str] = None
    inquiryType: str
    message: str
    status: str
    adminNotes: Optional[str] = None
    isRead: bool
    createdAt: datetime
    updatedAt: datetime
