from sqlalchemy import Boolean, Column, String

from content_service.models.base import Base, BaseEntity

CONTACT_STATUSES = ("new", "read", "replied", "archived")


class ContactSubmission(BaseEntity, Base):
    __tablename__ = "contact_submissions"

    name = Column(String(100), nullable=False)
    email = Column(String(200), nullable=False, index=True)
    phone = Column(String(20), nullable=True)
    inquiry_type = Column(String(50), nullable=False)
    message = Column(String(2000), nullable=False)
    status = Column(String(20), nullable=False, default="new", index=True)
    admin_notes = Column(String(1000), nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
