from sqlalchemy import Boolean, Column, String

from content_service.models.base import Base, BaseEntity, OrderedMixin


class InquiryType(BaseEntity, OrderedMixin, Base):
    __tablename__ = "inquiry_types"

    name = Column(String(100), nullable=False)
    value = Column(String(50), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
