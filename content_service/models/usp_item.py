from sqlalchemy import Boolean, Column, String

from content_service.models.base import Base, BaseEntity, OrderedMixin


class UspItem(BaseEntity, OrderedMixin, Base):
    __tablename__ = "usp_items"

    title = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False)
    icon = Column(String(50), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
