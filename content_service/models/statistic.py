from sqlalchemy import Boolean, Column, String

from content_service.models.base import Base, BaseEntity, OrderedMixin


class Statistic(BaseEntity, OrderedMixin, Base):
    __tablename__ = "statistics"

    label = Column(String(100), nullable=False)
    value = Column(String(50), nullable=False)
    suffix = Column(String(20), nullable=True)
    icon = Column(String(50), nullable=True)
    section = Column(String(50), nullable=False, default="home", index=True)
    is_active = Column(Boolean, default=True, nullable=False)
