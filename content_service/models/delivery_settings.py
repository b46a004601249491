from sqlalchemy import Boolean, Column, Integer, Numeric, String

from content_service.models.base import Base, BaseEntity


class DeliverySettings(BaseEntity, Base):
    __tablename__ = "delivery_settings"

    free_delivery_threshold = Column(Numeric(18, 2), nullable=False)
    standard_delivery_charge = Column(Numeric(18, 2), nullable=False)
    express_delivery_charge = Column(Numeric(18, 2), nullable=True)
    estimated_delivery_days = Column(Integer, nullable=False, default=3)
    express_delivery_days = Column(Integer, nullable=True, default=1)
    is_delivery_enabled = Column(Boolean, nullable=False, default=True)
    delivery_note = Column(String(500), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
