from sqlalchemy import Boolean, Column, ForeignKey, LargeBinary, String, Uuid
from sqlalchemy.orm import relationship

from content_service.models.base import Base, BaseEntity, OrderedMixin


class HeroSlide(BaseEntity, OrderedMixin, Base):
    __tablename__ = "hero_slides"
    __soft_delete_cascade__ = ("features",)

    title = Column(String(100), nullable=False)
    subtitle = Column(String(200), nullable=True)
    description = Column(String(500), nullable=True)
    highlight_text = Column(String(50), nullable=True)
    image_data = Column(LargeBinary, nullable=True)
    image_content_type = Column(String(50), nullable=True)
    gradient_start = Column(String(10), nullable=True)
    gradient_middle = Column(String(10), nullable=True)
    gradient_end = Column(String(10), nullable=True)
    cta_text = Column(String(50), nullable=True)
    cta_link = Column(String(200), nullable=True)
    product_id = Column(Uuid, ForeignKey("products.id", ondelete="SET NULL"), nullable=True, index=True)
    is_active = Column(Boolean, default=True, nullable=False)

    product = relationship("Product")
    features = relationship("HeroSlideFeature", back_populates="hero_slide", cascade="all, delete-orphan",
                            order_by="HeroSlideFeature.display_order")


class HeroSlideFeature(BaseEntity, OrderedMixin, Base):
    __tablename__ = "hero_slide_features"

    hero_slide_id = Column(Uuid, ForeignKey("hero_slides.id", ondelete="CASCADE"), nullable=False, index=True)
    feature = Column(String(100), nullable=False)

    hero_slide = relationship("HeroSlide", back_populates="features")
