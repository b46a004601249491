from sqlalchemy import Boolean, CheckConstraint, Column, Integer, LargeBinary, String

from content_service.models.base import Base, BaseEntity, OrderedMixin


class Testimonial(BaseEntity, OrderedMixin, Base):
    __tablename__ = "testimonials"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_testimonials_rating"),
    )

    customer_name = Column(String(100), nullable=False)
    customer_title = Column(String(100), nullable=True)
    customer_location = Column(String(100), nullable=True)
    customer_image_data = Column(LargeBinary, nullable=True)
    customer_image_content_type = Column(String(50), nullable=True)
    content = Column(String(1000), nullable=False)
    rating = Column(Integer, default=5, nullable=False)
    product_purchased = Column(String(200), nullable=True)
    # Unapproved testimonials never reach the public endpoints
    is_approved = Column(Boolean, default=False, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
