from sqlalchemy import Boolean, Column, ForeignKey, Index, LargeBinary, String, Uuid, text
from sqlalchemy.orm import relationship

from content_service.models.base import Base, BaseEntity, OrderedMixin


class ProductCategory(BaseEntity, OrderedMixin, Base):
    __tablename__ = "product_categories"
    __table_args__ = (
        Index("ux_product_categories_slug", "slug", unique=True,
              postgresql_where=text("NOT is_deleted"), sqlite_where=text("NOT is_deleted")),
    )

    name = Column(String(100), nullable=False)
    slug = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    icon = Column(String(50), nullable=True)
    image_data = Column(LargeBinary, nullable=True)
    image_content_type = Column(String(50), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    parent_id = Column(Uuid, ForeignKey("product_categories.id", ondelete="RESTRICT"), nullable=True)

    parent = relationship("ProductCategory", remote_side="ProductCategory.id", back_populates="children")
    children = relationship("ProductCategory", back_populates="parent")
    products = relationship("Product", back_populates="category", order_by="Product.display_order")
