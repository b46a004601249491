from sqlalchemy import Boolean, Column, ForeignKey, Index, Integer, LargeBinary, Numeric, String, Text, Uuid, text
from sqlalchemy.orm import relationship

from content_service.models.base import Base, BaseEntity, OrderedMixin


class Product(BaseEntity, OrderedMixin, Base):
    __tablename__ = "products"
    __table_args__ = (
        Index("ux_products_slug", "slug", unique=True,
              postgresql_where=text("NOT is_deleted"), sqlite_where=text("NOT is_deleted")),
    )
    __soft_delete_cascade__ = ("variants", "features", "images")

    name = Column(String(200), nullable=False)
    slug = Column(String(200), nullable=False)
    short_description = Column(String(500), nullable=False, default="")
    full_description = Column(Text, nullable=True)
    unit = Column(String(50), nullable=True)
    base_price = Column(Numeric(18, 2), nullable=False)
    discounted_price = Column(Numeric(18, 2), nullable=True)
    image_data = Column(LargeBinary, nullable=True)
    image_content_type = Column(String(50), nullable=True)
    product_category_id = Column(Uuid, ForeignKey("product_categories.id", ondelete="RESTRICT"), nullable=False, index=True)
    is_available = Column(Boolean, default=True, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    stock_quantity = Column(Integer, default=0, nullable=False)
    season_start = Column(String(20), nullable=True)
    season_end = Column(String(20), nullable=True)
    meta_title = Column(String(100), nullable=True)
    meta_description = Column(String(300), nullable=True)

    category = relationship("ProductCategory", back_populates="products")
    variants = relationship("ProductVariant", back_populates="product", cascade="all, delete-orphan",
                            order_by="ProductVariant.display_order")
    features = relationship("ProductFeature", back_populates="product", cascade="all, delete-orphan",
                            order_by="ProductFeature.display_order")
    images = relationship("ProductImage", back_populates="product", cascade="all, delete-orphan",
                          order_by="ProductImage.display_order")

    @property
    def primary_image(self):
        """First image flagged primary, else the first image, else None."""
        images = list(self.images or [])
        for img in images:
            if img.is_primary:
                return img
        return images[0] if images else None


class ProductVariant(BaseEntity, OrderedMixin, Base):
    __tablename__ = "product_variants"
    __table_args__ = (
        Index("ux_product_variants_sku", "sku", unique=True,
              postgresql_where=text("sku IS NOT NULL AND NOT is_deleted"),
              sqlite_where=text("sku IS NOT NULL AND NOT is_deleted")),
    )

    product_id = Column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    size = Column(String(50), nullable=False)
    unit = Column(String(20), nullable=False)
    price = Column(Numeric(18, 2), nullable=False)
    discounted_price = Column(Numeric(18, 2), nullable=True)
    stock_quantity = Column(Integer, default=100, nullable=False)
    sku = Column(String(50), nullable=True)
    is_available = Column(Boolean, default=True, nullable=False)
    is_in_stock = Column(Boolean, default=True, nullable=False)

    product = relationship("Product", back_populates="variants")


class ProductFeature(BaseEntity, OrderedMixin, Base):
    __tablename__ = "product_features"

    product_id = Column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    feature = Column(String(200), nullable=False)

    product = relationship("Product", back_populates="features")


class ProductImage(BaseEntity, OrderedMixin, Base):
    __tablename__ = "product_images"

    product_id = Column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    image_data = Column(LargeBinary, nullable=True)
    image_content_type = Column(String(50), nullable=True)
    alt_text = Column(String(200), nullable=True)
    is_primary = Column(Boolean, default=False, nullable=False)

    product = relationship("Product", back_populates="images")
