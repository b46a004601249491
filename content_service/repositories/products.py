from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.orm import selectinload

from content_service.models.hero_slide import HeroSlide
from content_service.models.product import Product, ProductVariant
from content_service.models.product_category import ProductCategory
from content_service.repositories.base import Repository


class ProductCategoryRepository(Repository[ProductCategory]):
    model = ProductCategory

    def get_by_slug(self, slug: str) -> Optional[ProductCategory]:
        return self.query().options(selectinload(ProductCategory.products)).filter(ProductCategory.slug == slug).first()

    def slug_exists(self, slug: str, exclude_id: Optional[UUID] = None) -> bool:
        return self.exists(exclude_id=exclude_id, slug=slug)

    def has_products(self, category_id: UUID) -> bool:
        return self.db.query(Product.id).filter(Product.product_category_id == category_id).first() is not None


class ProductRepository(Repository[Product]):
    model = Product

    def _detailed(self):
        return self.query().options(
            selectinload(Product.category),
            selectinload(Product.variants),
            selectinload(Product.features),
            selectinload(Product.images),
        )

    def get_with_details(self, id: UUID) -> Optional[Product]:
        return self._detailed().filter(Product.id == id).first()

    def get_by_slug(self, slug: str) -> Optional[Product]:
        return self._detailed().filter(Product.slug == slug).first()

    def slug_exists(self, slug: str, exclude_id: Optional[UUID] = None) -> bool:
        return self.exists(exclude_id=exclude_id, slug=slug)

    def sku_exists(self, sku: str, exclude_id: Optional[UUID] = None) -> bool:
        q = self.db.query(ProductVariant.id).filter(ProductVariant.sku == sku)
        if exclude_id is not None:
            q = q.filter(ProductVariant.id != exclude_id)
        return q.first() is not None

    def paged(self, page: int, page_size: int, category_slug: Optional[str] = None,
              featured: Optional[bool] = None) -> Tuple[List[Product], int]:
        q = self._detailed()
        if category_slug:
            q = q.join(Product.category).filter(ProductCategory.slug == category_slug)
        if featured is not None:
            q = q.filter(Product.is_featured.is_(featured))
        q = q.order_by(Product.display_order, Product.name)
        return self.paginate(q, page, page_size)

    def featured(self, limit: int) -> List[Product]:
        return (
            self._detailed()
            .filter(Product.is_featured.is_(True), Product.is_available.is_(True))
            .order_by(Product.display_order)
            .limit(limit)
            .all()
        )

    def by_category_slug(self, slug: str) -> List[Product]:
        return (
            self._detailed()
            .join(Product.category)
            .filter(ProductCategory.slug == slug)
            .order_by(Product.display_order)
            .all()
        )

    def delete(self, obj: Product) -> None:
        # Slides keep working without their product link
        for slide in self.db.query(HeroSlide).filter(HeroSlide.product_id == obj.id).all():
            slide.product_id = None
        super().delete(obj)
