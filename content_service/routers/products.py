import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from content_service.models.base import get_db
from content_service.models.product import Product, ProductFeature, ProductImage, ProductVariant
from content_service.repositories.products import ProductCategoryRepository, ProductRepository
from content_service.schemas.common import ApiResponse, PagedResponse, ok, paged
from content_service.schemas.product import (
    ProductCreate,
    ProductImageOut,
    ProductOut,
    ProductUpdate,
    VariantIn,
    VariantOut,
)
from content_service.utils.images import apply_image, encode_image
from content_service.utils.money import to_decimal, to_float

router = APIRouter()
logger = logging.getLogger(__name__)


# Helpers

def to_variant_out(v: ProductVariant) -> VariantOut:
    return VariantOut(
        id=v.id,
        size=v.size,
        unit=v.unit,
        price=to_float(v.price),
        discountedPrice=to_float(v.discounted_price),
        stockQuantity=v.stock_quantity,
        sku=v.sku,
        isAvailable=v.is_available,
        isInStock=v.is_in_stock,
        displayOrder=v.display_order,
    )


def to_product_out(p: Product) -> ProductOut:
    primary = p.primary_image
    return ProductOut(
        id=p.id,
        name=p.name,
        slug=p.slug,
        shortDescription=p.short_description or "",
        fullDescription=p.full_description,
        productCategoryId=p.product_category_id,
        productCategoryName=p.category.name if p.category else None,
        productCategorySlug=p.category.slug if p.category else None,
        unit=p.unit,
        basePrice=to_float(p.base_price),
        discountedPrice=to_float(p.discounted_price),
        stockQuantity=p.stock_quantity,
        isFeatured=p.is_featured,
        isAvailable=p.is_available,
        displayOrder=p.display_order,
        seasonStart=p.season_start,
        seasonEnd=p.season_end,
        metaTitle=p.meta_title,
        metaDescription=p.meta_description,
        imageBase64=encode_image(p.image_data),
        imageContentType=p.image_content_type,
        primaryImageBase64=encode_image(primary.image_data) if primary else None,
        primaryImageContentType=primary.image_content_type if primary else None,
        variants=[to_variant_out(v) for v in p.variants],
        features=[f.feature for f in p.features],
        images=[
            ProductImageOut(
                id=i.id,
                imageBase64=encode_image(i.image_data),
                imageContentType=i.image_content_type,
                altText=i.alt_text,
                isPrimary=i.is_primary,
                displayOrder=i.display_order,
            )
            for i in p.images
        ],
        createdAt=p.created_at,
        updatedAt=p.updated_at,
    )


def _get_or_404(repo: ProductRepository, id: UUID) -> Product:
    product = repo.get_with_details(id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


def _apply_scalars(product: Product, payload: ProductUpdate, db: Session) -> None:
    if not ProductCategoryRepository(db).get(payload.productCategoryId):
        raise HTTPException(status_code=404, detail="Product category not found")
    product.name = payload.name
    product.slug = payload.slug
    product.short_description = payload.shortDescription
    product.full_description = payload.fullDescription
    product.product_category_id = payload.productCategoryId
    product.unit = payload.unit
    product.base_price = to_decimal(payload.basePrice)
    product.discounted_price = to_decimal(payload.discountedPrice)
    product.stock_quantity = payload.stockQuantity
    product.is_featured = payload.isFeatured
    product.is_available = payload.isAvailable
    product.display_order = payload.displayOrder
    product.season_start = payload.seasonStart
    product.season_end = payload.seasonEnd
    product.meta_title = payload.metaTitle
    product.meta_description = payload.metaDescription
    apply_image(product, payload.imageBase64, payload.imageContentType)


def _apply_variant(variant: ProductVariant, payload: VariantIn) -> None:
    variant.size = payload.size
    variant.unit = payload.unit
    variant.price = to_decimal(payload.price)
    variant.discounted_price = to_decimal(payload.discountedPrice)
    variant.stock_quantity = payload.stockQuantity
    variant.sku = payload.sku or None
    variant.is_available = payload.isAvailable
    variant.is_in_stock = payload.isInStock
    variant.display_order = payload.displayOrder


def _build_images(payload: ProductCreate) -> List[ProductImage]:
    images = []
    for i, img in enumerate(payload.images):
        image = ProductImage(alt_text=img.altText, display_order=i, is_primary=bool(img.isPrimary))
        apply_image(image, img.imageBase64, img.imageContentType)
        images.append(image)
    # First image is primary unless the caller flagged another one
    if images and not any(img.is_primary for img in images):
        images[0].is_primary = True
    return images


@router.get("", response_model=PagedResponse[ProductOut])
def get_products(
    page: int = Query(1, ge=1),
    pageSize: int = Query(20, ge=1, le=100),
    category: Optional[str] = None,
    featured: Optional[bool] = None,
    db: Session = Depends(get_db),
):
    """Paged product list, optionally narrowed to a category slug and/or the featured flag."""
    items, total = ProductRepository(db).paged(page, pageSize, category_slug=category, featured=featured)
    return paged([to_product_out(p) for p in items], page, pageSize, total)


@router.get("/featured", response_model=ApiResponse[List[ProductOut]])
def get_featured_products(limit: int = Query(6, ge=1, le=50), db: Session = Depends(get_db)):
    return ok([to_product_out(p) for p in ProductRepository(db).featured(limit)])


@router.get("/slug/{slug}", response_model=ApiResponse[ProductOut])
def get_product_by_slug(slug: str, db: Session = Depends(get_db)):
    product = ProductRepository(db).get_by_slug(slug)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return ok(to_product_out(product))


@router.get("/category/{slug}", response_model=ApiResponse[List[ProductOut]])
def get_products_by_category(slug: str, db: Session = Depends(get_db)):
    return ok([to_product_out(p) for p in ProductRepository(db).by_category_slug(slug)])


@router.get("/{id}", response_model=ApiResponse[ProductOut])
def get_product(id: UUID, db: Session = Depends(get_db)):
    return ok(to_product_out(_get_or_404(ProductRepository(db), id)))


@router.post("", response_model=ApiResponse[ProductOut], status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    if repo.slug_exists(payload.slug):
        raise HTTPException(status_code=409, detail="Slug already exists")
    for v in payload.variants:
        if v.sku and repo.sku_exists(v.sku):
            raise HTTPException(status_code=409, detail=f"SKU {v.sku} already exists")

    product = Product()
    _apply_scalars(product, payload, db)
    for v in payload.variants:
        variant = ProductVariant()
        _apply_variant(variant, v)
        product.variants.append(variant)
    product.features = [ProductFeature(feature=f, display_order=i) for i, f in enumerate(payload.features)]
    product.images = _build_images(payload)

    repo.add(product)
    repo.save()
    logger.info("Created product %s (%s)", product.name, product.id)
    return ok(to_product_out(_get_or_404(repo, product.id)), "Product created successfully")


@router.put("/{id}", response_model=ApiResponse[ProductOut])
def update_product(id: UUID, payload: ProductUpdate, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    product = _get_or_404(repo, id)
    if repo.slug_exists(payload.slug, exclude_id=id):
        raise HTTPException(status_code=409, detail="Slug already exists")
    _apply_scalars(product, payload, db)
    repo.update(product)
    repo.save()
    logger.info("Updated product %s", id)
    return ok(to_product_out(_get_or_404(repo, id)), "Product updated successfully")


@router.delete("/{id}", response_model=ApiResponse[bool])
def delete_product(id: UUID, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    product = _get_or_404(repo, id)
    repo.delete(product)
    repo.save()
    logger.info("Deleted product %s", id)
    return ok(True, "Product deleted successfully")


# Variants

@router.post("/{id}/variants", response_model=ApiResponse[VariantOut], status_code=status.HTTP_201_CREATED)
def add_variant(id: UUID, payload: VariantIn, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    product = _get_or_404(repo, id)
    if payload.sku and repo.sku_exists(payload.sku):
        raise HTTPException(status_code=409, detail=f"SKU {payload.sku} already exists")
    variant = ProductVariant()
    _apply_variant(variant, payload)
    product.variants.append(variant)
    repo.save()
    repo.refresh(variant)
    logger.info("Added variant %s to product %s", variant.id, id)
    return ok(to_variant_out(variant), "Variant added successfully")


def _variant_or_404(product: Product, variant_id: UUID) -> ProductVariant:
    variant = next((v for v in product.variants if v.id == variant_id), None)
    if not variant:
        raise HTTPException(status_code=404, detail="Variant not found")
    return variant


@router.put("/{id}/variants/{variantId}", response_model=ApiResponse[VariantOut])
def update_variant(id: UUID, variantId: UUID, payload: VariantIn, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    variant = _variant_or_404(_get_or_404(repo, id), variantId)
    if payload.sku and repo.sku_exists(payload.sku, exclude_id=variantId):
        raise HTTPException(status_code=409, detail=f"SKU {payload.sku} already exists")
    _apply_variant(variant, payload)
    repo.update(variant)
    repo.save()
    repo.refresh(variant)
    logger.info("Updated variant %s for product %s", variantId, id)
    return ok(to_variant_out(variant), "Variant updated successfully")


@router.delete("/{id}/variants/{variantId}", response_model=ApiResponse[bool])
def delete_variant(id: UUID, variantId: UUID, db: Session = Depends(get_db)):
    repo = ProductRepository(db)
    variant = _variant_or_404(_get_or_404(repo, id), variantId)
    repo.delete(variant)
    repo.save()
    logger.info("Deleted variant %s from product %s", variantId, id)
    return ok(True, "Variant deleted successfully")
