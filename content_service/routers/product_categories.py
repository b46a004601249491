import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from content_service.models.base import get_db
from content_service.models.product_category import ProductCategory
from content_service.repositories.products import ProductCategoryRepository
from content_service.schemas.common import ApiResponse, ok
from content_service.schemas.product_category import ProductCategoryIn, ProductCategoryOut
from content_service.utils.images import apply_image, encode_image

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_out(c: ProductCategory) -> ProductCategoryOut:
    return ProductCategoryOut(
        id=c.id,
        name=c.name,
        slug=c.slug,
        description=c.description,
        icon=c.icon,
        imageBase64=encode_image(c.image_data),
        imageContentType=c.image_content_type,
        displayOrder=c.display_order,
        isActive=c.is_active,
        parentId=c.parent_id,
        productCount=len(c.products or []),
        createdAt=c.created_at,
        updatedAt=c.updated_at,
    )


def _get_or_404(repo: ProductCategoryRepository, id: UUID) -> ProductCategory:
    category = repo.get(id)
    if not category:
        raise HTTPException(status_code=404, detail="Product category not found")
    return category


def _apply(category: ProductCategory, payload: ProductCategoryIn, repo: ProductCategoryRepository) -> None:
    if payload.parentId is not None:
        if payload.parentId == category.id:
            raise HTTPException(status_code=400, detail="A category cannot be its own parent")
        _get_or_404(repo, payload.parentId)
    category.name = payload.name
    category.slug = payload.slug
    category.description = payload.description
    category.icon = payload.icon
    category.display_order = payload.displayOrder
    category.is_active = payload.isActive
    category.parent_id = payload.parentId
    apply_image(category, payload.imageBase64, payload.imageContentType)


@router.get("", response_model=ApiResponse[List[ProductCategoryOut]])
def get_categories(db: Session = Depends(get_db)):
    repo = ProductCategoryRepository(db)
    return ok([_to_out(c) for c in repo.list()])


@router.get("/active", response_model=ApiResponse[List[ProductCategoryOut]])
def get_active_categories(db: Session = Depends(get_db)):
    repo = ProductCategoryRepository(db)
    return ok([_to_out(c) for c in repo.list_active()])


@router.get("/slug/{slug}", response_model=ApiResponse[ProductCategoryOut])
def get_category_by_slug(slug: str, db: Session = Depends(get_db)):
    category = ProductCategoryRepository(db).get_by_slug(slug)
    if not category:
        raise HTTPException(status_code=404, detail="Product category not found")
    return ok(_to_out(category))


@router.get("/{id}", response_model=ApiResponse[ProductCategoryOut])
def get_category(id: UUID, db: Session = Depends(get_db)):
    return ok(_to_out(_get_or_404(ProductCategoryRepository(db), id)))


@router.post("", response_model=ApiResponse[ProductCategoryOut], status_code=status.HTTP_201_CREATED)
def create_category(payload: ProductCategoryIn, db: Session = Depends(get_db)):
    repo = ProductCategoryRepository(db)
    if repo.slug_exists(payload.slug):
        raise HTTPException(status_code=409, detail="Slug already exists")
    category = ProductCategory()
    _apply(category, payload, repo)
    repo.add(category)
    repo.save()
    repo.refresh(category)
    logger.info("Created product category %s (%s)", category.name, category.id)
    return ok(_to_out(category), "Product category created successfully")


@router.put("/{id}", response_model=ApiResponse[ProductCategoryOut])
def update_category(id: UUID, payload: ProductCategoryIn, db: Session = Depends(get_db)):
    repo = ProductCategoryRepository(db)
    category = _get_or_404(repo, id)
    if repo.slug_exists(payload.slug, exclude_id=id):
        raise HTTPException(status_code=409, detail="Slug already exists")
    _apply(category, payload, repo)
    repo.update(category)
    repo.save()
    repo.refresh(category)
    logger.info("Updated product category %s", id)
    return ok(_to_out(category), "Product category updated successfully")


@router.delete("/{id}", response_model=ApiResponse[bool])
def delete_category(id: UUID, db: Session = Depends(get_db)):
    repo = ProductCategoryRepository(db)
    category = _get_or_404(repo, id)
    if repo.has_products(id):
        raise HTTPException(status_code=409, detail="Product category still has products")
    repo.delete(category)
    repo.save()
    logger.info("Deleted product category %s", id)
    return ok(True, "Product category deleted successfully")
