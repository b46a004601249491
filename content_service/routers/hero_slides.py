import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from content_service.models.base import get_db
from content_service.models.hero_slide import HeroSlide, HeroSlideFeature
from content_service.repositories.content import HeroSlideRepository
from content_service.repositories.products import ProductRepository
from content_service.schemas.common import ApiResponse, ok
from content_service.schemas.hero_slide import HeroSlideIn, HeroSlideOut
from content_service.utils.images import apply_image, encode_image

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_out(s: HeroSlide) -> HeroSlideOut:
    return HeroSlideOut(
        id=s.id,
        title=s.title,
        subtitle=s.subtitle,
        description=s.description,
        highlightText=s.highlight_text,
        imageBase64=encode_image(s.image_data),
        imageContentType=s.image_content_type,
        gradientStart=s.gradient_start,
        gradientMiddle=s.gradient_middle,
        gradientEnd=s.gradient_end,
        ctaText=s.cta_text,
        ctaLink=s.cta_link,
        productId=s.product_id,
        displayOrder=s.display_order,
        isActive=s.is_active,
        features=[f.feature for f in s.features],
    )


def _get_or_404(repo: HeroSlideRepository, id: UUID) -> HeroSlide:
    slide = repo.get(id)
    if not slide:
        raise HTTPException(status_code=404, detail="Hero slide not found")
    return slide


def _apply(slide: HeroSlide, payload: HeroSlideIn, db: Session) -> None:
    if payload.productId is not None and not ProductRepository(db).get(payload.productId):
        raise HTTPException(status_code=404, detail="Product not found")
    slide.title = payload.title
    slide.subtitle = payload.subtitle
    slide.description = payload.description
    slide.highlight_text = payload.highlightText
    slide.gradient_start = payload.gradientStart
    slide.gradient_middle = payload.gradientMiddle
    slide.gradient_end = payload.gradientEnd
    slide.cta_text = payload.ctaText
    slide.cta_link = payload.ctaLink
    slide.product_id = payload.productId
    slide.display_order = payload.displayOrder
    slide.is_active = payload.isActive
    apply_image(slide, payload.imageBase64, payload.imageContentType)
    if payload.features is not None:
        for old in list(slide.features):
            old.soft_delete()
        for i, f in enumerate(payload.features):
            slide.features.append(HeroSlideFeature(feature=f, display_order=i))


@router.get("", response_model=ApiResponse[List[HeroSlideOut]])
def get_hero_slides(db: Session = Depends(get_db)):
    return ok([_to_out(s) for s in HeroSlideRepository(db).list()])


@router.get("/active", response_model=ApiResponse[List[HeroSlideOut]])
def get_active_hero_slides(db: Session = Depends(get_db)):
    return ok([_to_out(s) for s in HeroSlideRepository(db).list_active()])


@router.get("/{id}", response_model=ApiResponse[HeroSlideOut])
def get_hero_slide(id: UUID, db: Session = Depends(get_db)):
    return ok(_to_out(_get_or_404(HeroSlideRepository(db), id)))


@router.post("", response_model=ApiResponse[HeroSlideOut], status_code=status.HTTP_201_CREATED)
def create_hero_slide(payload: HeroSlideIn, db: Session = Depends(get_db)):
    repo = HeroSlideRepository(db)
    slide = HeroSlide()
    _apply(slide, payload, db)
    repo.add(slide)
    repo.save()
    logger.info("Created hero slide %s (%s)", slide.title, slide.id)
    return ok(_to_out(_get_or_404(repo, slide.id)), "Hero slide created successfully")


@router.put("/{id}", response_model=ApiResponse[HeroSlideOut])
def update_hero_slide(id: UUID, payload: HeroSlideIn, db: Session = Depends(get_db)):
    repo = HeroSlideRepository(db)
    slide = _get_or_404(repo, id)
    _apply(slide, payload, db)
    repo.update(slide)
    repo.save()
    logger.info("Updated hero slide %s", id)
    return ok(_to_out(_get_or_404(repo, id)), "Hero slide updated successfully")


@router.delete("/{id}", response_model=ApiResponse[bool])
def delete_hero_slide(id: UUID, db: Session = Depends(get_db)):
    repo = HeroSlideRepository(db)
    slide = _get_or_404(repo, id)
    repo.delete(slide)
    repo.save()
    logger.info("Deleted hero slide %s", id)
    return ok(True, "Hero slide deleted successfully")
