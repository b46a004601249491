import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from content_service.models.base import get_db
from content_service.models.testimonial import Testimonial
from content_service.repositories.content import TestimonialRepository
from content_service.schemas.common import ApiResponse, ok
from content_service.schemas.testimonial import TestimonialIn, TestimonialOut
from content_service.utils.images import apply_image, encode_image

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_out(t: Testimonial) -> TestimonialOut:
    return TestimonialOut(
        id=t.id,
        customerName=t.customer_name,
        customerTitle=t.customer_title,
        customerLocation=t.customer_location,
        customerImageBase64=encode_image(t.customer_image_data),
        customerImageContentType=t.customer_image_content_type,
        content=t.content,
        rating=t.rating,
        productPurchased=t.product_purchased,
        isApproved=t.is_approved,
        isFeatured=t.is_featured,
        isActive=t.is_active,
        displayOrder=t.display_order,
    )


def _get_or_404(repo: TestimonialRepository, id: UUID) -> Testimonial:
    testimonial = repo.get(id)
    if not testimonial:
        raise HTTPException(status_code=404, detail="Testimonial not found")
    return testimonial


def _apply(t: Testimonial, payload: TestimonialIn) -> None:
    t.customer_name = payload.customerName
    t.customer_title = payload.customerTitle
    t.customer_location = payload.customerLocation
    t.content = payload.content
    t.rating = payload.rating
    t.product_purchased = payload.productPurchased
    t.is_approved = payload.isApproved
    t.is_featured = payload.isFeatured
    t.is_active = payload.isActive
    t.display_order = payload.displayOrder
    apply_image(t, payload.customerImageBase64, payload.customerImageContentType,
                data_attr="customer_image_data", type_attr="customer_image_content_type")


@router.get("", response_model=ApiResponse[List[TestimonialOut]])
def get_testimonials(db: Session = Depends(get_db)):
    return ok([_to_out(t) for t in TestimonialRepository(db).list()])


@router.get("/active", response_model=ApiResponse[List[TestimonialOut]])
def get_active_testimonials(db: Session = Depends(get_db)):
    """Active and approved testimonials for the public site."""
    return ok([_to_out(t) for t in TestimonialRepository(db).list_active()])


@router.get("/featured", response_model=ApiResponse[List[TestimonialOut]])
def get_featured_testimonials(limit: int = Query(6, ge=1, le=50), db: Session = Depends(get_db)):
    return ok([_to_out(t) for t in TestimonialRepository(db).featured(limit)])


@router.get("/{id}", response_model=ApiResponse[TestimonialOut])
def get_testimonial(id: UUID, db: Session = Depends(get_db)):
    return ok(_to_out(_get_or_404(TestimonialRepository(db), id)))


@router.post("", response_model=ApiResponse[TestimonialOut], status_code=status.HTTP_201_CREATED)
def create_testimonial(payload: TestimonialIn, db: Session = Depends(get_db)):
    repo = TestimonialRepository(db)
    testimonial = Testimonial()
    _apply(testimonial, payload)
    repo.add(testimonial)
    repo.save()
    repo.refresh(testimonial)
    logger.info("Created testimonial from %s (%s)", testimonial.customer_name, testimonial.id)
    return ok(_to_out(testimonial), "Testimonial created successfully")


@router.put("/{id}", response_model=ApiResponse[TestimonialOut])
def update_testimonial(id: UUID, payload: TestimonialIn, db: Session = Depends(get_db)):
    repo = TestimonialRepository(db)
    testimonial = _get_or_404(repo, id)
    _apply(testimonial, payload)
    repo.update(testimonial)
    repo.save()
    repo.refresh(testimonial)
    logger.info("Updated testimonial %s", id)
    return ok(_to_out(testimonial), "Testimonial updated successfully")


@router.delete("/{id}", response_model=ApiResponse[bool])
def delete_testimonial(id: UUID, db: Session = Depends(get_db)):
    repo = TestimonialRepository(db)
    testimonial = _get_or_404(repo, id)
    repo.delete(testimonial)
    repo.save()
    logger.info("Deleted testimonial %s", id)
    return ok(True, "Testimonial deleted successfully")
