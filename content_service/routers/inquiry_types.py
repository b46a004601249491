import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from content_service.models.base import get_db
from content_service.models.inquiry_type import InquiryType
from content_service.repositories.content import InquiryTypeRepository
from content_service.schemas.common import ApiResponse, ok
from content_service.schemas.content import InquiryTypeIn, InquiryTypeOut
from content_service.utils.keys import snake_key

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_out(t: InquiryType) -> InquiryTypeOut:
    return InquiryTypeOut(
        id=t.id,
        name=t.name,
        value=t.value,
        displayOrder=t.display_order,
        isActive=t.is_active,
    )


def _get_or_404(repo: InquiryTypeRepository, id: UUID) -> InquiryType:
    inquiry_type = repo.get(id)
    if not inquiry_type:
        raise HTTPException(status_code=404, detail="Inquiry type not found")
    return inquiry_type


def _apply(t: InquiryType, payload: InquiryTypeIn) -> None:
    t.name = payload.name
    t.value = payload.value or snake_key(payload.name)
    t.display_order = payload.displayOrder
    t.is_active = payload.isActive


@router.get("", response_model=ApiResponse[List[InquiryTypeOut]])
def get_inquiry_types(db: Session = Depends(get_db)):
    return ok([_to_out(t) for t in InquiryTypeRepository(db).list()])


@router.get("/active", response_model=ApiResponse[List[InquiryTypeOut]])
def get_active_inquiry_types(db: Session = Depends(get_db)):
    return ok([_to_out(t) for t in InquiryTypeRepository(db).list_active()])


@router.get("/{id}", response_model=ApiResponse[InquiryTypeOut])
def get_inquiry_type(id: UUID, db: Session = Depends(get_db)):
    return ok(_to_out(_get_or_404(InquiryTypeRepository(db), id)))


@router.post("", response_model=ApiResponse[InquiryTypeOut], status_code=status.HTTP_201_CREATED)
def create_inquiry_type(payload: InquiryTypeIn, db: Session = Depends(get_db)):
    repo = InquiryTypeRepository(db)
    inquiry_type = InquiryType()
    _apply(inquiry_type, payload)
    repo.add(inquiry_type)
    repo.save()
    repo.refresh(inquiry_type)
    logger.info("Created inquiry type %s (%s)", inquiry_type.name, inquiry_type.id)
    return ok(_to_out(inquiry_type), "Inquiry type created successfully")


@router.put("/{id}", response_model=ApiResponse[InquiryTypeOut])
def update_inquiry_type(id: UUID, payload: InquiryTypeIn, db: Session = Depends(get_db)):
    repo = InquiryTypeRepository(db)
    inquiry_type = _get_or_404(repo, id)
    _apply(inquiry_type, payload)
    repo.update(inquiry_type)
    repo.save()
    repo.refresh(inquiry_type)
    logger.info("Updated inquiry type %s", id)
    return ok(_to_out(inquiry_type), "Inquiry type updated successfully")


@router.delete("/{id}", response_model=ApiResponse[bool])
def delete_inquiry_type(id: UUID, db: Session = Depends(get_db)):
    repo = InquiryTypeRepository(db)
    inquiry_type = _get_or_404(repo, id)
    repo.delete(inquiry_type)
    repo.save()
    logger.info("Deleted inquiry type %s", id)
    return ok(True, "Inquiry type deleted successfully")
