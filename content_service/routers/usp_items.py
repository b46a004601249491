import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from content_service.models.base import get_db
from content_service.models.usp_item import UspItem
from content_service.repositories.content import UspItemRepository
from content_service.schemas.common import ApiResponse, ok
from content_service.schemas.content import UspItemIn, UspItemOut

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_out(u: UspItem) -> UspItemOut:
    return UspItemOut(
        id=u.id,
        title=u.title,
        description=u.description,
        icon=u.icon,
        displayOrder=u.display_order,
        isActive=u.is_active,
    )


def _get_or_404(repo: UspItemRepository, id: UUID) -> UspItem:
    item = repo.get(id)
    if not item:
        raise HTTPException(status_code=404, detail="USP item not found")
    return item


@router.get("", response_model=ApiResponse[List[UspItemOut]])
def get_usp_items(db: Session = Depends(get_db)):
    return ok([_to_out(u) for u in UspItemRepository(db).list()])


@router.get("/active", response_model=ApiResponse[List[UspItemOut]])
def get_active_usp_items(db: Session = Depends(get_db)):
    return ok([_to_out(u) for u in UspItemRepository(db).list_active()])


@router.get("/{id}", response_model=ApiResponse[UspItemOut])
def get_usp_item(id: UUID, db: Session = Depends(get_db)):
    return ok(_to_out(_get_or_404(UspItemRepository(db), id)))


@router.post("", response_model=ApiResponse[UspItemOut], status_code=status.HTTP_201_CREATED)
def create_usp_item(payload: UspItemIn, db: Session = Depends(get_db)):
    repo = UspItemRepository(db)
    item = UspItem(
        title=payload.title,
        description=payload.description,
        icon=payload.icon,
        display_order=payload.displayOrder,
        is_active=payload.isActive,
    )
    repo.add(item)
    repo.save()
    repo.refresh(item)
    logger.info("Created USP item %s (%s)", item.title, item.id)
    return ok(_to_out(item), "USP item created successfully")


@router.put("/{id}", response_model=ApiResponse[UspItemOut])
def update_usp_item(id: UUID, payload: UspItemIn, db: Session = Depends(get_db)):
    repo = UspItemRepository(db)
    item = _get_or_404(repo, id)
    item.title = payload.title
    item.description = payload.description
    item.icon = payload.icon
    item.display_order = payload.displayOrder
    item.is_active = payload.isActive
    repo.update(item)
    repo.save()
    repo.refresh(item)
    logger.info("Updated USP item %s", id)
    return ok(_to_out(item), "USP item updated successfully")


@router.delete("/{id}", response_model=ApiResponse[bool])
def delete_usp_item(id: UUID, db: Session = Depends(get_db)):
    repo = UspItemRepository(db)
    item = _get_or_404(repo, id)
    repo.delete(item)
    repo.save()
    logger.info("Deleted USP item %s", id)
    return ok(True, "USP item deleted successfully")
