import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from content_service.models.base import get_db
from content_service.models.company_story import CompanyStoryItem, CompanyStorySection
from content_service.repositories.content import CompanyStoryRepository
from content_service.schemas.common import ApiResponse, ok
from content_service.schemas.content import (
    CompanyStoryItemIn,
    CompanyStoryItemOut,
    CompanyStorySectionIn,
    CompanyStorySectionOut,
)
from content_service.utils.images import apply_image, encode_image
from content_service.utils.keys import snake_key

router = APIRouter()
logger = logging.getLogger(__name__)


def _item_out(i: CompanyStoryItem) -> CompanyStoryItemOut:
    return CompanyStoryItemOut(
        id=i.id,
        title=i.title,
        description=i.description,
        icon=i.icon,
        displayOrder=i.display_order,
    )


def _to_out(s: CompanyStorySection) -> CompanyStorySectionOut:
    return CompanyStorySectionOut(
        id=s.id,
        sectionKey=s.section_key,
        title=s.title,
        subtitle=s.subtitle,
        icon=s.icon,
        imageBase64=encode_image(s.image_data),
        imageContentType=s.image_content_type,
        displayOrder=s.display_order,
        isActive=s.is_active,
        items=[_item_out(i) for i in s.items],
    )


def _get_or_404(repo: CompanyStoryRepository, id: UUID) -> CompanyStorySection:
    section = repo.get(id)
    if not section:
        raise HTTPException(status_code=404, detail="Company story section not found")
    return section


def _item_or_404(repo: CompanyStoryRepository, section: CompanyStorySection, item_id: UUID) -> CompanyStoryItem:
    item = repo.get_item(section, item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Company story item not found")
    return item


def _apply(section: CompanyStorySection, payload: CompanyStorySectionIn) -> None:
    section.title = payload.title
    section.subtitle = payload.subtitle
    section.icon = payload.icon
    section.display_order = payload.displayOrder
    section.is_active = payload.isActive
    apply_image(section, payload.imageBase64, payload.imageContentType)


def _apply_item(item: CompanyStoryItem, payload: CompanyStoryItemIn, default_order: int) -> None:
    item.title = payload.title
    item.description = payload.description
    item.icon = payload.icon
    item.display_order = payload.displayOrder if payload.displayOrder is not None else default_order


@router.get("", response_model=ApiResponse[List[CompanyStorySectionOut]])
def get_company_story(db: Session = Depends(get_db)):
    return ok([_to_out(s) for s in CompanyStoryRepository(db).list()])


@router.get("/active", response_model=ApiResponse[List[CompanyStorySectionOut]])
def get_active_company_story(db: Session = Depends(get_db)):
    return ok([_to_out(s) for s in CompanyStoryRepository(db).list_active()])


@router.get("/key/{section_key}", response_model=ApiResponse[CompanyStorySectionOut])
def get_company_story_by_key(section_key: str, db: Session = Depends(get_db)):
    section = CompanyStoryRepository(db).get_by_key(section_key)
    if not section:
        raise HTTPException(status_code=404, detail="Company story section not found")
    return ok(_to_out(section))


@router.get("/{id}", response_model=ApiResponse[CompanyStorySectionOut])
def get_company_story_section(id: UUID, db: Session = Depends(get_db)):
    return ok(_to_out(_get_or_404(CompanyStoryRepository(db), id)))


@router.post("", response_model=ApiResponse[CompanyStorySectionOut], status_code=status.HTTP_201_CREATED)
def create_company_story_section(payload: CompanyStorySectionIn, db: Session = Depends(get_db)):
    repo = CompanyStoryRepository(db)
    key = payload.sectionKey or snake_key(payload.title) or "section"
    if repo.exists(section_key=key):
        raise HTTPException(status_code=409, detail="Section key already exists")
    section = CompanyStorySection(section_key=key)
    _apply(section, payload)
    for i, item_in in enumerate(payload.items):
        item = CompanyStoryItem()
        _apply_item(item, item_in, i)
        section.items.append(item)
    repo.add(section)
    repo.save()
    logger.info("Created company story section %s (%s)", key, section.id)
    return ok(_to_out(_get_or_404(repo, section.id)), "Company story section created successfully")


@router.put("/{id}", response_model=ApiResponse[CompanyStorySectionOut])
def update_company_story_section(id: UUID, payload: CompanyStorySectionIn, db: Session = Depends(get_db)):
    repo = CompanyStoryRepository(db)
    section = _get_or_404(repo, id)
    if payload.sectionKey and payload.sectionKey != section.section_key:
        if repo.exists(exclude_id=id, section_key=payload.sectionKey):
            raise HTTPException(status_code=409, detail="Section key already exists")
        section.section_key = payload.sectionKey
    _apply(section, payload)
    repo.update(section)
    repo.save()
    logger.info("Updated company story section %s", id)
    return ok(_to_out(_get_or_404(repo, id)), "Company story section updated successfully")


@router.delete("/{id}", response_model=ApiResponse[bool])
def delete_company_story_section(id: UUID, db: Session = Depends(get_db)):
    repo = CompanyStoryRepository(db)
    section = _get_or_404(repo, id)
    repo.delete(section)
    repo.save()
    logger.info("Deleted company story section %s", id)
    return ok(True, "Company story section deleted successfully")


@router.post("/{id}/items", response_model=ApiResponse[CompanyStoryItemOut], status_code=status.HTTP_201_CREATED)
def add_company_story_item(id: UUID, payload: CompanyStoryItemIn, db: Session = Depends(get_db)):
    repo = CompanyStoryRepository(db)
    section = _get_or_404(repo, id)
    item = CompanyStoryItem()
    _apply_item(item, payload, len(section.items))
    section.items.append(item)
    repo.update(section)
    repo.save()
    repo.refresh(item)
    logger.info("Added item %s to company story section %s", item.id, id)
    return ok(_item_out(item), "Company story item added successfully")


@router.put("/{id}/items/{item_id}", response_model=ApiResponse[CompanyStoryItemOut])
def update_company_story_item(id: UUID, item_id: UUID, payload: CompanyStoryItemIn, db: Session = Depends(get_db)):
    repo = CompanyStoryRepository(db)
    section = _get_or_404(repo, id)
    item = _item_or_404(repo, section, item_id)
    _apply_item(item, payload, item.display_order)
    repo.update(item)
    repo.save()
    repo.refresh(item)
    logger.info("Updated company story item %s", item_id)
    return ok(_item_out(item), "Company story item updated successfully")


@router.delete("/{id}/items/{item_id}", response_model=ApiResponse[bool])
def delete_company_story_item(id: UUID, item_id: UUID, db: Session = Depends(get_db)):
    repo = CompanyStoryRepository(db)
    section = _get_or_404(repo, id)
    item = _item_or_404(repo, section, item_id)
    repo.delete(item)
    repo.save()
    logger.info("Deleted company story item %s", item_id)
    return ok(True, "Company story item deleted successfully")
