import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from content_service.models.base import get_db
from content_service.models.content_block import ContentBlock
from content_service.repositories.content import ContentBlockRepository
from content_service.schemas.common import ApiResponse, ok
from content_service.schemas.content import ContentBlockIn, ContentBlockOut

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_out(b: ContentBlock) -> ContentBlockOut:
    return ContentBlockOut(
        id=b.id,
        blockKey=b.block_key,
        page=b.page,
        section=b.section,
        title=b.title,
        subtitle=b.subtitle,
        content=b.content,
        contentType=b.content_type,
        metadata=b.block_metadata,
        displayOrder=b.display_order,
        isActive=b.is_active,
    )


def _get_or_404(repo: ContentBlockRepository, id: UUID) -> ContentBlock:
    block = repo.get(id)
    if not block:
        raise HTTPException(status_code=404, detail="Content block not found")
    return block


def _apply(b: ContentBlock, payload: ContentBlockIn) -> None:
    b.block_key = payload.blockKey
    b.page = payload.page
    b.section = payload.section
    b.title = payload.title
    b.subtitle = payload.subtitle
    b.content = payload.content
    b.content_type = payload.contentType
    b.block_metadata = payload.metadata
    b.display_order = payload.displayOrder
    b.is_active = payload.isActive


@router.get("", response_model=ApiResponse[List[ContentBlockOut]])
def get_content_blocks(db: Session = Depends(get_db)):
    return ok([_to_out(b) for b in ContentBlockRepository(db).list()])


@router.get("/active", response_model=ApiResponse[List[ContentBlockOut]])
def get_active_content_blocks(db: Session = Depends(get_db)):
    return ok([_to_out(b) for b in ContentBlockRepository(db).list_active()])


@router.get("/key/{block_key}", response_model=ApiResponse[ContentBlockOut])
def get_content_block_by_key(block_key: str, db: Session = Depends(get_db)):
    block = ContentBlockRepository(db).get_by_key(block_key)
    if not block:
        raise HTTPException(status_code=404, detail="Content block not found")
    return ok(_to_out(block))


@router.get("/page/{page}", response_model=ApiResponse[List[ContentBlockOut]])
def get_content_blocks_by_page(page: str, section: Optional[str] = None, db: Session = Depends(get_db)):
    return ok([_to_out(b) for b in ContentBlockRepository(db).by_page(page, section)])


@router.get("/{id}", response_model=ApiResponse[ContentBlockOut])
def get_content_block(id: UUID, db: Session = Depends(get_db)):
    return ok(_to_out(_get_or_404(ContentBlockRepository(db), id)))


@router.post("", response_model=ApiResponse[ContentBlockOut], status_code=status.HTTP_201_CREATED)
def create_content_block(payload: ContentBlockIn, db: Session = Depends(get_db)):
    repo = ContentBlockRepository(db)
    if repo.exists(block_key=payload.blockKey):
        raise HTTPException(status_code=409, detail="Block key already exists")
    block = ContentBlock()
    _apply(block, payload)
    repo.add(block)
    repo.save()
    repo.refresh(block)
    logger.info("Created content block %s (%s)", block.block_key, block.id)
    return ok(_to_out(block), "Content block created successfully")


@router.put("/{id}", response_model=ApiResponse[ContentBlockOut])
def update_content_block(id: UUID, payload: ContentBlockIn, db: Session = Depends(get_db)):
    repo = ContentBlockRepository(db)
    block = _get_or_404(repo, id)
    if repo.exists(exclude_id=id, block_key=payload.blockKey):
        raise HTTPException(status_code=409, detail="Block key already exists")
    _apply(block, payload)
    repo.update(block)
    repo.save()
    repo.refresh(block)
    logger.info("Updated content block %s", id)
    return ok(_to_out(block), "Content block updated successfully")


@router.delete("/{id}", response_model=ApiResponse[bool])
def delete_content_block(id: UUID, db: Session = Depends(get_db)):
    repo = ContentBlockRepository(db)
    block = _get_or_404(repo, id)
    repo.delete(block)
    repo.save()
    logger.info("Deleted content block %s", id)
    return ok(True, "Content block deleted successfully")
