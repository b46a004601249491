import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from content_service.models.base import get_db
from content_service.models.statistic import Statistic
from content_service.repositories.content import StatisticRepository
from content_service.schemas.common import ApiResponse, ok
from content_service.schemas.content import StatisticIn, StatisticOut

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_out(s: Statistic) -> StatisticOut:
    return StatisticOut(
        id=s.id,
        label=s.label,
        value=s.value,
        suffix=s.suffix,
        icon=s.icon,
        section=s.section,
        displayOrder=s.display_order,
        isActive=s.is_active,
    )


def _get_or_404(repo: StatisticRepository, id: UUID) -> Statistic:
    stat = repo.get(id)
    if not stat:
        raise HTTPException(status_code=404, detail="Statistic not found")
    return stat


def _apply(s: Statistic, payload: StatisticIn) -> None:
    s.label = payload.label
    s.value = payload.value
    s.suffix = payload.suffix
    s.icon = payload.icon
    s.section = payload.section
    s.display_order = payload.displayOrder
    s.is_active = payload.isActive


@router.get("", response_model=ApiResponse[List[StatisticOut]])
def get_statistics(db: Session = Depends(get_db)):
    return ok([_to_out(s) for s in StatisticRepository(db).list()])


@router.get("/active", response_model=ApiResponse[List[StatisticOut]])
def get_active_statistics(db: Session = Depends(get_db)):
    return ok([_to_out(s) for s in StatisticRepository(db).list_active()])


@router.get("/section/{section}", response_model=ApiResponse[List[StatisticOut]])
def get_statistics_by_section(section: str, db: Session = Depends(get_db)):
    return ok([_to_out(s) for s in StatisticRepository(db).by_section(section)])


@router.get("/{id}", response_model=ApiResponse[StatisticOut])
def get_statistic(id: UUID, db: Session = Depends(get_db)):
    return ok(_to_out(_get_or_404(StatisticRepository(db), id)))


@router.post("", response_model=ApiResponse[StatisticOut], status_code=status.HTTP_201_CREATED)
def create_statistic(payload: StatisticIn, db: Session = Depends(get_db)):
    repo = StatisticRepository(db)
    stat = Statistic()
    _apply(stat, payload)
    repo.add(stat)
    repo.save()
    repo.refresh(stat)
    logger.info("Created statistic %s (%s)", stat.label, stat.id)
    return ok(_to_out(stat), "Statistic created successfully")


@router.put("/{id}", response_model=ApiResponse[StatisticOut])
def update_statistic(id: UUID, payload: StatisticIn, db: Session = Depends(get_db)):
    repo = StatisticRepository(db)
    stat = _get_or_404(repo, id)
    _apply(stat, payload)
    repo.update(stat)
    repo.save()
    repo.refresh(stat)
    logger.info("Updated statistic %s", id)
    return ok(_to_out(stat), "Statistic updated successfully")


@router.delete("/{id}", response_model=ApiResponse[bool])
def delete_statistic(id: UUID, db: Session = Depends(get_db)):
    repo = StatisticRepository(db)
    stat = _get_or_404(repo, id)
    repo.delete(stat)
    repo.save()
    logger.info("Deleted statistic %s", id)
    return ok(True, "Statistic deleted successfully")
