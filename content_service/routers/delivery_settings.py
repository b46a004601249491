import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from content_service.models.base import get_db
from content_service.models.delivery_settings import DeliverySettings
from content_service.repositories.settings import DeliverySettingsRepository
from content_service.schemas.common import ApiResponse, ok
from content_service.schemas.delivery_settings import DeliveryChargesOut, DeliverySettingsIn, DeliverySettingsOut
from content_service.utils.money import to_decimal, to_float

router = APIRouter()
logger = logging.getLogger(__name__)

DEFAULT_CHARGES = DeliveryChargesOut(
    freeDeliveryThreshold=500,
    standardDeliveryCharge=50,
    expressDeliveryCharge=100,
    estimatedDeliveryDays=3,
    expressDeliveryDays=1,
)


def _to_out(d: DeliverySettings) -> DeliverySettingsOut:
    return DeliverySettingsOut(
        id=d.id,
        freeDeliveryThreshold=to_float(d.free_delivery_threshold),
        standardDeliveryCharge=to_float(d.standard_delivery_charge),
        expressDeliveryCharge=to_float(d.express_delivery_charge),
        estimatedDeliveryDays=d.estimated_delivery_days,
        expressDeliveryDays=d.express_delivery_days,
        isDeliveryEnabled=d.is_delivery_enabled,
        deliveryNote=d.delivery_note,
        isActive=d.is_active,
    )


def _get_or_404(repo: DeliverySettingsRepository, id: UUID) -> DeliverySettings:
    settings = repo.get(id)
    if not settings:
        raise HTTPException(status_code=404, detail="Delivery settings not found")
    return settings


def _apply(d: DeliverySettings, payload: DeliverySettingsIn) -> None:
    d.free_delivery_threshold = to_decimal(payload.freeDeliveryThreshold)
    d.standard_delivery_charge = to_decimal(payload.standardDeliveryCharge)
    d.express_delivery_charge = to_decimal(payload.expressDeliveryCharge)
    d.estimated_delivery_days = payload.estimatedDeliveryDays
    d.express_delivery_days = payload.expressDeliveryDays
    d.is_delivery_enabled = payload.isDeliveryEnabled
    d.delivery_note = payload.deliveryNote
    d.is_active = payload.isActive


@router.get("", response_model=ApiResponse[DeliverySettingsOut])
def get_delivery_settings(db: Session = Depends(get_db)):
    settings = DeliverySettingsRepository(db).active()
    if not settings:
        raise HTTPException(status_code=404, detail="Delivery settings not found")
    return ok(_to_out(settings))


@router.get("/charges", response_model=ApiResponse[DeliveryChargesOut])
def get_delivery_charges(db: Session = Depends(get_db)):
    """Public delivery charges; falls back to the built-in defaults when nothing is configured."""
    settings = DeliverySettingsRepository(db).active()
    if not settings:
        return ok(DEFAULT_CHARGES)
    return ok(DeliveryChargesOut(**_to_out(settings).model_dump(exclude={"id", "isActive"})))


@router.post("", response_model=ApiResponse[DeliverySettingsOut])
def save_delivery_settings(payload: DeliverySettingsIn, db: Session = Depends(get_db)):
    repo = DeliverySettingsRepository(db)
    settings = repo.active()
    if settings:
        _apply(settings, payload)
        repo.update(settings)
    else:
        settings = DeliverySettings()
        _apply(settings, payload)
        repo.add(settings)
    repo.save()
    repo.refresh(settings)
    logger.info("Saved delivery settings %s", settings.id)
    return ok(_to_out(settings), "Delivery settings saved successfully")


@router.put("/{id}", response_model=ApiResponse[DeliverySettingsOut])
def update_delivery_settings(id: UUID, payload: DeliverySettingsIn, db: Session = Depends(get_db)):
    repo = DeliverySettingsRepository(db)
    settings = _get_or_404(repo, id)
    _apply(settings, payload)
    repo.update(settings)
    repo.save()
    repo.refresh(settings)
    logger.info("Updated delivery settings %s", id)
    return ok(_to_out(settings), "Delivery settings updated successfully")


@router.delete("/{id}", response_model=ApiResponse[bool])
def delete_delivery_settings(id: UUID, db: Session = Depends(get_db)):
    repo = DeliverySettingsRepository(db)
    settings = _get_or_404(repo, id)
    repo.delete(settings)
    repo.save()
    logger.info("Deleted delivery settings %s", id)
    return ok(True, "Delivery settings deleted successfully")
