from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class DeliverySettingsIn(BaseModel):
    freeDeliveryThreshold: float = Field(..., ge=0)
    standardDeliveryCharge: float = Field(..., ge=0)
    expressDeliveryCharge: Optional[float] = Field(None, ge=0)
    estimatedDeliveryDays: int = Field(3, ge=0)
    expressDeliveryDays: Optional[int] = Field(1, ge=0)
    isDeliveryEnabled: bool = True
    deliveryNote: Optional[str] = Field(None, max_length=500)
    isActive: bool = True


class DeliverySettingsOut(BaseModel):
    id: UUID
    freeDeliveryThreshold: float
    standardDeliveryCharge: float
    expressDeliveryCharge: Optional[float] = None
    estimatedDeliveryDays: int
    expressDeliveryDays: Optional[int] = None
    isDeliveryEnabled: bool
    deliveryNote: Optional[str] = None
    isActive: bool


class DeliveryChargesOut(BaseModel):
    freeDeliveryThreshold: float
    standardDeliveryCharge: float
    expressDeliveryCharge: Optional[float] = None
    estimatedDeliveryDays: int
    expressDeliveryDays: Optional[int] = None
    isDeliveryEnabled: bool = True
    deliveryNote: Optional[str] = None
