from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from content_service.schemas.common import DisplayOrder, ImageBase64


class TestimonialIn(BaseModel):
    customerName: str = Field(..., min_length=1, max_length=100)
    customerTitle: Optional[str] = Field(None, max_length=100)
    customerLocation: Optional[str] = Field(None, max_length=100)
    customerImageBase64: ImageBase64 = None
    customerImageContentType: Optional[str] = Field(None, max_length=50)
    content: str = Field(..., min_length=1, max_length=1000)
    rating: int = Field(5, ge=1, le=5)
    productPurchased: Optional[str] = Field(None, max_length=200)
    isApproved: bool = True
    isFeatured: bool = False
    isActive: bool = True
    displayOrder: DisplayOrder = 0


class TestimonialOut(BaseModel):
    id: UUID
    customerName: str
    customerTitle: Optional[str] = None
    customerLocation: Optional[str] = None
    customerImageBase64: Optional[str] = None
    customerImageContentType: Optional[str] = None
    content: str
    rating: int
    productPurchased: Optional[str] = None
    isApproved: bool
    isFeatured: bool
    isActive: bool
    displayOrder: int
