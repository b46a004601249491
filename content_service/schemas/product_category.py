from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from content_service.schemas.common import SLUG_PATTERN, DisplayOrder, ImageBase64


class ProductCategoryIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: Optional[str] = Field(None, max_length=500)
    icon: Optional[str] = Field(None, max_length=50)
    imageBase64: ImageBase64 = None
    imageContentType: Optional[str] = Field(None, max_length=50)
    displayOrder: DisplayOrder = 0
    isActive: bool = True
    parentId: Optional[UUID] = None


class ProductCategoryOut(BaseModel):
    id: UUID
    name: str
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = None
    imageBase64: Optional[str] = None
    imageContentType: Optional[str] = None
    displayOrder: int
    isActive: bool
    parentId: Optional[UUID] = None
    productCount: int = 0
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
