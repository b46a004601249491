from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from content_service.schemas.common import HEX_COLOR_PATTERN, DisplayOrder, ImageBase64


class HeroSlideIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    subtitle: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=500)
    highlightText: Optional[str] = Field(None, max_length=50)
    imageBase64: ImageBase64 = None
    imageContentType: Optional[str] = Field(None, max_length=50)
    gradientStart: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    gradientMiddle: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    gradientEnd: Optional[str] = Field(None, pattern=HEX_COLOR_PATTERN)
    ctaText: Optional[str] = Field(None, max_length=50)
    ctaLink: Optional[str] = Field(None, max_length=200)
    productId: Optional[UUID] = None
    displayOrder: DisplayOrder = 0
    isActive: bool = True
    # On update, None keeps the current features
    features: Optional[List[str]] = None


class HeroSlideOut(BaseModel):
    id: UUID
    title: str
    subtitle: Optional[str] = None
    description: Optional[str] = None
    highlightText: Optional[str] = None
    imageBase64: Optional[str] = None
    imageContentType: Optional[str] = None
    gradientStart: Optional[str] = None
    gradientMiddle: Optional[str] = None
    gradientEnd: Optional[str] = None
    ctaText: Optional[str] = None
    ctaLink: Optional[str] = None
    productId: Optional[UUID] = None
    displayOrder: int
    isActive: bool
    features: List[str] = []
