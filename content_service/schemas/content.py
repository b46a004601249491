from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from content_service.schemas.common import DisplayOrder, ImageBase64


class StatisticIn(BaseModel):
    label: str = Field(..., min_length=1, max_length=100)
    value: str = Field(..., min_length=1, max_length=50)
    suffix: Optional[str] = Field(None, max_length=20)
    icon: Optional[str] = Field(None, max_length=50)
    section: str = Field("home", min_length=1, max_length=50)
    displayOrder: DisplayOrder = 0
    isActive: bool = True


class StatisticOut(BaseModel):
    id: UUID
    label: str
    value: str
    suffix: Optional[str] = None
    icon: Optional[str] = None
    section: str
    displayOrder: int
    isActive: bool


class UspItemIn(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    icon: Optional[str] = Field(None, max_length=50)
    displayOrder: DisplayOrder = 0
    isActive: bool = True


class UspItemOut(BaseModel):
    id: UUID
    title: str
    description: str
    icon: Optional[str] = None
    displayOrder: int
    isActive: bool


class InquiryTypeIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    value: Optional[str] = Field(None, max_length=50)
    displayOrder: DisplayOrder = 0
    isActive: bool = True


class InquiryTypeOut(BaseModel):
    id: UUID
    name: str
    value: str
    displayOrder: int
    isActive: bool


class CompanyStoryItemIn(BaseModel):
    title: Optional[str] = Field(None, max_length=200)
    description: str = Field(..., min_length=1, max_length=1000)
    icon: Optional[str] = Field(None, max_length=50)
    displayOrder: Optional[DisplayOrder] = None


class CompanyStoryItemOut(BaseModel):
    id: UUID
    title: Optional[str] = None
    description: str
    icon: Optional[str] = None
    displayOrder: int


class CompanyStorySectionIn(BaseModel):
    sectionKey: Optional[str] = Field(None, max_length=50, pattern=r"^[a-z0-9_]+$")
    title: str = Field(..., min_length=1, max_length=200)
    subtitle: Optional[str] = Field(None, max_length=500)
    icon: Optional[str] = Field(None, max_length=50)
    imageBase64: ImageBase64 = None
    imageContentType: Optional[str] = Field(None, max_length=50)
    displayOrder: DisplayOrder = 0
    isActive: bool = True
    # Only read on create; items are managed through the item routes afterwards
    items: List[CompanyStoryItemIn] = []


class CompanyStorySectionOut(BaseModel):
    id: UUID
    sectionKey: str
    title: str
    subtitle: Optional[str] = None
    icon: Optional[str] = None
    imageBase64: Optional[str] = None
    imageContentType: Optional[str] = None
    displayOrder: int
    isActive: bool
    items: List[CompanyStoryItemOut] = []


class ContentBlockIn(BaseModel):
    blockKey: str = Field(..., min_length=1, max_length=100, pattern=r"^[a-zA-Z0-9_.-]+$")
    page: str = Field(..., min_length=1, max_length=50)
    section: str = Field(..., min_length=1, max_length=50)
    title: Optional[str] = Field(None, max_length=200)
    subtitle: Optional[str] = Field(None, max_length=500)
    content: Optional[str] = None
    contentType: str = Field("text", max_length=20)
    metadata: Optional[str] = None
    displayOrder: DisplayOrder = 0
    isActive: bool = True


class ContentBlockOut(BaseModel):
    id: UUID
    blockKey: str
    page: str
    section: str
    title: Optional[str] = None
    subtitle: Optional[str] = None
    content: Optional[str] = None
    contentType: str
    metadata: Optional[str] = None
    displayOrder: int
    isActive: bool
