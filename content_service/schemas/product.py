from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from content_service.schemas.common import SLUG_PATTERN, DisplayOrder, ImageBase64


class VariantIn(BaseModel):
    size: str = Field(..., min_length=1, max_length=50)
    unit: str = Field(..., min_length=1, max_length=20)
    price: float = Field(..., gt=0)
    discountedPrice: Optional[float] = Field(None, gt=0)
    stockQuantity: int = Field(100, ge=0)
    sku: Optional[str] = Field(None, max_length=50)
    isAvailable: bool = True
    isInStock: bool = True
    displayOrder: DisplayOrder = 0


class ProductImageIn(BaseModel):
    imageBase64: ImageBase64 = None
    imageContentType: Optional[str] = Field(None, max_length=50)
    altText: Optional[str] = Field(None, max_length=200)
    isPrimary: Optional[bool] = None


class ProductUpdate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    slug: str = Field(..., min_length=1, max_length=200, pattern=SLUG_PATTERN)
    shortDescription: str = Field("", max_length=500)
    fullDescription: Optional[str] = None
    productCategoryId: UUID
    unit: Optional[str] = Field(None, max_length=50)
    basePrice: float = Field(..., gt=0)
    discountedPrice: Optional[float] = Field(None, gt=0)
    stockQuantity: int = Field(0, ge=0)
    isFeatured: bool = False
    isAvailable: bool = True
    displayOrder: DisplayOrder = 0
    seasonStart: Optional[str] = Field(None, max_length=20)
    seasonEnd: Optional[str] = Field(None, max_length=20)
    metaTitle: Optional[str] = Field(None, max_length=100)
    metaDescription: Optional[str] = Field(None, max_length=300)
    imageBase64: ImageBase64 = None
    imageContentType: Optional[str] = Field(None, max_length=50)


class ProductCreate(ProductUpdate):
    variants: List[VariantIn] = []
    features: List[str] = []
    images: List[ProductImageIn] = []

    @model_validator(mode="after")
    def _unique_skus(self):
        skus = [v.sku for v in self.variants if v.sku]
        if len(skus) != len(set(skus)):
            raise ValueError("Variant SKUs must be unique")
        return self


class VariantOut(BaseModel):
    id: UUID
    size: str
    unit: str
    price: float
    discountedPrice: Optional[float] = None
    stockQuantity: int
    sku: Optional[str] = None
    isAvailable: bool
    isInStock: bool
    displayOrder: int


class ProductImageOut(BaseModel):
    id: UUID
    imageBase64: Optional[str] = None
    imageContentType: Optional[str] = None
    altText: Optional[str] = None
    isPrimary: bool
    displayOrder: int


class ProductOut(BaseModel):
    id: UUID
    name: str
    slug: str
    shortDescription: str
    fullDescription: Optional[str] = None
    productCategoryId: UUID
    productCategoryName: Optional[str] = None
    productCategorySlug: Optional[str] = None
    unit: Optional[str] = None
    basePrice: float
    discountedPrice: Optional[float] = None
    stockQuantity: int
    isFeatured: bool
    isAvailable: bool
    displayOrder: int
    seasonStart: Optional[str] = None
    seasonEnd: Optional[str] = None
    metaTitle: Optional[str] = None
    metaDescription: Optional[str] = None
    imageBase64: Optional[str] = None
    imageContentType: Optional[str] = None
    primaryImageBase64: Optional[str] = None
    primaryImageContentType: Optional[str] = None
    variants: List[VariantOut] = []
    features: List[str] = []
    images: List[ProductImageOut] = []
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
