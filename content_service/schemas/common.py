import math
from typing import Annotated, Generic, List, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, Field

from content_service.utils.images import decode_image

T = TypeVar("T")

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
SETTING_KEY_PATTERN = r"^[a-zA-Z0-9_.]+$"
HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"
PHONE_PATTERN = r"^\+?[0-9\s-]{10,15}$"


def _check_image(value: Optional[str]) -> Optional[str]:
    if value:
        decode_image(value)
    return value


# Base64 payload (raw or data: URL). Empty string clears the stored image on update.
ImageBase64 = Annotated[Optional[str], AfterValidator(_check_image)]
DisplayOrder = Annotated[int, Field(ge=0)]


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    errors: Optional[List[str]] = None


class PaginationMeta(BaseModel):
    page: int
    pageSize: int
    total: int
    totalPages: int


class PagedResponse(BaseModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    data: List[T] = []
    meta: PaginationMeta


def ok(data=None, message: Optional[str] = None) -> ApiResponse:
    return ApiResponse(success=True, data=data, message=message)


def paged(items, page: int, page_size: int, total: int, message: Optional[str] = None) -> PagedResponse:
    return PagedResponse(
        success=True,
        data=items,
        message=message,
        meta=PaginationMeta(
            page=page,
            pageSize=page_size,
            total=total,
            totalPages=math.ceil(total / page_size) if page_size else 0,
        ),
    )
