from typing import Dict, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from content_service.schemas.common import SETTING_KEY_PATTERN


class SiteSettingIn(BaseModel):
    key: str = Field(..., min_length=1, max_length=100, pattern=SETTING_KEY_PATTERN)
    value: str = ""
    group: Optional[str] = Field(None, max_length=50)
    settingType: Optional[str] = Field(None, max_length=20)
    description: Optional[str] = Field(None, max_length=500)
    isPublic: Optional[bool] = None


class SiteSettingUpdate(BaseModel):
    value: str = ""
    group: Optional[str] = Field(None, max_length=50)
    settingType: Optional[str] = Field(None, max_length=20)
    description: Optional[str] = Field(None, max_length=500)
    isPublic: Optional[bool] = None


class SiteSettingOut(BaseModel):
    id: UUID
    key: str
    value: str
    group: str
    settingType: str
    description: Optional[str] = None
    isPublic: bool


class PublicSiteInfo(BaseModel):
    companyName: str
    tagLine: Optional[str] = None
    logo: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    socialLinks: Dict[str, str] = {}
