import logging
from typing import Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from content_service.models.base import get_db
from content_service.models.site_setting import SiteSetting
from content_service.repositories.settings import SiteSettingRepository
from content_service.schemas.common import ApiResponse, ok
from content_service.schemas.site_setting import PublicSiteInfo, SiteSettingIn, SiteSettingOut, SiteSettingUpdate

router = APIRouter()
logger = logging.getLogger(__name__)

DEFAULT_COMPANY_NAME = "At Your Doorstep"

# Public info field -> (canonical key, legacy key)
PUBLIC_INFO_KEYS = {
    "companyName": ("general.site_name", "company_name"),
    "tagLine": ("general.tagline", "tag_line"),
    "logo": ("general.logo", "logo_url"),
    "email": ("contact.email", "contact_email"),
    "phone": ("contact.phone", "contact_phone"),
    "address": ("contact.address", "contact_address"),
}


def _to_out(s: SiteSetting) -> SiteSettingOut:
    return SiteSettingOut(
        id=s.id,
        key=s.key,
        value=s.value,
        group=s.group,
        settingType=s.setting_type,
        description=s.description,
        isPublic=s.is_public,
    )


def _get_or_404(repo: SiteSettingRepository, id: UUID) -> SiteSetting:
    setting = repo.get(id)
    if not setting:
        raise HTTPException(status_code=404, detail="Site setting not found")
    return setting


def build_public_info(values: Dict[str, str]) -> PublicSiteInfo:
    def pick(canonical: str, legacy: str) -> Optional[str]:
        return values.get(canonical) or values.get(legacy) or None

    info = {field: pick(*keys) for field, keys in PUBLIC_INFO_KEYS.items()}
    info["companyName"] = info["companyName"] or DEFAULT_COMPANY_NAME

    social: Dict[str, str] = {}
    for key, value in values.items():
        if not value:
            continue
        if key.startswith("social."):
            social[key[len("social."):]] = value
        elif key.startswith("social_"):
            social.setdefault(key[len("social_"):], value)
    return PublicSiteInfo(socialLinks=social, **info)


@router.get("", response_model=ApiResponse[List[SiteSettingOut]])
def get_site_settings(db: Session = Depends(get_db)):
    return ok([_to_out(s) for s in SiteSettingRepository(db).list()])


@router.get("/group/{group}", response_model=ApiResponse[Dict[str, str]])
def get_settings_by_group(group: str, db: Session = Depends(get_db)):
    repo = SiteSettingRepository(db)
    return ok(repo.as_dict(repo.by_group(group)))


@router.get("/key/{key}", response_model=ApiResponse[str])
def get_setting_value(key: str, db: Session = Depends(get_db)):
    setting = SiteSettingRepository(db).get_by_key(key)
    if not setting:
        raise HTTPException(status_code=404, detail=f"Setting '{key}' not found")
    return ok(setting.value)


@router.get("/public", response_model=ApiResponse[Dict[str, str]])
def get_public_settings(db: Session = Depends(get_db)):
    repo = SiteSettingRepository(db)
    return ok(repo.as_dict(repo.public()))


@router.get("/public/info", response_model=ApiResponse[PublicSiteInfo])
def get_public_site_info(db: Session = Depends(get_db)):
    """Company name, contact details and social links for the site header and footer."""
    repo = SiteSettingRepository(db)
    return ok(build_public_info(repo.as_dict(repo.public())))


@router.get("/{id}", response_model=ApiResponse[SiteSettingOut])
def get_site_setting(id: UUID, db: Session = Depends(get_db)):
    return ok(_to_out(_get_or_404(SiteSettingRepository(db), id)))


@router.post("", response_model=ApiResponse[SiteSettingOut], status_code=status.HTTP_201_CREATED)
def upsert_site_setting(payload: SiteSettingIn, db: Session = Depends(get_db)):
    repo = SiteSettingRepository(db)
    setting = repo.upsert(
        payload.key,
        payload.value,
        group=payload.group,
        description=payload.description,
        is_public=payload.isPublic,
        setting_type=payload.settingType,
    )
    repo.save()
    repo.refresh(setting)
    logger.info("Saved site setting %s", setting.key)
    return ok(_to_out(setting), "Site setting saved successfully")


@router.post("/bulk", response_model=ApiResponse[bool])
def bulk_update_site_settings(values: Dict[str, str], db: Session = Depends(get_db)):
    repo = SiteSettingRepository(db)
    count = repo.bulk_upsert(values)
    repo.save()
    logger.info("Bulk updated %d site settings", count)
    return ok(True, f"Updated {count} settings")


@router.put("/{id}", response_model=ApiResponse[SiteSettingOut])
def update_site_setting(id: UUID, payload: SiteSettingUpdate, db: Session = Depends(get_db)):
    repo = SiteSettingRepository(db)
    setting = _get_or_404(repo, id)
    setting.value = payload.value
    if payload.group is not None:
        setting.group = payload.group
    if payload.settingType is not None:
        setting.setting_type = payload.settingType
    if payload.description is not None:
        setting.description = payload.description
    if payload.isPublic is not None:
        setting.is_public = payload.isPublic
    repo.update(setting)
    repo.save()
    repo.refresh(setting)
    logger.info("Updated site setting %s", setting.key)
    return ok(_to_out(setting), "Site setting updated successfully")


@router.delete("/{id}", response_model=ApiResponse[bool])
def delete_site_setting(id: UUID, db: Session = Depends(get_db)):
    repo = SiteSettingRepository(db)
    setting = _get_or_404(repo, id)
    repo.delete(setting)
    repo.save()
    logger.info("Deleted site setting %s", setting.key)
    return ok(True, "Site setting deleted successfully")
