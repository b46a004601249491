from typing import Dict, List, Optional

from content_service.models.delivery_settings import DeliverySettings
from content_service.models.site_setting import SiteSetting
from content_service.repositories.base import Repository


def group_for_key(key: str, default: str = "general") -> str:
    """``contact.phone`` belongs to the ``contact`` group; bare keys fall back to ``default``."""
    if "." in key:
        return key.split(".", 1)[0]
    return default


class SiteSettingRepository(Repository[SiteSetting]):
    model = SiteSetting

    def _ordered(self, q):
        return q.order_by(SiteSetting.group, SiteSetting.key)

    def get_by_key(self, key: str) -> Optional[SiteSetting]:
        return self.get_by(key=key)

    def by_group(self, group: str) -> List[SiteSetting]:
        return self._ordered(self.query().filter(SiteSetting.group == group)).all()

    def public(self) -> List[SiteSetting]:
        return self._ordered(self.query().filter(SiteSetting.is_public.is_(True))).all()

    def as_dict(self, settings: List[SiteSetting]) -> Dict[str, str]:
        return {s.key: s.value for s in settings}

    def upsert(self, key: str, value: str, group: Optional[str] = None, description: Optional[str] = None,
               is_public: Optional[bool] = None, setting_type: Optional[str] = None) -> SiteSetting:
        """Stage an insert or update keyed by ``key``; the caller commits."""
        setting = self.get_by_key(key)
        if setting:
            setting.value = value
            if group is not None:
                setting.group = group
            if description is not None:
                setting.description = description
            if is_public is not None:
                setting.is_public = is_public
            if setting_type is not None:
                setting.setting_type = setting_type
            self.update(setting)
        else:
            setting = SiteSetting(
                key=key,
                value=value,
                group=group or group_for_key(key),
                description=description,
                is_public=True if is_public is None else is_public,
                setting_type=setting_type or "string",
            )
            self.add(setting)
            # Make the new row visible to later lookups in the same unit of work
            self.db.flush()
        return setting

    def bulk_upsert(self, values: Dict[str, str]) -> int:
        for key, value in values.items():
            self.upsert(key, value)
        return len(values)


class DeliverySettingsRepository(Repository[DeliverySettings]):
    model = DeliverySettings

    def active(self) -> Optional[DeliverySettings]:
        return (
            self.query()
            .filter(DeliverySettings.is_active.is_(True))
            .order_by(DeliverySettings.updated_at.desc())
            .first()
        )
