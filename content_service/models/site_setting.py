from sqlalchemy import Boolean, Column, Index, String, Text, text

from content_service.models.base import Base, BaseEntity


class SiteSetting(BaseEntity, Base):
    __tablename__ = "site_settings"
    __table_args__ = (
        Index("ux_site_settings_key", "key", unique=True,
              postgresql_where=text("NOT is_deleted"), sqlite_where=text("NOT is_deleted")),
    )

    key = Column(String(100), nullable=False)
    value = Column(Text, nullable=False, default="")
    setting_type = Column(String(20), nullable=False, default="string")
    group = Column(String(50), nullable=False, default="general", index=True)
    description = Column(String(500), nullable=True)
    is_public = Column(Boolean, nullable=False, default=True)
