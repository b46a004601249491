from sqlalchemy import Boolean, Column, ForeignKey, Index, LargeBinary, String, Uuid, text
from sqlalchemy.orm import relationship

from content_service.models.base import Base, BaseEntity, OrderedMixin


class CompanyStorySection(BaseEntity, OrderedMixin, Base):
    __tablename__ = "company_story_sections"
    __table_args__ = (
        Index("ux_company_story_sections_section_key", "section_key", unique=True,
              postgresql_where=text("NOT is_deleted"), sqlite_where=text("NOT is_deleted")),
    )
    __soft_delete_cascade__ = ("items",)

    section_key = Column(String(50), nullable=False)
    title = Column(String(200), nullable=False)
    subtitle = Column(String(500), nullable=True)
    icon = Column(String(50), nullable=True)
    image_data = Column(LargeBinary, nullable=True)
    image_content_type = Column(String(50), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    items = relationship("CompanyStoryItem", back_populates="section", cascade="all, delete-orphan",
                         order_by="CompanyStoryItem.display_order")


class CompanyStoryItem(BaseEntity, OrderedMixin, Base):
    __tablename__ = "company_story_items"

    section_id = Column(Uuid, ForeignKey("company_story_sections.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=True)
    description = Column(String(1000), nullable=False)
    icon = Column(String(50), nullable=True)

    section = relationship("CompanyStorySection", back_populates="items")
