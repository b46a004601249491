from sqlalchemy import Boolean, Column, Index, String, Text, text

from content_service.models.base import Base, BaseEntity, OrderedMixin


class ContentBlock(BaseEntity, OrderedMixin, Base):
    __tablename__ = "content_blocks"
    __table_args__ = (
        Index("ux_content_blocks_block_key", "block_key", unique=True,
              postgresql_where=text("NOT is_deleted"), sqlite_where=text("NOT is_deleted")),
        Index("ix_content_blocks_page_section", "page", "section"),
    )

    block_key = Column(String(100), nullable=False)
    page = Column(String(50), nullable=False)
    section = Column(String(50), nullable=False)
    title = Column(String(200), nullable=True)
    subtitle = Column(String(500), nullable=True)
    content = Column(Text, nullable=True)
    content_type = Column(String(20), nullable=False, default="text")
    # "metadata" is reserved on declarative classes
    block_metadata = Column("metadata", Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
