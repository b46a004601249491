from typing import List, Optional

from sqlalchemy.orm import selectinload

from content_service.models.company_story import CompanyStoryItem, CompanyStorySection
from content_service.models.content_block import ContentBlock
from content_service.models.hero_slide import HeroSlide
from content_service.models.inquiry_type import InquiryType
from content_service.models.statistic import Statistic
from content_service.models.testimonial import Testimonial
from content_service.models.usp_item import UspItem
from content_service.repositories.base import Repository


class HeroSlideRepository(Repository[HeroSlide]):
    model = HeroSlide

    def query(self):
        return super().query().options(selectinload(HeroSlide.features))


class TestimonialRepository(Repository[Testimonial]):
    model = Testimonial

    def list_active(self) -> List[Testimonial]:
        q = self.query().filter(Testimonial.is_active.is_(True), Testimonial.is_approved.is_(True))
        return self._ordered(q).all()

    def featured(self, limit: int) -> List[Testimonial]:
        q = self.query().filter(Testimonial.is_approved.is_(True), Testimonial.is_featured.is_(True))
        return self._ordered(q).limit(limit).all()


class StatisticRepository(Repository[Statistic]):
    model = Statistic

    def list_active(self) -> List[Statistic]:
        return (
            self.query()
            .filter(Statistic.is_active.is_(True))
            .order_by(Statistic.section, Statistic.display_order)
            .all()
        )

    def by_section(self, section: str) -> List[Statistic]:
        q = self.query().filter(Statistic.section == section, Statistic.is_active.is_(True))
        return self._ordered(q).all()


class UspItemRepository(Repository[UspItem]):
    model = UspItem


class InquiryTypeRepository(Repository[InquiryType]):
    model = InquiryType


class CompanyStoryRepository(Repository[CompanyStorySection]):
    model = CompanyStorySection

    def query(self):
        return super().query().options(selectinload(CompanyStorySection.items))

    def get_by_key(self, section_key: str) -> Optional[CompanyStorySection]:
        return self.get_by(section_key=section_key)

    def get_item(self, section: CompanyStorySection, item_id) -> Optional[CompanyStoryItem]:
        return next((i for i in section.items if i.id == item_id), None)


class ContentBlockRepository(Repository[ContentBlock]):
    model = ContentBlock

    def get_by_key(self, block_key: str) -> Optional[ContentBlock]:
        return self.get_by(block_key=block_key)

    def by_page(self, page: str, section: Optional[str] = None) -> List[ContentBlock]:
        q = self.query().filter(ContentBlock.page == page, ContentBlock.is_active.is_(True))
        if section:
            q = q.filter(ContentBlock.section == section)
        return self._ordered(q).all()
