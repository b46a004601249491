"""Schema migration and first-run data for the content database.

Each entity is seeded only while its table holds no rows at all, deleted
ones included, so running this against a database that was ever seeded
is a no-op.
"""
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.orm import Session

from content_service import seed_data
from content_service.models.base import DATABASE_URL
from content_service.models.company_story import CompanyStoryItem, CompanyStorySection
from content_service.models.delivery_settings import DeliverySettings
from content_service.models.hero_slide import HeroSlide, HeroSlideFeature
from content_service.models.inquiry_type import InquiryType
from content_service.models.product import Product, ProductFeature, ProductVariant
from content_service.models.product_category import ProductCategory
from content_service.models.site_setting import SiteSetting
from content_service.models.statistic import Statistic
from content_service.models.testimonial import Testimonial
from content_service.models.usp_item import UspItem
from content_service.utils import seed_images
from content_service.utils.keys import snake_key
from content_service.utils.money import to_decimal

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


def alembic_config() -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    cfg.set_main_option("sqlalchemy.url", DATABASE_URL.replace("%", "%%"))
    return cfg


def run_migrations() -> None:
    logger.info("Applying database migrations")
    command.upgrade(alembic_config(), "head")


def _is_empty(db: Session, model) -> bool:
    return db.query(model).execution_options(include_deleted=True).first() is None


def seed_categories(db: Session, images_dir) -> None:
    if not _is_empty(db, ProductCategory):
        return
    for c in seed_data.CATEGORIES:
        data, content_type = seed_images.image_by_name(c["slug"], seed_images.CATEGORY_IMAGES, images_dir)
        db.add(ProductCategory(
            id=c["id"],
            name=c["name"],
            slug=c["slug"],
            description=c["description"],
            icon=c["icon"],
            image_data=data,
            image_content_type=content_type,
            display_order=c["display_order"],
            is_active=True,
        ))


def seed_products(db: Session, images_dir) -> None:
    if not _is_empty(db, Product):
        return
    for p in seed_data.PRODUCTS:
        data, content_type = seed_images.image_by_name(p["slug"], seed_images.PRODUCT_IMAGES, images_dir)
        season_start, season_end = p.get("season", (None, None))
        product = Product(
            id=p["id"],
            name=p["name"],
            slug=p["slug"],
            full_description=p["full_description"],
            short_description=p["short_description"],
            product_category_id=p["category_id"],
            # Listing price is the entry variant's price
            base_price=to_decimal(p["variants"][0][2]),
            image_data=data,
            image_content_type=content_type,
            is_available=True,
            is_featured=p["is_featured"],
            display_order=p["display_order"],
            season_start=season_start,
            season_end=season_end,
        )
        for i, (size, unit, price, stock) in enumerate(p["variants"], start=1):
            product.variants.append(ProductVariant(
                size=size,
                unit=unit,
                price=to_decimal(price),
                stock_quantity=stock,
                is_in_stock=True,
                display_order=i,
            ))
        for i, feature in enumerate(p["features"], start=1):
            product.features.append(ProductFeature(feature=feature, display_order=i))
        db.add(product)


def seed_testimonials(db: Session) -> None:
    if not _is_empty(db, Testimonial):
        return
    for i, (name, title, content) in enumerate(seed_data.TESTIMONIALS, start=1):
        db.add(Testimonial(
            customer_name=name,
            customer_title=title,
            content=content,
            rating=5,
            is_featured=True,
            is_approved=True,
            is_active=True,
            display_order=i,
        ))


def seed_site_settings(db: Session) -> None:
    if not _is_empty(db, SiteSetting):
        return
    for key, value, description in seed_data.SITE_SETTINGS:
        db.add(SiteSetting(
            key=key,
            value=value,
            setting_type="string",
            group=key.split(".", 1)[0],
            description=description,
            is_public=True,
        ))


def seed_hero_slides(db: Session, images_dir) -> None:
    if not _is_empty(db, HeroSlide):
        return
    for i, s in enumerate(seed_data.HERO_SLIDES, start=1):
        data, content_type = seed_images.image_by_name(s["image"], seed_images.HERO_SLIDE_IMAGES, images_dir)
        start, middle, end = s["gradient"]
        slide = HeroSlide(
            product_id=s["product_id"],
            title=s["title"],
            subtitle="AT YOUR DOORSTEP",
            description=s["description"],
            highlight_text=s["highlight_text"],
            cta_text="SHOP NOW",
            cta_link=s["cta_link"],
            image_data=data,
            image_content_type=content_type,
            gradient_start=start,
            gradient_middle=middle,
            gradient_end=end,
            display_order=i,
            is_active=True,
        )
        for j, feature in enumerate(s["features"], start=1):
            slide.features.append(HeroSlideFeature(feature=feature, display_order=j))
        db.add(slide)


def seed_statistics(db: Session) -> None:
    if not _is_empty(db, Statistic):
        return
    for label, value, section, order in seed_data.STATISTICS:
        db.add(Statistic(label=label, value=value, section=section, display_order=order, is_active=True))


def seed_usp_items(db: Session) -> None:
    if not _is_empty(db, UspItem):
        return
    for i, (title, description, icon) in enumerate(seed_data.USP_ITEMS, start=1):
        db.add(UspItem(title=title, description=description, icon=icon, display_order=i, is_active=True))


def seed_company_story(db: Session, images_dir) -> None:
    if not _is_empty(db, CompanyStorySection):
        return
    for i, s in enumerate(seed_data.COMPANY_STORY, start=1):
        data, content_type = seed_images.image_by_name(
            s["section_key"], seed_images.COMPANY_STORY_IMAGES, images_dir
        )
        section = CompanyStorySection(
            section_key=s["section_key"],
            title=s["title"],
            icon=s["icon"],
            image_data=data,
            image_content_type=content_type,
            display_order=i,
            is_active=True,
        )
        for j, (title, description) in enumerate(s["items"], start=1):
            section.items.append(CompanyStoryItem(title=title, description=description, display_order=j))
        db.add(section)


def seed_inquiry_types(db: Session) -> None:
    if not _is_empty(db, InquiryType):
        return
    for i, name in enumerate(seed_data.INQUIRY_TYPES, start=1):
        db.add(InquiryType(name=name, value=snake_key(name), display_order=i, is_active=True))


def seed_delivery_settings(db: Session) -> None:
    if not _is_empty(db, DeliverySettings):
        return
    d = seed_data.DELIVERY_SETTINGS
    db.add(DeliverySettings(
        free_delivery_threshold=to_decimal(d["free_delivery_threshold"]),
        standard_delivery_charge=to_decimal(d["standard_delivery_charge"]),
        express_delivery_charge=to_decimal(d["express_delivery_charge"]),
        is_delivery_enabled=d["is_delivery_enabled"],
        delivery_note=d["delivery_note"],
        is_active=True,
    ))


def seed_database(db: Session, migrate: bool = True) -> None:
    if migrate:
        run_migrations()

    images_dir = seed_images.seed_images_dir()
    if images_dir:
        logger.info("Found seed images at %s", images_dir)
    else:
        logger.warning("Seed images directory not found; seeding without images")

    try:
        # Flush after each step so rows referenced by fixed ids exist before their dependants
        seed_categories(db, images_dir)
        db.flush()
        seed_products(db, images_dir)
        db.flush()
        seed_testimonials(db)
        seed_site_settings(db)
        seed_hero_slides(db, images_dir)
        db.flush()
        seed_statistics(db)
        seed_usp_items(db)
        seed_company_story(db, images_dir)
        seed_inquiry_types(db)
        seed_delivery_settings(db)
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        seed_images.clear_cache()
    logger.info("Seed data check complete")


if __name__ == "__main__":
    from content_service.config import get_settings
    from content_service.models.base import SessionLocal

    logging.basicConfig(level=get_settings().LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    session = SessionLocal()
    try:
        seed_database(session)
    finally:
        session.close()
