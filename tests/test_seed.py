"""
First-run seeding of the content database.
"""
from content_service import seed_data
from content_service.models.company_story import CompanyStoryItem, CompanyStorySection
from content_service.models.delivery_settings import DeliverySettings
from content_service.models.hero_slide import HeroSlide
from content_service.models.inquiry_type import InquiryType
from content_service.models.product import Product, ProductVariant
from content_service.models.product_category import ProductCategory
from content_service.models.site_setting import SiteSetting
from content_service.models.statistic import Statistic
from content_service.models.testimonial import Testimonial
from content_service.models.usp_item import UspItem
from content_service.seed import seed_database
from content_service.utils import seed_images

from conftest import PNG_BYTES

SEEDED_MODELS = [
    ProductCategory, Product, ProductVariant, Testimonial, SiteSetting, HeroSlide,
    Statistic, UspItem, CompanyStorySection, CompanyStoryItem, InquiryType, DeliverySettings,
]


def _counts(db):
    return {model.__name__: db.query(model).count() for model in SEEDED_MODELS}


def test_seed_populates_empty_database(db, monkeypatch):
    monkeypatch.setattr(seed_images, "candidate_dirs", lambda: [])
    seed_database(db, migrate=False)

    counts = _counts(db)
    assert counts["ProductCategory"] == 3
    assert counts["Product"] == len(seed_data.PRODUCTS)
    assert counts["Testimonial"] == 6
    assert counts["SiteSetting"] == 14
    assert counts["HeroSlide"] == 3
    assert counts["Statistic"] == 11
    assert counts["UspItem"] == 6
    assert counts["CompanyStorySection"] == 3
    assert counts["CompanyStoryItem"] == 9
    assert counts["InquiryType"] == 8
    assert counts["DeliverySettings"] == 1


def test_seed_is_idempotent(db, monkeypatch):
    monkeypatch.setattr(seed_images, "candidate_dirs", lambda: [])
    seed_database(db, migrate=False)
    first = _counts(db)
    seed_database(db, migrate=False)
    assert _counts(db) == first


def test_seeded_rows_use_fixed_ids_and_first_variant_price(db, monkeypatch):
    monkeypatch.setattr(seed_images, "candidate_dirs", lambda: [])
    seed_database(db, migrate=False)

    mangoes = db.get(Product, seed_data.product_id(1))
    assert mangoes.slug == "premium-alphonso-mangoes"
    assert mangoes.product_category_id == seed_data.ALPHONSO_CATEGORY_ID
    assert float(mangoes.base_price) == float(mangoes.variants[0].price)
    assert mangoes.season_start == "March"

    slide = db.query(HeroSlide).filter(HeroSlide.title == "Alphonso Mangoes").one()
    assert slide.product_id == seed_data.product_id(1)
    assert len(slide.features) == 4

    setting = db.query(SiteSetting).filter(SiteSetting.key == "contact.phone").one()
    assert setting.group == "contact"

    values = sorted(t.value for t in db.query(InquiryType).all())
    assert "bulk_orders" in values and "place_an_order" in values


def test_seed_loads_images_when_available(db, monkeypatch, tmp_path):
    (tmp_path / "mangoes-carousel.png").write_bytes(PNG_BYTES)
    monkeypatch.setattr(seed_images, "candidate_dirs", lambda: [tmp_path])

    seed_database(db, migrate=False)

    category = db.get(ProductCategory, seed_data.ALPHONSO_CATEGORY_ID)
    assert category.image_data == PNG_BYTES
    assert category.image_content_type == "image/png"
    assert db.get(Product, seed_data.product_id(1)).image_data == PNG_BYTES
    # Files missing from the directory are skipped
    assert db.get(ProductCategory, seed_data.OIL_CATEGORY_ID).image_data is None
    assert seed_images._cache == {}


def test_seed_skips_tables_that_already_have_rows(client, db, monkeypatch):
    monkeypatch.setattr(seed_images, "candidate_dirs", lambda: [])
    client.post("/api/inquirytypes", json={"name": "Custom only"})

    seed_database(db, migrate=False)

    assert [t.name for t in db.query(InquiryType).all()] == ["Custom only"]
    assert db.query(Testimonial).count() == 6


def test_seed_leaves_deleted_rows_deleted(client, db, monkeypatch):
    monkeypatch.setattr(seed_images, "candidate_dirs", lambda: [])
    seed_database(db, migrate=False)

    for p in client.get("/api/products", params={"pageSize": 100}).json()["data"]:
        assert client.delete(f"/api/products/{p['id']}").status_code == 200
    for c in client.get("/api/productcategories").json()["data"]:
        assert client.delete(f"/api/productcategories/{c['id']}").status_code == 200
    for t in client.get("/api/testimonials").json()["data"]:
        assert client.delete(f"/api/testimonials/{t['id']}").status_code == 200

    # Fixed ids of the deleted rows must not be inserted again
    seed_database(db, migrate=False)

    assert db.query(Product).count() == 0
    assert db.query(ProductCategory).count() == 0
    assert db.query(Testimonial).count() == 0
    assert db.query(Product).execution_options(include_deleted=True).count() == len(seed_data.PRODUCTS)
