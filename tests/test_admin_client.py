"""
Admin client against the content service, using the test client as its HTTP session.
"""
import pytest
import requests

from admin_client.client import ApiError, ContentClient


@pytest.fixture
def admin(client):
    return ContentClient("http://testserver/", token="admin-token", session=client)


def test_catalogue_workflow(admin):
    category = admin.categories.create({"name": "Cold Pressed Oils", "slug": "oil"})
    product = admin.products.create({
        "name": "Cold Pressed Coconut Oil",
        "slug": "cold-pressed-coconut-oil",
        "productCategoryId": category["id"],
        "basePrice": 220,
        "isFeatured": True,
        "variants": [{"size": "200 ml", "unit": "ml", "price": 220, "sku": "OIL-CO-200"}],
    })

    page = admin.products.list(page=1, page_size=10, category="oil")
    assert [p["id"] for p in page["items"]] == [product["id"]]
    assert page["meta"]["total"] == 1
    assert admin.products.list(featured=False)["meta"]["total"] == 0
    assert admin.products.by_slug("cold-pressed-coconut-oil")["id"] == product["id"]
    assert [p["slug"] for p in admin.products.featured()] == ["cold-pressed-coconut-oil"]
    assert len(admin.products.by_category("oil")) == 1

    variant = admin.products.add_variant(product["id"], {"size": "1 L", "unit": "L", "price": 920})
    updated = admin.products.update_variant(product["id"], variant["id"], {"size": "1 L", "unit": "L", "price": 899})
    assert updated["price"] == 899.0
    assert admin.products.delete_variant(product["id"], variant["id"]) is True

    assert admin.products.delete(product["id"]) is True
    assert admin.categories.delete(category["id"]) is True


def test_errors_raise_api_error(admin):
    admin.categories.create({"name": "Jaggery", "slug": "jaggery"})
    with pytest.raises(ApiError) as exc:
        admin.categories.create({"name": "Jaggery again", "slug": "jaggery"})
    assert exc.value.status_code == 409
    assert exc.value.message == "Slug already exists"

    with pytest.raises(ApiError) as exc:
        admin.categories.create({"name": "", "slug": "bad slug"})
    assert exc.value.status_code == 400
    assert exc.value.errors


def test_settings_and_public_info(admin):
    admin.site_settings.upsert({"key": "general.site_name", "value": "Acme"})
    assert admin.site_settings.bulk_update({"contact.email": "hi@acme.test", "social.instagram": "acme"}) is True

    assert admin.site_settings.value("general.site_name") == "Acme"
    assert admin.site_settings.by_group("contact") == {"contact.email": "hi@acme.test"}
    assert admin.site_settings.public()["social.instagram"] == "acme"
    info = admin.site_settings.public_info()
    assert info["companyName"] == "Acme"
    assert info["socialLinks"] == {"instagram": "acme"}


def test_content_resources(admin):
    section = admin.company_story.create({"title": "Our Spaces"})
    item = admin.company_story.add_item(section["id"], {"description": "Orchards in Ratnagiri"})
    admin.company_story.update_item(section["id"], item["id"], {"description": "Orchards in Ratnagiri", "icon": "tree"})
    assert admin.company_story.by_key("our_spaces")["items"][0]["icon"] == "tree"
    assert admin.company_story.delete_item(section["id"], item["id"]) is True

    admin.statistics.create({"label": "Farms", "value": "12", "section": "about"})
    assert [s["label"] for s in admin.statistics.by_section("about")] == ["Farms"]

    admin.testimonials.create({"customerName": "Meera", "content": "Great", "isFeatured": True})
    assert [t["customerName"] for t in admin.testimonials.featured()] == ["Meera"]

    admin.content_blocks.create({"blockKey": "home.intro", "page": "home", "section": "intro"})
    assert admin.content_blocks.by_key("home.intro")["page"] == "home"
    assert len(admin.content_blocks.by_page("home", section="intro")) == 1

    admin.usp_items.create({"title": "Fresh", "description": "Picked to order"})
    admin.inquiry_types.create({"name": "Bulk Orders"})
    admin.hero_slides.create({"title": "Season"})
    assert len(admin.usp_items.active()) == 1
    assert admin.inquiry_types.list()[0]["value"] == "bulk_orders"
    assert len(admin.hero_slides.list()) == 1


def test_delivery_and_contact(admin):
    assert admin.delivery_settings.charges()["freeDeliveryThreshold"] == 500
    saved = admin.delivery_settings.save({"freeDeliveryThreshold": 999, "standardDeliveryCharge": 40})
    assert admin.delivery_settings.current()["id"] == saved["id"]

    submission = admin.contact.submit({
        "name": "Ravi",
        "email": "ravi@example.com",
        "inquiryType": "other",
        "message": "Hello",
    })
    assert admin.contact.unread_count() == 1
    admin.contact.set_status(submission["id"], "read", admin_notes="Seen")
    assert admin.contact.unread_count() == 0

    inbox = admin.contact.list(status="read")
    assert inbox["meta"]["total"] == 1
    assert inbox["items"][0]["adminNotes"] == "Seen"


def test_connection_failure_raises_api_error():
    class BrokenSession:
        def request(self, *args, **kwargs):
            raise requests.ConnectionError("refused")

    admin = ContentClient("http://content.invalid", session=BrokenSession())
    with pytest.raises(ApiError) as exc:
        admin.categories.list()
    assert exc.value.status_code == 0
