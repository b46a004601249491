"""
Storefront content endpoints: hero slides, testimonials, statistics, USP items,
inquiry types, company story, content blocks and delivery settings.
"""
import uuid

from conftest import PNG_BASE64


# ============== Hero Slides ==============

def test_hero_slide_crud(client):
    resp = client.post("/api/heroslides", json={
        "title": "Alphonso Season",
        "subtitle": "AT YOUR DOORSTEP",
        "gradientStart": "#FFB347",
        "gradientEnd": "#FF7F50",
        "imageBase64": PNG_BASE64,
        "imageContentType": "image/png",
        "features": ["GI tagged", "Farm fresh"],
    })
    assert resp.status_code == 201
    slide = resp.json()["data"]
    assert slide["features"] == ["GI tagged", "Farm fresh"]
    assert slide["imageBase64"] == PNG_BASE64

    # Features are kept when omitted
    kept = client.put(f"/api/heroslides/{slide['id']}", json={"title": "Alphonso Season"}).json()["data"]
    assert kept["features"] == ["GI tagged", "Farm fresh"]
    assert kept["imageBase64"] == PNG_BASE64

    replaced = client.put(f"/api/heroslides/{slide['id']}", json={
        "title": "Mango Mania",
        "features": ["Hand picked"],
        "isActive": False,
    }).json()["data"]
    assert replaced["title"] == "Mango Mania"
    assert replaced["features"] == ["Hand picked"]

    assert client.get("/api/heroslides/active").json()["data"] == []
    assert len(client.get("/api/heroslides").json()["data"]) == 1

    assert client.delete(f"/api/heroslides/{slide['id']}").status_code == 200
    assert client.get(f"/api/heroslides/{slide['id']}").status_code == 404


def test_hero_slide_rejects_bad_colour_and_unknown_product(client):
    assert client.post("/api/heroslides", json={"title": "x", "gradientStart": "orange"}).status_code == 400
    resp = client.post("/api/heroslides", json={"title": "x", "productId": str(uuid.uuid4())})
    assert resp.status_code == 404
    assert resp.json()["message"] == "Product not found"


# ============== Testimonials ==============

def test_testimonial_visibility(client):
    def create(name, **extra):
        resp = client.post("/api/testimonials", json={"customerName": name, "content": "Lovely mangoes", **extra})
        assert resp.status_code == 201
        return resp.json()["data"]

    shown = create("Meera", isFeatured=True)
    create("Kiran", isApproved=False, isFeatured=True)
    create("Dev", isActive=False)

    assert shown["rating"] == 5
    active = [t["customerName"] for t in client.get("/api/testimonials/active").json()["data"]]
    featured = [t["customerName"] for t in client.get("/api/testimonials/featured").json()["data"]]
    assert active == ["Meera"]
    assert featured == ["Meera"]
    assert len(client.get("/api/testimonials").json()["data"]) == 3


def test_testimonial_rating_bounds(client):
    resp = client.post("/api/testimonials", json={"customerName": "A", "content": "B", "rating": 6})
    assert resp.status_code == 400


# ============== Statistics & USP Items ==============

def test_statistics_by_section(client):
    for label, section, order in [("Happy customers", "home", 1), ("Farms", "about", 1), ("Cities", "home", 0)]:
        resp = client.post("/api/statistics", json={
            "label": label, "value": "100", "suffix": "+", "section": section, "displayOrder": order,
        })
        assert resp.status_code == 201

    home = [s["label"] for s in client.get("/api/statistics/section/home").json()["data"]]
    assert home == ["Cities", "Happy customers"]
    assert len(client.get("/api/statistics/active").json()["data"]) == 3


def test_statistic_update_and_delete(client):
    stat = client.post("/api/statistics", json={"label": "Orders", "value": "5000"}).json()["data"]
    assert stat["section"] == "home"
    updated = client.put(f"/api/statistics/{stat['id']}", json={"label": "Orders", "value": "6000"}).json()["data"]
    assert updated["value"] == "6000"
    assert client.delete(f"/api/statistics/{stat['id']}").status_code == 200
    assert client.get(f"/api/statistics/{stat['id']}").json()["message"] == "Statistic not found"


def test_usp_items(client):
    item = client.post("/api/uspitems", json={
        "title": "Farm to door", "description": "No middlemen", "icon": "truck",
    }).json()["data"]
    client.post("/api/uspitems", json={"title": "Hidden", "description": "x", "isActive": False})

    assert [u["title"] for u in client.get("/api/uspitems/active").json()["data"]] == ["Farm to door"]
    assert client.put(f"/api/uspitems/{item['id']}", json={
        "title": "Farm to doorstep", "description": "No middlemen",
    }).json()["data"]["title"] == "Farm to doorstep"
    assert client.delete(f"/api/uspitems/{uuid.uuid4()}").json()["message"] == "USP item not found"


# ============== Inquiry Types ==============

def test_inquiry_type_value_defaults_from_name(client):
    derived = client.post("/api/inquirytypes", json={"name": "Bulk Orders & Wholesale"}).json()["data"]
    assert derived["value"] == "bulk_orders_wholesale"

    explicit = client.post("/api/inquirytypes", json={"name": "Other", "value": "misc"}).json()["data"]
    assert explicit["value"] == "misc"

    assert len(client.get("/api/inquirytypes/active").json()["data"]) == 2
    assert client.delete(f"/api/inquirytypes/{explicit['id']}").status_code == 200
    assert len(client.get("/api/inquirytypes").json()["data"]) == 1


# ============== Company Story ==============

def test_company_story_sections_and_items(client):
    resp = client.post("/api/companystory", json={
        "title": "Our Story",
        "subtitle": "From Ratnagiri orchards",
        "items": [{"description": "Started in 2019"}, {"title": "Today", "description": "10,000 families"}],
    })
    assert resp.status_code == 201
    section = resp.json()["data"]
    assert section["sectionKey"] == "our_story"
    assert [i["displayOrder"] for i in section["items"]] == [0, 1]

    assert client.post("/api/companystory", json={"title": "Our Story"}).status_code == 409

    added = client.post(f"/api/companystory/{section['id']}/items", json={"description": "Next: pan India"})
    assert added.status_code == 201
    item = added.json()["data"]
    assert item["displayOrder"] == 2

    updated = client.put(f"/api/companystory/{section['id']}/items/{item['id']}", json={
        "title": "Tomorrow", "description": "Next: pan India",
    }).json()["data"]
    assert updated["title"] == "Tomorrow"
    assert updated["displayOrder"] == 2

    by_key = client.get("/api/companystory/key/our_story").json()["data"]
    assert len(by_key["items"]) == 3

    assert client.delete(f"/api/companystory/{section['id']}/items/{item['id']}").status_code == 200
    assert len(client.get(f"/api/companystory/{section['id']}").json()["data"]["items"]) == 2
    missing = client.delete(f"/api/companystory/{section['id']}/items/{item['id']}")
    assert missing.json()["message"] == "Company story item not found"


def test_company_story_key_change_conflicts(client):
    first = client.post("/api/companystory", json={"sectionKey": "our_spaces", "title": "Our Spaces"}).json()["data"]
    client.post("/api/companystory", json={"sectionKey": "our_products", "title": "Our Products"})

    resp = client.put(f"/api/companystory/{first['id']}", json={"sectionKey": "our_products", "title": "Our Spaces"})
    assert resp.status_code == 409

    renamed = client.put(f"/api/companystory/{first['id']}", json={"sectionKey": "our_farms", "title": "Our Farms"})
    assert renamed.json()["data"]["sectionKey"] == "our_farms"


def test_deleting_section_hides_it(client):
    section = client.post("/api/companystory", json={"title": "Our Products"}).json()["data"]
    assert client.delete(f"/api/companystory/{section['id']}").status_code == 200
    assert client.get("/api/companystory/key/our_products").status_code == 404
    assert client.post("/api/companystory", json={"title": "Our Products"}).status_code == 201


# ============== Content Blocks ==============

def test_content_blocks(client):
    block = client.post("/api/contentblocks", json={
        "blockKey": "about.hero",
        "page": "about",
        "section": "hero",
        "title": "About us",
        "metadata": '{"align": "left"}',
    })
    assert block.status_code == 201
    block = block.json()["data"]
    assert block["metadata"] == '{"align": "left"}'
    assert block["contentType"] == "text"

    client.post("/api/contentblocks", json={"blockKey": "about.team", "page": "about", "section": "team"})
    client.post("/api/contentblocks", json={"blockKey": "home.hero", "page": "home", "section": "hero"})

    assert client.post("/api/contentblocks", json={
        "blockKey": "about.hero", "page": "about", "section": "hero",
    }).status_code == 409

    about = [b["blockKey"] for b in client.get("/api/contentblocks/page/about").json()["data"]]
    assert sorted(about) == ["about.hero", "about.team"]
    team = client.get("/api/contentblocks/page/about", params={"section": "team"}).json()["data"]
    assert [b["blockKey"] for b in team] == ["about.team"]

    assert client.get("/api/contentblocks/key/about.hero").json()["data"]["id"] == block["id"]
    assert client.get("/api/contentblocks/key/missing").status_code == 404


# ============== Delivery Settings ==============

def test_delivery_charges_default_without_settings(client):
    assert client.get("/api/deliverysettings").status_code == 404
    charges = client.get("/api/deliverysettings/charges").json()["data"]
    assert charges["freeDeliveryThreshold"] == 500
    assert charges["standardDeliveryCharge"] == 50
    assert charges["expressDeliveryCharge"] == 100


def test_delivery_settings_save_is_an_upsert(client):
    first = client.post("/api/deliverysettings", json={
        "freeDeliveryThreshold": 1000,
        "standardDeliveryCharge": 49.999,
        "expressDeliveryCharge": 100,
    }).json()["data"]
    assert first["standardDeliveryCharge"] == 50.0

    second = client.post("/api/deliverysettings", json={
        "freeDeliveryThreshold": 1500,
        "standardDeliveryCharge": 60,
        "deliveryNote": "Sundays off",
    }).json()["data"]
    assert second["id"] == first["id"]

    charges = client.get("/api/deliverysettings/charges").json()["data"]
    assert charges["freeDeliveryThreshold"] == 1500
    assert charges["deliveryNote"] == "Sundays off"
    assert "id" not in charges

    assert client.delete(f"/api/deliverysettings/{first['id']}").status_code == 200
    assert client.get("/api/deliverysettings").status_code == 404
