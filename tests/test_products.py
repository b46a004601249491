"""
Product endpoints: nested create, paging, variants and soft delete.
"""
import uuid

from content_service.models.product import Product, ProductImage

from conftest import PNG_BASE64


def test_create_product_with_children(product, category):
    assert product["slug"] == "premium-alphonso-mangoes"
    assert product["productCategoryName"] == "Alphonso Mangoes"
    assert product["productCategorySlug"] == "alphonso"
    assert product["basePrice"] == 1200.0
    assert [v["sku"] for v in product["variants"]] == ["ALP-1D", "ALP-2D"]
    assert product["variants"][1]["discountedPrice"] == 2200.0
    assert product["features"] == ["Naturally ripened", "No carbide"]
    assert len(product["images"]) == 2


def test_first_image_is_primary_by_default(product):
    primaries = [i for i in product["images"] if i["isPrimary"]]
    assert len(primaries) == 1
    assert primaries[0]["altText"] == "front"
    assert product["primaryImageBase64"] == PNG_BASE64
    assert product["primaryImageContentType"] == "image/png"


def test_flagged_image_becomes_primary(client, product_payload):
    product_payload["images"][1]["isPrimary"] = True
    data = client.post("/api/products", json=product_payload).json()["data"]
    primaries = [i["altText"] for i in data["images"] if i["isPrimary"]]
    assert primaries == ["box"]


def test_duplicate_slug_conflicts(client, product, product_payload):
    product_payload["variants"] = []
    resp = client.post("/api/products", json=product_payload)
    assert resp.status_code == 409
    assert resp.json()["message"] == "Slug already exists"


def test_duplicate_sku_in_payload_is_rejected(client, product_payload):
    product_payload["variants"][1]["sku"] = "ALP-1D"
    resp = client.post("/api/products", json=product_payload)
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_sku_taken_by_other_product_conflicts(client, product, product_payload):
    product_payload["slug"] = "another-mango"
    product_payload["variants"] = [{"size": "3", "unit": "dozen", "price": 3000, "sku": "ALP-2D"}]
    resp = client.post("/api/products", json=product_payload)
    assert resp.status_code == 409
    assert resp.json()["message"] == "SKU ALP-2D already exists"


def test_unknown_category_is_not_found(client, product_payload):
    product_payload["productCategoryId"] = str(uuid.uuid4())
    resp = client.post("/api/products", json=product_payload)
    assert resp.status_code == 404
    assert resp.json()["message"] == "Product category not found"


def test_non_positive_price_is_rejected(client, product_payload):
    product_payload["basePrice"] = 0
    assert client.post("/api/products", json=product_payload).status_code == 400


def test_paged_listing(client, category):
    for n in range(5):
        resp = client.post("/api/products", json={
            "name": f"Mango {n}",
            "slug": f"mango-{n}",
            "productCategoryId": category["id"],
            "basePrice": 100 + n,
            "displayOrder": n,
            "isFeatured": n % 2 == 0,
        })
        assert resp.status_code == 201

    body = client.get("/api/products", params={"page": 2, "pageSize": 2}).json()
    assert body["success"] is True
    assert [p["slug"] for p in body["data"]] == ["mango-2", "mango-3"]
    assert body["meta"] == {"page": 2, "pageSize": 2, "total": 5, "totalPages": 3}

    featured = client.get("/api/products", params={"featured": "true"}).json()
    assert featured["meta"]["total"] == 3

    by_category = client.get("/api/products", params={"category": "alphonso"}).json()
    assert by_category["meta"]["total"] == 5
    assert client.get("/api/products", params={"category": "oil"}).json()["meta"]["total"] == 0


def test_page_size_is_capped(client):
    assert client.get("/api/products", params={"pageSize": 101}).status_code == 400


def test_featured_and_lookups(client, product):
    featured = client.get("/api/products/featured").json()["data"]
    assert [p["id"] for p in featured] == [product["id"]]

    by_slug = client.get("/api/products/slug/premium-alphonso-mangoes")
    assert by_slug.status_code == 200
    assert by_slug.json()["data"]["id"] == product["id"]

    by_category = client.get("/api/products/category/alphonso").json()["data"]
    assert [p["id"] for p in by_category] == [product["id"]]

    assert client.get("/api/products/slug/unknown").status_code == 404


def test_update_product_scalars(client, product, product_payload):
    product_payload.update(name="Alphonso Gold", basePrice=1350.555, isFeatured=False)
    resp = client.put(f"/api/products/{product['id']}", json=product_payload)
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["name"] == "Alphonso Gold"
    assert data["basePrice"] == 1350.56
    assert data["isFeatured"] is False
    # Child collections are managed separately
    assert len(data["variants"]) == 2
    assert len(data["images"]) == 2


def test_category_reports_product_count(client, product):
    data = client.get(f"/api/productcategories/{product['productCategoryId']}").json()["data"]
    assert data["productCount"] == 1


def test_category_count_ignores_deleted_products(client, product):
    client.delete(f"/api/products/{product['id']}")
    data = client.get(f"/api/productcategories/{product['productCategoryId']}").json()["data"]
    assert data["productCount"] == 0


def test_primary_image_falls_back_to_first_image():
    images = [ProductImage(alt_text="front", is_primary=False), ProductImage(alt_text="back", is_primary=False)]
    assert Product(name="Kesar", images=images).primary_image is images[0]


def test_primary_image_is_none_without_images():
    assert Product(name="Kesar").primary_image is None


def test_variant_lifecycle(client, product):
    pid = product["id"]
    added = client.post(f"/api/products/{pid}/variants", json={
        "size": "5", "unit": "kg", "price": 900, "sku": "ALP-5KG",
    })
    assert added.status_code == 201
    variant = added.json()["data"]
    assert variant["stockQuantity"] == 100

    updated = client.put(f"/api/products/{pid}/variants/{variant['id']}", json={
        "size": "5", "unit": "kg", "price": 950, "sku": "ALP-5KG", "isInStock": False,
    })
    assert updated.status_code == 200
    assert updated.json()["data"]["price"] == 950.0
    assert updated.json()["data"]["isInStock"] is False

    clash = client.put(f"/api/products/{pid}/variants/{variant['id']}", json={
        "size": "5", "unit": "kg", "price": 950, "sku": "ALP-1D",
    })
    assert clash.status_code == 409

    deleted = client.delete(f"/api/products/{pid}/variants/{variant['id']}")
    assert deleted.status_code == 200
    skus = [v["sku"] for v in client.get(f"/api/products/{pid}").json()["data"]["variants"]]
    assert "ALP-5KG" not in skus

    assert client.delete(f"/api/products/{pid}/variants/{variant['id']}").status_code == 404


def test_deleted_variant_sku_can_be_reused(client, product):
    pid = product["id"]
    first = product["variants"][0]
    assert client.delete(f"/api/products/{pid}/variants/{first['id']}").status_code == 200
    resp = client.post(f"/api/products/{pid}/variants", json={
        "size": "1", "unit": "dozen", "price": 1250, "sku": first["sku"],
    })
    assert resp.status_code == 201


def test_delete_product_hides_it_and_unlinks_slides(client, product):
    slide = client.post("/api/heroslides", json={"title": "Mango season", "productId": product["id"]}).json()["data"]
    assert slide["productId"] == product["id"]

    assert client.delete(f"/api/products/{product['id']}").status_code == 200
    assert client.get(f"/api/products/{product['id']}").status_code == 404
    assert client.get("/api/products").json()["meta"]["total"] == 0

    slide = client.get(f"/api/heroslides/{slide['id']}").json()["data"]
    assert slide["productId"] is None

    # The category is empty again
    assert client.delete(f"/api/productcategories/{product['productCategoryId']}").status_code == 200
