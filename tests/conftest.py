"""
Pytest fixtures for the content service, gateway and admin client tests.
Every test runs against a fresh in-memory SQLite database.
"""
import os

# Settings are read at import time, so the environment must be in place first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_MIGRATE"] = "0"
os.environ["SEED_ON_STARTUP"] = "0"
os.environ["SEED_IMAGES_DIR"] = ""
os.environ["JWT_SECRET"] = "test-secret"
os.environ["JWT_ISSUER"] = "AtYourDoorStep"
os.environ["JWT_AUDIENCE"] = "AtYourDoorStep"

import base64

import pytest
from fastapi.testclient import TestClient

from content_service.main import app
from content_service.models.base import Base, SessionLocal, engine

PNG_BYTES = b"\x89PNG\r\n\x1a\n-test-image-"
PNG_BASE64 = base64.b64encode(PNG_BYTES).decode("ascii")


# ============== Database Fixtures ==============

@pytest.fixture(autouse=True)
def fresh_database():
    """Recreate every table so tests never see each other's rows"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    """A session on the test database"""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# ============== Client Fixtures ==============

@pytest.fixture
def client():
    """HTTP client for the content service (startup hooks are not run)"""
    return TestClient(app)


# ============== Catalogue Fixtures ==============

@pytest.fixture
def category(client):
    """Create a product category"""
    resp = client.post("/api/productcategories", json={
        "name": "Alphonso Mangoes",
        "slug": "alphonso",
        "description": "Hand-picked from Ratnagiri",
        "displayOrder": 1,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest.fixture
def product_payload(category):
    """A valid product create payload in the category fixture"""
    return {
        "name": "Premium Alphonso Mangoes",
        "slug": "premium-alphonso-mangoes",
        "shortDescription": "Sweet and juicy",
        "productCategoryId": category["id"],
        "unit": "dozen",
        "basePrice": 1200,
        "stockQuantity": 40,
        "isFeatured": True,
        "variants": [
            {"size": "1", "unit": "dozen", "price": 1200, "sku": "ALP-1D"},
            {"size": "2", "unit": "dozen", "price": 2300, "discountedPrice": 2200, "sku": "ALP-2D"},
        ],
        "features": ["Naturally ripened", "No carbide"],
        "images": [
            {"imageBase64": PNG_BASE64, "imageContentType": "image/png", "altText": "front"},
            {"imageBase64": PNG_BASE64, "imageContentType": "image/png", "altText": "box"},
        ],
    }


@pytest.fixture
def product(client, product_payload):
    """Create a product with two variants, two features and two images"""
    resp = client.post("/api/products", json=product_payload)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]
