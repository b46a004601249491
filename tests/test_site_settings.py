"""
Site settings: upsert by key, bulk updates, grouped reads and the public site info.
"""
from content_service.routers.site_settings import build_public_info


def _upsert(client, key, value, **extra):
    resp = client.post("/api/sitesettings", json={"key": key, "value": value, **extra})
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_upsert_creates_then_updates(client):
    created = _upsert(client, "contact.phone", "+91 98765 43210")
    assert created["group"] == "contact"
    assert created["settingType"] == "string"
    assert created["isPublic"] is True

    updated = _upsert(client, "contact.phone", "+91 11111 22222")
    assert updated["id"] == created["id"]
    assert updated["value"] == "+91 11111 22222"
    assert len(client.get("/api/sitesettings").json()["data"]) == 1


def test_bare_key_defaults_to_general_group(client):
    assert _upsert(client, "maintenance_mode", "false")["group"] == "general"


def test_invalid_key_is_rejected(client):
    resp = client.post("/api/sitesettings", json={"key": "bad key!", "value": "x"})
    assert resp.status_code == 400


def test_bulk_update(client):
    _upsert(client, "general.site_name", "Old")
    resp = client.post("/api/sitesettings/bulk", json={
        "general.site_name": "At Your Doorstep",
        "social.instagram": "https://instagram.com/atyourdoorstep",
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["data"] is True
    assert body["message"] == "Updated 2 settings"

    assert client.get("/api/sitesettings/key/general.site_name").json()["data"] == "At Your Doorstep"
    assert client.get("/api/sitesettings/group/social").json()["data"] == {
        "social.instagram": "https://instagram.com/atyourdoorstep",
    }


def test_get_value_by_key(client):
    _upsert(client, "general.tagline", "Farm fresh")
    assert client.get("/api/sitesettings/key/general.tagline").json()["data"] == "Farm fresh"

    missing = client.get("/api/sitesettings/key/general.nothing")
    assert missing.status_code == 404
    assert missing.json()["message"] == "Setting 'general.nothing' not found"


def test_public_only_lists_public_settings(client):
    _upsert(client, "contact.email", "hello@example.com")
    _upsert(client, "integrations.api_key", "secret", isPublic=False)
    assert client.get("/api/sitesettings/public").json()["data"] == {"contact.email": "hello@example.com"}


def test_public_info_reads_canonical_keys(client):
    client.post("/api/sitesettings/bulk", json={
        "general.site_name": "Acme",
        "general.tagline": "Straight from the farm",
        "contact.email": "hello@acme.test",
        "contact.phone": "+91 90000 00000",
        "social.facebook": "https://facebook.com/acme",
    })
    info = client.get("/api/sitesettings/public/info").json()["data"]
    assert info["companyName"] == "Acme"
    assert info["tagLine"] == "Straight from the farm"
    assert info["email"] == "hello@acme.test"
    assert info["phone"] == "+91 90000 00000"
    assert info["address"] is None
    assert info["socialLinks"] == {"facebook": "https://facebook.com/acme"}


def test_public_info_defaults_company_name(client):
    info = client.get("/api/sitesettings/public/info").json()["data"]
    assert info["companyName"] == "At Your Doorstep"
    assert info["socialLinks"] == {}


def test_public_info_falls_back_to_legacy_keys():
    info = build_public_info({
        "company_name": "Legacy Co",
        "contact_email": "old@legacy.test",
        "social_twitter": "https://x.com/legacy",
        "social.twitter": "https://x.com/current",
        "social_youtube": "https://youtube.com/legacy",
    })
    assert info.companyName == "Legacy Co"
    assert info.email == "old@legacy.test"
    assert info.socialLinks == {
        "twitter": "https://x.com/current",
        "youtube": "https://youtube.com/legacy",
    }


def test_update_and_delete_by_id(client):
    setting = _upsert(client, "general.logo", "logo.png")
    resp = client.put(f"/api/sitesettings/{setting['id']}", json={"value": "logo-v2.png", "isPublic": False})
    assert resp.status_code == 200
    assert resp.json()["data"]["value"] == "logo-v2.png"
    assert resp.json()["data"]["isPublic"] is False

    assert client.delete(f"/api/sitesettings/{setting['id']}").status_code == 200
    assert client.get(f"/api/sitesettings/{setting['id']}").status_code == 404
    # The key is free again after a soft delete
    assert _upsert(client, "general.logo", "logo-v3.png")["id"] != setting["id"]
