"""
API gateway: route matching, bearer token checks and request forwarding.
"""
import time

import pytest
import requests
from fastapi.testclient import TestClient
from jose import jwt

from gateway import main as gateway_main
from gateway import proxy
from gateway.config import DEFAULT_ROUTES_FILE

SECRET = "test-secret"

ROUTES = {
    "clusters": {
        "content": {"address": "http://content:5002/"},
        "orders": {"address": "http://orders:5003"},
    },
    "routes": [
        {"path": "/api/products", "methods": ["GET"], "cluster": "content", "protected": False},
        {"path": "/api/products", "cluster": "content", "protected": True},
        {"path": "/api/sitesettings/public", "methods": ["GET"], "cluster": "content"},
        {"path": "/api/sitesettings", "cluster": "content", "protected": True},
        {"path": "/api/orders", "cluster": "orders", "protected": True},
    ],
}


class FakeUpstream:
    """Records forwarded requests and answers with a canned response"""

    def __init__(self, status_code=200, content=b'{"success": true}', headers=None, error=None):
        self.status_code = status_code
        self.content = content
        self.headers = headers or {"Content-Type": "application/json"}
        self.error = error
        self.calls = []

    def __call__(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error:
            raise self.error
        return self


def make_token(**overrides):
    claims = {
        "sub": "admin@example.com",
        "iss": "AtYourDoorStep",
        "aud": "AtYourDoorStep",
        "exp": int(time.time()) + 300,
    }
    claims.update(overrides)
    return jwt.encode(claims, SECRET, algorithm="HS256")


# ============== Gateway Fixtures ==============

@pytest.fixture
def upstream(monkeypatch):
    fake = FakeUpstream()
    monkeypatch.setattr(proxy.session, "request", fake)
    return fake


@pytest.fixture
def gateway(monkeypatch):
    """Gateway client wired to the in-test route table"""
    monkeypatch.setattr(gateway_main, "route_table", proxy.RouteTable.from_dict(ROUTES))
    return TestClient(gateway_main.app)


# ============== Route Table ==============

def test_longest_prefix_and_method_routes_win():
    table = proxy.RouteTable.from_dict(ROUTES)

    public = table.match("/api/products/slug/mango", "GET")
    assert public.protected is False
    assert public.address == "http://content:5002"

    assert table.match("/api/products", "POST").protected is True
    assert table.match("/api/sitesettings/public/info", "get").protected is False
    assert table.match("/api/sitesettings/public", "POST").protected is True
    assert table.match("/api/sitesettings/group/social", "GET").protected is True


def test_prefix_matches_on_segment_boundaries():
    table = proxy.RouteTable.from_dict(ROUTES)
    assert table.match("/api/productsx", "GET") is None
    assert table.match("/health/x", "GET") is None


def test_unknown_cluster_is_rejected():
    with pytest.raises(ValueError):
        proxy.RouteTable.from_dict({"clusters": {}, "routes": [{"path": "/api/x", "cluster": "missing"}]})


def test_shipped_route_file_loads():
    table = proxy.RouteTable.load(str(DEFAULT_ROUTES_FILE))
    assert table.match("/api/contact", "POST").protected is False
    assert table.match("/api/contact", "GET").protected is True
    assert table.match("/api/deliverysettings/charges", "GET").protected is False
    assert table.match("/api/orders/123", "GET").cluster == "orders"


def test_forward_headers_drop_hop_by_hop():
    headers = proxy.forward_headers(
        {"host": "shop.example.com", "connection": "keep-alive", "x-forwarded-for": "10.0.0.1", "accept": "*/*"},
        "10.0.0.2",
        "https",
    )
    assert "connection" not in headers and "host" not in headers
    assert headers["accept"] == "*/*"
    assert headers["X-Forwarded-For"] == "10.0.0.1, 10.0.0.2"
    assert headers["X-Forwarded-Host"] == "shop.example.com"
    assert headers["X-Forwarded-Proto"] == "https"


# ============== Proxying ==============

def test_public_route_is_forwarded(gateway, upstream):
    upstream.headers = {"Content-Type": "application/json", "Connection": "close", "X-Upstream": "content"}
    resp = gateway.get("/api/products", params={"page": 2})

    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert resp.headers["x-upstream"] == "content"

    call = upstream.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://content:5002/api/products?page=2"
    assert call["allow_redirects"] is False
    assert call["headers"]["X-Forwarded-Proto"] == "http"


def test_protected_route_requires_token(gateway, upstream):
    resp = gateway.post("/api/products", json={"name": "x"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Not authenticated"
    assert resp.headers["www-authenticate"] == "Bearer"
    assert upstream.calls == []


def test_valid_token_is_forwarded_with_body(gateway, upstream):
    upstream.status_code = 201
    token = make_token()
    resp = gateway.post("/api/products", json={"name": "x"}, headers={"Authorization": f"Bearer {token}"})

    assert resp.status_code == 201
    call = upstream.calls[0]
    assert call["url"] == "http://content:5002/api/products"
    assert call["headers"]["authorization"] == f"Bearer {token}"
    assert b'"name"' in call["data"]


def test_expired_token_is_rejected(gateway, upstream):
    token = make_token(exp=int(time.time()) - 5)
    resp = gateway.get("/api/orders", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Token expired"


@pytest.mark.parametrize("claims", [
    {"iss": "someone-else"},
    {"aud": "another-app"},
])
def test_token_with_wrong_issuer_or_audience_is_rejected(gateway, upstream, claims):
    resp = gateway.get("/api/orders", headers={"Authorization": f"Bearer {make_token(**claims)}"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid token"


def test_token_signed_with_other_key_is_rejected(gateway, upstream):
    token = jwt.encode(
        {"iss": "AtYourDoorStep", "aud": "AtYourDoorStep", "exp": int(time.time()) + 300},
        "not-the-secret",
        algorithm="HS256",
    )
    resp = gateway.get("/api/orders", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_unmatched_path_is_not_found(gateway, upstream):
    resp = gateway.get("/api/unknown")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "No route for GET /api/unknown", "data": None, "errors": None}


def test_unreachable_upstream_is_bad_gateway(gateway, upstream):
    upstream.error = requests.ConnectionError("connection refused")
    resp = gateway.get("/api/products")
    assert resp.status_code == 502
    assert resp.json()["message"] == "Upstream service 'content' is unavailable"


def test_health(gateway):
    assert gateway.get("/health").json() == {"status": "ok"}
