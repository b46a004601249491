"""Thin client for the content admin API.

Every call unwraps the ``{success, message, data, errors}`` envelope and
returns ``data``; failures raise :class:`ApiError`.
"""
from typing import Any, Dict, List, Optional

import requests


class ApiError(Exception):
    def __init__(self, status_code: int, message: str, errors: Optional[List[str]] = None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.errors = errors or []


class ContentClient:
    def __init__(self, base_url: str, token: Optional[str] = None, session=None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

        self.categories = Resource(self, "/api/productcategories")
        self.products = ProductResource(self, "/api/products")
        self.hero_slides = Resource(self, "/api/heroslides")
        self.testimonials = TestimonialResource(self, "/api/testimonials")
        self.statistics = StatisticResource(self, "/api/statistics")
        self.usp_items = Resource(self, "/api/uspitems")
        self.company_story = CompanyStoryResource(self, "/api/companystory")
        self.site_settings = SiteSettingResource(self, "/api/sitesettings")
        self.delivery_settings = DeliverySettingsResource(self, "/api/deliverysettings")
        self.inquiry_types = Resource(self, "/api/inquirytypes")
        self.contact = ContactResource(self, "/api/contact")
        self.content_blocks = ContentBlockResource(self, "/api/contentblocks")

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def request_envelope(self, method: str, path: str, json: Any = None, params: Optional[dict] = None) -> dict:
        url = self.base_url + path
        try:
            resp = self.session.request(
                method, url, json=json, params=params, headers=self._headers(), timeout=self.timeout
            )
        except requests.RequestException as e:
            raise ApiError(0, f"Request to {url} failed: {e}") from e
        try:
            body = resp.json()
        except ValueError:
            raise ApiError(resp.status_code, resp.text or "Empty response")
        if resp.status_code >= 400 or not body.get("success", False):
            raise ApiError(resp.status_code, body.get("message") or "Request failed", body.get("errors"))
        return body

    def call(self, method: str, path: str, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.request_envelope(method, path, json=json, params=params).get("data")


class Resource:
    def __init__(self, client: ContentClient, path: str):
        self.client = client
        self.path = path

    def list(self) -> List[dict]:
        return self.client.call("GET", self.path)

    def active(self) -> List[dict]:
        return self.client.call("GET", f"{self.path}/active")

    def get(self, id) -> dict:
        return self.client.call("GET", f"{self.path}/{id}")

    def create(self, payload: dict) -> dict:
        return self.client.call("POST", self.path, json=payload)

    def update(self, id, payload: dict) -> dict:
        return self.client.call("PUT", f"{self.path}/{id}", json=payload)

    def delete(self, id) -> bool:
        return self.client.call("DELETE", f"{self.path}/{id}")


class ProductResource(Resource):
    def list(self, page: int = 1, page_size: int = 20, category: Optional[str] = None,
             featured: Optional[bool] = None) -> dict:
        """One page of products: ``{"items": [...], "meta": {...}}``."""
        params = {"page": page, "pageSize": page_size}
        if category:
            params["category"] = category
        if featured is not None:
            params["featured"] = str(featured).lower()
        body = self.client.request_envelope("GET", self.path, params=params)
        return {"items": body.get("data") or [], "meta": body.get("meta")}

    def featured(self, limit: int = 6) -> List[dict]:
        return self.client.call("GET", f"{self.path}/featured", params={"limit": limit})

    def by_slug(self, slug: str) -> dict:
        return self.client.call("GET", f"{self.path}/slug/{slug}")

    def by_category(self, slug: str) -> List[dict]:
        return self.client.call("GET", f"{self.path}/category/{slug}")

    def add_variant(self, product_id, payload: dict) -> dict:
        return self.client.call("POST", f"{self.path}/{product_id}/variants", json=payload)

    def update_variant(self, product_id, variant_id, payload: dict) -> dict:
        return self.client.call("PUT", f"{self.path}/{product_id}/variants/{variant_id}", json=payload)

    def delete_variant(self, product_id, variant_id) -> bool:
        return self.client.call("DELETE", f"{self.path}/{product_id}/variants/{variant_id}")


class TestimonialResource(Resource):
    def featured(self, limit: int = 6) -> List[dict]:
        return self.client.call("GET", f"{self.path}/featured", params={"limit": limit})


class StatisticResource(Resource):
    def by_section(self, section: str) -> List[dict]:
        return self.client.call("GET", f"{self.path}/section/{section}")


class CompanyStoryResource(Resource):
    def by_key(self, section_key: str) -> dict:
        return self.client.call("GET", f"{self.path}/key/{section_key}")

    def add_item(self, section_id, payload: dict) -> dict:
        return self.client.call("POST", f"{self.path}/{section_id}/items", json=payload)

    def update_item(self, section_id, item_id, payload: dict) -> dict:
        return self.client.call("PUT", f"{self.path}/{section_id}/items/{item_id}", json=payload)

    def delete_item(self, section_id, item_id) -> bool:
        return self.client.call("DELETE", f"{self.path}/{section_id}/items/{item_id}")


class ContentBlockResource(Resource):
    def by_key(self, block_key: str) -> dict:
        return self.client.call("GET", f"{self.path}/key/{block_key}")

    def by_page(self, page: str, section: Optional[str] = None) -> List[dict]:
        params = {"section": section} if section else None
        return self.client.call("GET", f"{self.path}/page/{page}", params=params)


class SiteSettingResource(Resource):
    def by_group(self, group: str) -> Dict[str, str]:
        return self.client.call("GET", f"{self.path}/group/{group}")

    def value(self, key: str) -> str:
        return self.client.call("GET", f"{self.path}/key/{key}")

    def public(self) -> Dict[str, str]:
        return self.client.call("GET", f"{self.path}/public")

    def public_info(self) -> dict:
        return self.client.call("GET", f"{self.path}/public/info")

    def upsert(self, payload: dict) -> dict:
        return self.create(payload)

    def bulk_update(self, values: Dict[str, str]) -> bool:
        return self.client.call("POST", f"{self.path}/bulk", json=values)


class DeliverySettingsResource(Resource):
    def current(self) -> dict:
        return self.client.call("GET", self.path)

    def charges(self) -> dict:
        return self.client.call("GET", f"{self.path}/charges")

    def save(self, payload: dict) -> dict:
        return self.client.call("POST", self.path, json=payload)


class ContactResource(Resource):
    def list(self, page: int = 1, page_size: int = 20, status: Optional[str] = None) -> dict:
        params = {"page": page, "pageSize": page_size}
        if status:
            params["status"] = status
        body = self.client.request_envelope("GET", self.path, params=params)
        return {"items": body.get("data") or [], "meta": body.get("meta")}

    def submit(self, payload: dict) -> dict:
        return self.create(payload)

    def unread_count(self) -> int:
        return self.client.call("GET", f"{self.path}/unread-count")

    def set_status(self, id, status: str, admin_notes: Optional[str] = None) -> dict:
        payload = {"status": status}
        if admin_notes is not None:
            payload["adminNotes"] = admin_notes
        return self.client.call("PATCH", f"{self.path}/{id}/status", json=payload)
