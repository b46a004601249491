import json
import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

# Connection-scoped headers never cross the proxy
HOP_BY_HOP = {
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailer",
    "trailers",
    "transfer-encoding",
    "upgrade",
}
# Recomputed by the HTTP stacks on each side
_REQUEST_SKIP = HOP_BY_HOP | {"host", "content-length"}
_RESPONSE_SKIP = HOP_BY_HOP | {"content-length", "content-encoding"}

session = requests.Session()


class UpstreamError(Exception):
    pass


@dataclass
class Route:
    path: str
    cluster: str
    address: str
    protected: bool = False
    methods: Optional[Tuple[str, ...]] = None

    def matches(self, path: str, method: str) -> bool:
        prefix = self.path.rstrip("/")
        if not (path == prefix or path.startswith(prefix + "/")):
            return False
        return self.methods is None or method.upper() in self.methods


class RouteTable:
    """Static route table: the longest matching path prefix wins.

    At equal length a route restricted to specific methods beats a
    catch-all one, so ``GET /api/products`` can be public while writes to
    the same prefix stay protected.
    """

    def __init__(self, routes: List[Route]):
        self.routes = sorted(routes, key=lambda r: (len(r.path.rstrip("/")), r.methods is not None), reverse=True)

    @classmethod
    def from_dict(cls, config: dict) -> "RouteTable":
        clusters = config.get("clusters") or {}
        routes = []
        for raw in config.get("routes") or []:
            cluster = raw["cluster"]
            if cluster not in clusters:
                raise ValueError(f"Route {raw.get('path')} points at unknown cluster '{cluster}'")
            methods = raw.get("methods")
            routes.append(Route(
                path=raw["path"],
                cluster=cluster,
                address=clusters[cluster]["address"].rstrip("/"),
                protected=bool(raw.get("protected", False)),
                methods=tuple(m.upper() for m in methods) if methods else None,
            ))
        return cls(routes)

    @classmethod
    def load(cls, path: str) -> "RouteTable":
        with open(path, "r", encoding="utf-8") as fh:
            table = cls.from_dict(json.load(fh))
        logger.info("Loaded %d gateway routes from %s", len(table.routes), path)
        return table

    def match(self, path: str, method: str) -> Optional[Route]:
        for route in self.routes:
            if route.matches(path, method):
                return route
        return None


def forward_headers(headers: Mapping[str, str], client_host: Optional[str], scheme: str) -> Dict[str, str]:
    out = {k: v for k, v in headers.items() if k.lower() not in _REQUEST_SKIP}
    if client_host:
        prior = headers.get("x-forwarded-for")
        out["X-Forwarded-For"] = f"{prior}, {client_host}" if prior else client_host
    out["X-Forwarded-Proto"] = scheme
    if headers.get("host"):
        out["X-Forwarded-Host"] = headers["host"]
    return out


def response_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    return {k: v for k, v in headers.items() if k.lower() not in _RESPONSE_SKIP}


def forward(route: Route, method: str, path: str, query: str, headers: Dict[str, str], body: bytes,
            timeout: float) -> requests.Response:
    url = route.address + path
    if query:
        url = f"{url}?{query}"
    try:
        return session.request(
            method,
            url,
            headers=headers,
            data=body or None,
            timeout=timeout,
            allow_redirects=False,
        )
    except requests.RequestException as e:
        logger.error("Upstream %s unreachable for %s %s: %s", route.cluster, method, path, e)
        raise UpstreamError(f"Upstream service '{route.cluster}' is unavailable") from e
