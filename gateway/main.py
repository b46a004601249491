import logging
import time

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway import proxy
from gateway.config import get_settings
from gateway.security import authenticate, http_bearer

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger(__name__)

if not settings.JWT_SECRET:
    raise RuntimeError("JWT_SECRET is not set. Protected routes cannot be validated without a signing key.")

route_table = proxy.RouteTable.load(settings.GATEWAY_ROUTES_FILE)

app = FastAPI(title="API Gateway")

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def _error(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "data": None, "errors": None},
        headers=headers,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info("%s %s -> %d (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms)
    return response


# Added last so it runs first and answers preflight requests before auth
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", include_in_schema=False)
def health():
    return {"status": "ok"}


@app.api_route("/{path:path}", methods=PROXY_METHODS, include_in_schema=False)
async def gateway_proxy(path: str, request: Request, credentials=Depends(http_bearer)):
    target_path = "/" + path
    route = route_table.match(target_path, request.method)
    if route is None:
        return _error(404, f"No route for {request.method} {target_path}")
    if route.protected:
        authenticate(credentials)

    body = await request.body()
    headers = proxy.forward_headers(
        request.headers,
        request.client.host if request.client else None,
        request.url.scheme,
    )
    try:
        upstream = await run_in_threadpool(
            proxy.forward,
            route,
            request.method,
            target_path,
            request.url.query,
            headers,
            body,
            settings.UPSTREAM_TIMEOUT,
        )
    except proxy.UpstreamError as e:
        return _error(502, str(e))

    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        headers=proxy.response_headers(upstream.headers),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("gateway.main:app", host="0.0.0.0", port=settings.PORT, reload=False)
