import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_service.config import get_settings
from content_service.routers import (
    company_story,
    contact,
    content_blocks,
    delivery_settings,
    hero_slides,
    inquiry_types,
    product_categories,
    products,
    site_settings,
    statistics,
    testimonials,
    usp_items,
)

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Content Service")


def _error(status_code: int, message: str, errors=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "data": None, "errors": errors},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        errors.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return _error(400, "Validation failed", errors)


@app.exception_handler(IntegrityError)
async def integrity_exception_handler(request: Request, exc: IntegrityError):
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return _error(409, "The request conflicts with existing data")


@app.on_event("startup")
def on_startup():
    # All models are registered through the router imports above
    from content_service.models.base import Base, SessionLocal, engine
    from content_service.seed import run_migrations, seed_database

    if settings.AUTO_MIGRATE:
        run_migrations()
    else:
        Base.metadata.create_all(bind=engine)

    if settings.SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            seed_database(db, migrate=False)
        finally:
            db.close()


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(product_categories.router, prefix="/api/categories", tags=["categories"])
app.include_router(product_categories.router, prefix="/api/productcategories", tags=["categories"])
app.include_router(products.router, prefix="/api/products", tags=["products"])
app.include_router(hero_slides.router, prefix="/api/heroslides", tags=["hero-slides"])
app.include_router(testimonials.router, prefix="/api/testimonials", tags=["testimonials"])
app.include_router(statistics.router, prefix="/api/statistics", tags=["statistics"])
app.include_router(usp_items.router, prefix="/api/uspitems", tags=["usp-items"])
app.include_router(company_story.router, prefix="/api/companystory", tags=["company-story"])
app.include_router(site_settings.router, prefix="/api/sitesettings", tags=["site-settings"])
app.include_router(delivery_settings.router, prefix="/api/deliverysettings", tags=["delivery-settings"])
app.include_router(inquiry_types.router, prefix="/api/inquirytypes", tags=["inquiry-types"])
app.include_router(contact.router, prefix="/api/contact", tags=["contact"])
app.include_router(content_blocks.router, prefix="/api/contentblocks", tags=["content-blocks"])


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("content_service.main:app", host="0.0.0.0", port=settings.PORT, reload=False)
