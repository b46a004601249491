from pathlib import Path
import logging
from typing import Dict, Optional, Tuple

from content_service.config import get_settings
from content_service.utils.images import content_type_for

logger = logging.getLogger(__name__)

CATEGORY_IMAGES = {
    "alphonso": "mangoes-carousel.png",
    "jaggery": "jaggery-carousel.png",
    "oil": "cold-pressed-oil-carousel.png",
}

PRODUCT_IMAGES = {
    "premium-alphonso-mangoes": "mangoes-carousel.png",
    "sun-premium-alphonso-mangoes": "mangoes-carousel-1.png",
    "organic-jaggery-block": "jaggery-carousel.png",
    "organic-jaggery-powder": "jaggery-powder-carousel.png",
    "cold-pressed-sunflower-oil": "cold-pressed-oil-carousel.png",
    "cold-pressed-groundnut-oil": "cold-pressed-oil-carousel.png",
    "cold-pressed-sesame-oil": "cold-pressed-oil-carousel-1.png",
    "cold-pressed-almond-oil": "cold-pressed-oil-carousel-1.png",
    "cold-pressed-mustard-oil": "cold-pressed-oil-carousel.png",
    "cold-pressed-coconut-oil": "cold-pressed-oil-carousel-1.png",
}

HERO_SLIDE_IMAGES = {
    "alphonso": "mangoes-carousel.png",
    "oil": "cold-pressed-oil-carousel.png",
    "jaggery": "jaggery-carousel.png",
}

COMPANY_STORY_IMAGES = {
    "our_story": "ourstory.png",
    "our_spaces": "Ourspace.png",
    "our_products": "Ourproduct.png",
}

_cache: Dict[Path, Tuple[bytes, str]] = {}


def candidate_dirs():
    configured = get_settings().SEED_IMAGES_DIR
    cwd = Path.cwd()
    dirs = [Path(configured)] if configured else []
    dirs += [
        cwd / "SeedImages",
        cwd / "static" / "SeedImages",
        cwd.parent / "frontend" / "public" / "images",
        Path("/app/SeedImages"),
    ]
    return dirs


def seed_images_dir() -> Optional[Path]:
    """First existing directory from the search list, or None."""
    for path in candidate_dirs():
        if path.is_dir():
            return path.resolve()
    return None


def load_image(path: Path) -> Tuple[Optional[bytes], Optional[str]]:
    if path in _cache:
        return _cache[path]
    if not path.is_file():
        return None, None
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.warning("Could not read seed image %s: %s", path, e)
        return None, None
    _cache[path] = (data, content_type_for(path.name))
    return _cache[path]


def image_by_name(name: str, mapping: Dict[str, str], base_dir: Optional[Path]) -> Tuple[Optional[bytes], Optional[str]]:
    filename = mapping.get(name)
    if not filename or base_dir is None:
        return None, None
    return load_image(base_dir / filename)


def clear_cache() -> None:
    _cache.clear()
