import os
from functools import lru_cache

# Load environment variables from a .env file when one is found
from dotenv import load_dotenv, find_dotenv

_env_path = find_dotenv(usecwd=True)
if _env_path:
    load_dotenv(_env_path, override=False)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./content.db")
    # Run alembic upgrade + static seed data on startup
    AUTO_MIGRATE: bool = _flag("AUTO_MIGRATE", "1")
    SEED_ON_STARTUP: bool = _flag("SEED_ON_STARTUP", "1")
    # Optional explicit seed images directory, searched before the default locations
    SEED_IMAGES_DIR: str = os.getenv("SEED_IMAGES_DIR", "")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    PORT: int = int(os.getenv("PORT", "5002"))

    @property
    def cors_origins(self):
        return [o.strip() for o in (self.CORS_ORIGINS or "").split(",") if o.strip()]


@lru_cache
def get_settings():
    return Settings()
