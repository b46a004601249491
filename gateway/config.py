import os
from functools import lru_cache
from pathlib import Path

# Load environment variables from a .env file when one is found
from dotenv import load_dotenv, find_dotenv

_env_path = find_dotenv(usecwd=True)
if _env_path:
    load_dotenv(_env_path, override=False)

DEFAULT_ROUTES_FILE = Path(__file__).resolve().parent / "routes.json"


class Settings:
    JWT_SECRET: str = os.getenv("JWT_SECRET")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_ISSUER: str = os.getenv("JWT_ISSUER", "AtYourDoorStep")
    JWT_AUDIENCE: str = os.getenv("JWT_AUDIENCE", "AtYourDoorStep")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000")
    GATEWAY_ROUTES_FILE: str = os.getenv("GATEWAY_ROUTES_FILE", str(DEFAULT_ROUTES_FILE))
    # Seconds to wait on a backend service before answering 502
    UPSTREAM_TIMEOUT: float = float(os.getenv("UPSTREAM_TIMEOUT", "30"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    PORT: int = int(os.getenv("PORT", "5000"))

    @property
    def cors_origins(self):
        return [o.strip() for o in (self.CORS_ORIGINS or "").split(",") if o.strip()]


@lru_cache
def get_settings():
    return Settings()
