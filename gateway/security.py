import logging
from typing import Optional

from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt

from gateway.config import get_settings

logger = logging.getLogger(__name__)

http_bearer = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})


def decode_access_token(token: str) -> dict:
    """Validate signature, issuer, audience and expiry with no clock skew allowance."""
    settings = get_settings()
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
        issuer=settings.JWT_ISSUER,
        options={"require_exp": True, "leeway": 0},
    )


def authenticate(credentials: Optional[HTTPAuthorizationCredentials]) -> dict:
    if not credentials or (credentials.scheme or "").lower() != "bearer" or not credentials.credentials:
        raise _unauthorized("Not authenticated")
    try:
        return decode_access_token(credentials.credentials)
    except ExpiredSignatureError:
        raise _unauthorized("Token expired")
    except JWTError as e:
        logger.info("Rejected bearer token: %s", e)
        raise _unauthorized("Invalid token")
