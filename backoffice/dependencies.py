"""FastAPI dependency injection providers."""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import BackofficeConfig, get_config
from .database import get_session
from .utils.cache import TTLCache
from .utils.security import decode_access_token

security_scheme = HTTPBearer(auto_error=False)

_config_instance: BackofficeConfig | None = None
_overview_cache: TTLCache | None = None


def get_app_config() -> BackofficeConfig:
    """Get the application config singleton."""
    global _config_instance
    if _config_instance is None:
        _config_instance = get_config()
    return _config_instance


def get_overview_cache() -> TTLCache:
    """Get the shared TTL cache for dashboard overview payloads."""
    global _overview_cache
    if _overview_cache is None:
        _overview_cache = TTLCache(default_ttl=get_app_config().overview_cache_ttl)
    return _overview_cache


async def get_db(config: BackofficeConfig = Depends(get_app_config)):
    """Get an async database session."""
    async for session in get_session(config):
        yield session


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    config: BackofficeConfig = Depends(get_app_config),
) -> dict:
    """Validate the bearer JWT and return its claims."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    payload = decode_access_token(
        credentials.credentials,
        config.secret_key,
        config.jwt_algorithm,
    )
    if payload is None or "sub" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload
