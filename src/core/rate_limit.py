"""Per-client request limits for the account and profile endpoints."""

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from core.config import settings

logger = structlog.get_logger()

# Lookups are cheap; anything that writes or hashes a password is not.
READ_LIMIT = "30/minute"
WRITE_LIMIT = "10/minute"

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer throttled requests with a JSEND ``fail`` and HTTP 429."""
    limit = exc.detail if isinstance(exc, RateLimitExceeded) else str(exc)
    logger.warning("rate_limit_exceeded", client=get_remote_address(request), limit=limit)
    return JSONResponse(
        status_code=429,
        content={"status": "fail", "data": {"error": f"Too many requests ({limit})"}},
    )
