"""Per-client rate limiting shared by the app and its routers."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Reply 429 with the limit that was hit."""
    logger.warning(f"Rate limit {exc.detail} hit by {get_remote_address(request)}")
    return JSONResponse(
        status_code=429,
        content={"detail": f"Too many solve requests, limit is {exc.detail}"},
    )
