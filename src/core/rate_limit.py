"""Rate limiting setup using slowapi."""

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from core.config import settings
from core.exceptions import ErrorCode

limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.rate_limit_enabled,
)

# Registration and login draw from one per-client budget
credential_limit = limiter.shared_limit(settings.auth_rate_limit, scope="credentials")


async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return rate limit errors in the standard error envelope."""
    detail = exc.detail if isinstance(exc, RateLimitExceeded) else str(exc)
    return JSONResponse(
        status_code=429,
        content={
            "error_code": ErrorCode.RATE_LIMIT_EXCEEDED.value,
            "message": f"Too many attempts, limit is {detail}",
            "details": {"limit": str(detail)},
        },
    )
