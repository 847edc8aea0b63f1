"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from shipping.core.config import Settings
from shipping.shared.errors.handlers import error_response

logger = logging.getLogger(__name__)

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter keyed on the client address.

    Args:
        settings: Supplies the default limit and whether limiting is enabled.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the standard error envelope.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response.
    """
    logger.warning("Rate limit exceeded: %s", exc.detail)
    return error_response(HTTP_429, f"rate limit exceeded: {exc.detail}")
