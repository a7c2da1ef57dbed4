"""
Rate Limiting Configuration

This module provides rate limiting functionality for API endpoints.
Rate limiting prevents abuse and ensures fair usage.

Design Decisions:
- Uses slowapi for rate limiting (lightweight, FastAPI-compatible)
- Different limits for reads, writes and redirects
- IP-based limiting (can be extended to user-based)
- Limits come from settings so deployments can tune them without code changes
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from shortlinks.core.setting import settings

# Initialize rate limiter
# Uses IP address for rate limiting
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)

# Rate limit configurations per endpoint group
RATE_LIMITS = {
    "read": settings.RATE_LIMIT_READ,
    "write": settings.RATE_LIMIT_WRITE,
    "redirect": settings.RATE_LIMIT_REDIRECT,
}
