"""ASGI middleware for the FastAPI application.

This module provides:
- Security headers (X-Request-Id, HSTS, etc.)
- IP-based rate limiting
"""

from .ip_rate_limit import IPRateLimitMiddleware
from .security_headers import SecurityHeadersMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
    "IPRateLimitMiddleware",
]
