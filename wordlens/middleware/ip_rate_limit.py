"""IP-based rate limiting middleware.

Limits requests per client IP address with a fixed-window RateLimiter.
"""

import json

from ..services.rate_limiter import RateLimiter


class IPRateLimitMiddleware:
    """
    Rate limiting by client IP address.

    Applies to all HTTP requests before reaching endpoint handlers.
    Uses X-Forwarded-For header (behind reverse proxy) or direct client address.
    Skips health check endpoint to avoid blocking monitoring.
    """

    exempt_paths = ("/health", "/")

    def __init__(self, app, limiter: RateLimiter):
        self.app = app
        self.limiter = limiter

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http" or scope.get("path", "") in self.exempt_paths:
            await self.app(scope, receive, send)
            return

        # Extract client IP from X-Forwarded-For (behind proxy) or direct connection
        client_ip = None
        headers = dict(scope.get("headers", []))
        forwarded_for = headers.get(b"x-forwarded-for")
        if forwarded_for:
            # First IP in X-Forwarded-For is the original client
            client_ip = forwarded_for.decode().split(",")[0].strip()
        elif scope.get("client"):
            client_ip = scope["client"][0]

        if client_ip:
            decision = self.limiter.check(client_ip)
            if not decision.allowed:
                response_body = json.dumps(
                    {
                        "success": False,
                        "error": (
                            f"IP rate limit exceeded: {self.limiter.max_requests} requests "
                            f"per {self.limiter.window_seconds:g} seconds"
                        ),
                    }
                ).encode()
                await send(
                    {
                        "type": "http.response.start",
                        "status": 429,
                        "headers": [
                            (b"content-type", b"application/json"),
                            (b"content-length", str(len(response_body)).encode()),
                        ],
                    }
                )
                await send(
                    {
                        "type": "http.response.body",
                        "body": response_body,
                    }
                )
                return

        await self.app(scope, receive, send)
