"""
LexSite Backend: Rate Limiting Middleware
===========================================

What:  Per-IP sliding window rate limiter for the public API.
How:   Keeps each client's request timestamps in memory; a request is refused
       with 429 when the client already has rate_limit_requests timestamps
       inside the last rate_limit_window seconds.

Algorithm: Sliding Window Log
    1. Drop the client's timestamps older than the window
    2. If the remaining count >= limit, reject with 429 + Retry-After
    3. Otherwise record the current timestamp and continue

State is per process. Multi-worker deployments get one window per worker.
"""

import logging
import time
from collections import defaultdict
from typing import Dict, List

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.config import settings
from app.exceptions import RateLimitExceededError
from app.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

# Inactive clients are swept after this many recorded requests
CLEANUP_INTERVAL = 1000


def get_client_ip(request: Request) -> str:
    """
    Client address for rate limiting and access logs.

    With settings.trust_forwarded_for, the first X-Forwarded-For entry wins
    (the original client as reported by the reverse proxy).
    """
    if settings.trust_forwarded_for:
        forwarded = request.headers.get("X-Forwarded-For", "")
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    if request.client:
        return getattr(request.client, "host", "unknown") or "unknown"
    return "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    In-memory sliding window rate limiter.

    Configuration (from settings, read per request):
        rate_limit_requests: Max requests per window
        rate_limit_window:   Window duration in seconds

    Excluded paths: /health and the API docs.
    """

    EXCLUDED_PATHS = {"/health", "/docs", "/openapi.json", "/redoc"}

    def __init__(self, app, **kwargs):
        super().__init__(app, **kwargs)
        self._requests: Dict[str, List[float]] = defaultdict(list)
        self._recorded = 0

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.EXCLUDED_PATHS or request.method == "OPTIONS":
            return await call_next(request)

        client_ip = get_client_ip(request)
        now = time.time()
        window = settings.rate_limit_window
        window_start = now - window

        timestamps = [ts for ts in self._requests[client_ip] if ts > window_start]
        self._requests[client_ip] = timestamps

        if len(timestamps) >= settings.rate_limit_requests:
            retry_after = int(timestamps[0] + window - now) + 1
            logger.warning(
                "Rate limit exceeded for IP %s: %d requests in %ds window",
                client_ip,
                len(timestamps),
                window,
            )
            return self._reject(RateLimitExceededError(retry_after=retry_after))

        timestamps.append(now)
        self._recorded += 1
        if self._recorded % CLEANUP_INTERVAL == 0:
            self._cleanup_inactive_ips(window_start)

        return await call_next(request)

    @staticmethod
    def _reject(exc: RateLimitExceededError) -> JSONResponse:
        # Raised exceptions from BaseHTTPMiddleware bypass the app's handlers,
        # so the error envelope is built here.
        return JSONResponse(
            status_code=429,
            content={
                "error": "rate_limit_exceeded",
                "message": exc.message,
                "details": exc.context,
                "request_id": request_id_var.get(""),
            },
            headers={"Retry-After": str(exc.retry_after)},
        )

    def _cleanup_inactive_ips(self, window_start: float) -> None:
        """Forget clients with no requests inside the current window."""
        inactive_ips = [
            ip for ip, timestamps in self._requests.items()
            if not timestamps or timestamps[-1] <= window_start
        ]
        for ip in inactive_ips:
            del self._requests[ip]

        if inactive_ips:
            logger.debug("Cleaned up %d inactive IP entries", len(inactive_ips))
