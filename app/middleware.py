# =============================================================================
# app/middleware.py - HTTP Middleware
# =============================================================================
# - SingleOriginCORSMiddleware: CORS for exactly one frontend origin; other
#   origins are turned away before routing
# - log_requests: one access-log line per request
# =============================================================================

import logging
import time

from fastapi import Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger("app.access")


class SingleOriginCORSMiddleware(CORSMiddleware):
    """
    CORSMiddleware locked to one origin.

    Starlette's middleware only withholds CORS headers from a foreign
    origin and still runs the request; this one answers 403 instead.
    Requests without an Origin header (curl, server-to-server) pass.
    Preflight handling is inherited unchanged.
    """

    def __init__(self, app: ASGIApp, origin: str) -> None:
        super().__init__(
            app,
            allow_origins=[origin],
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
        self.origin = origin

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            headers = Headers(scope=scope)
            origin = headers.get("origin")
            is_preflight = (
                scope["method"] == "OPTIONS"
                and "access-control-request-method" in headers
            )
            if origin is not None and not is_preflight and not self.is_allowed_origin(origin):
                logger.warning(f"Rejected request from origin {origin}")
                response = PlainTextResponse("Not allowed by CORS", status_code=403)
                await response(scope, receive, send)
                return
        await super().__call__(scope, receive, send)


async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    start = time.perf_counter()
    # Stays 500 when call_next raises
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} {status_code} {elapsed_ms:.3f} ms"
        )
