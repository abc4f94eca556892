"""
Cross-origin policy for Form Echo.

Only one browser origin may call the service. Requests that announce a
different `Origin` are refused here, before routing, so they never reach
the request gate. Requests without an `Origin` header (curl, scripts,
same-origin navigation) pass through.
"""

import logging

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse

log = logging.getLogger("form_echo.middleware")


class OriginGuardMiddleware(BaseHTTPMiddleware):
    """Reject requests whose Origin header is not the allowed origin with 403."""

    def __init__(self, app, allowed_origin: str):
        super().__init__(app)
        self.allowed_origin = allowed_origin

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if origin is not None and origin != self.allowed_origin:
            log.info("Rejected %s %s from origin %s", request.method, request.url.path, origin)
            return PlainTextResponse("Forbidden", status_code=403)
        return await call_next(request)


def install_origin_policy(app: FastAPI, allowed_origin: str) -> None:
    """
    Attach CORS headers for `allowed_origin` and the guard that refuses others.

    The guard is added last so it is the outermost layer and also covers
    preflight requests.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[allowed_origin],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )
    app.add_middleware(OriginGuardMiddleware, allowed_origin=allowed_origin)
