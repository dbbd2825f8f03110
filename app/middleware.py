# =============================================================================
# app/middleware.py - CORS Headers Middleware
# =============================================================================
# Outermost middleware. Stamps the CORS headers on every response and answers
# OPTIONS requests with 200 before anything downstream (auth, body parsing,
# routing) runs.
# =============================================================================

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import settings
from app.exceptions import unhandled_exception_handler

ALLOWED_METHODS = "GET, POST, PUT, PATCH, DELETE"
ALLOWED_HEADERS = "Content-Type, Authorization"


def cors_headers(allow_origin: str | None = None) -> dict[str, str]:
    """Headers added to every response."""
    return {
        "Access-Control-Allow-Origin": allow_origin or settings.CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Apply CORS headers to all responses; short-circuit OPTIONS."""

    def __init__(self, app, allow_origin: str | None = None):
        super().__init__(app)
        self.headers = cors_headers(allow_origin)

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=self.headers)

        try:
            response = await call_next(request)
        except Exception as exc:
            # The catch-all handler runs outside user middleware
            response = await unhandled_exception_handler(request, exc)

        response.headers.update(self.headers)
        return response
