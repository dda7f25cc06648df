"""
Secure HTTP headers.

SecurityHeadersMiddleware covers every response produced inside the
application. Responses built outside it (the 500 handler runs in
Starlette's outermost error middleware) call apply_secure_headers
directly.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
    "X-XSS-Protection": "1; mode=block",
}


def apply_secure_headers(response: Response) -> Response:
    for header_name, header_value in SECURE_HEADERS.items():
        response.headers[header_name] = header_value
    return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds SECURE_HEADERS to every response, error responses included."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        return apply_secure_headers(await call_next(request))
