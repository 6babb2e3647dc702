"""
Secure HTTP headers middleware.

Every response gets the browser hardening headers in SECURE_HEADERS.
File downloads (roster exports) additionally get ``Cache-Control: no-store``
so staff contact details are not kept by shared caches.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}

NO_STORE = "no-store"


def is_download(response: Response) -> bool:
    """True for attachments and CSV bodies."""
    disposition = response.headers.get("content-disposition", "")
    content_type = response.headers.get("content-type", "")
    return disposition.startswith("attachment") or content_type.startswith("text/csv")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds secure headers, and disables caching of downloads."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers[header_name] = header_value
        if is_download(response):
            response.headers["Cache-Control"] = NO_STORE
        return response
