# app/middlewares/security_headers.py
import base64
import secrets

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.platform.config import settings


def generate_nonce() -> str:
    return base64.b64encode(secrets.token_bytes(16)).decode("ascii")


def build_csp(nonce: str) -> str:
    directives = {
        "default-src": ["'self'"],
        "base-uri": ["'self'"],
        "font-src": ["'self'", *settings.CSP_FONT_SRC],
        "form-action": ["'self'"],
        "frame-ancestors": ["'self'"],
        "img-src": ["'self'", *settings.CSP_IMG_SRC],
        "object-src": ["'none'"],
        "script-src": ["'self'", f"'nonce-{nonce}'", *settings.CSP_SCRIPT_SRC],
        "script-src-attr": ["'none'"],
        "style-src": ["'self'", *settings.CSP_STYLE_SRC],
        "connect-src": ["'self'", *settings.CSP_CONNECT_SRC],
    }
    policy = [f"{name} {' '.join(sources)}" for name, sources in directives.items()]
    policy.append("upgrade-insecure-requests")
    return ";".join(policy)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Sets a Content-Security-Policy whose script nonce changes per request."""

    async def dispatch(self, request: Request, call_next):
        nonce = generate_nonce()
        request.state.csp_nonce = nonce

        response = await call_next(request)
        response.headers["Content-Security-Policy"] = build_csp(nonce)
        return response
