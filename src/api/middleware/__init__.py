"""Middlewares HTTP da borda."""

from api.middleware.correlation import CorrelationIdMiddleware
from api.middleware.security_headers import SECURITY_HEADERS, SecurityHeadersMiddleware

__all__ = [
    "SECURITY_HEADERS",
    "CorrelationIdMiddleware",
    "SecurityHeadersMiddleware",
]
