"""Protocolos e contratos do core da aplicação."""

from .rate_limiter import RateLimitDecision, RateLimiterProtocol
from .relay_client import RelayClientProtocol

__all__ = [
    "RateLimitDecision",
    "RateLimiterProtocol",
    "RelayClientProtocol",
]
