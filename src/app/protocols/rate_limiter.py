"""Protocolo de rate limit por cliente."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class RateLimitDecision:
    """Resultado de uma contagem de requisição."""

    allowed: bool
    remaining: int
    retry_after_seconds: int


class RateLimiterProtocol(Protocol):
    """Contrato mínimo para limitadores de requisição."""

    @property
    def max_requests(self) -> int: ...

    def hit(self, key: str) -> RateLimitDecision: ...
