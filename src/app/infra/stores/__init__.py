"""Stores: estado compartilhado do processo.

Módulos disponíveis:
    - memory_rate_limiter: contadores de rate limit por cliente
"""

from __future__ import annotations

from app.infra.stores.memory_rate_limiter import MemoryRateLimiter

__all__ = [
    "MemoryRateLimiter",
]
