"""Rate limiter em memória por janela fixa.

Contadores por cliente no próprio processo. Instância única criada no
startup e compartilhada entre requisições; o lock interno torna `hit`
seguro para chamadas concorrentes (event loop ou threads).
"""

from __future__ import annotations

import math
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from app.protocols.rate_limiter import RateLimitDecision, RateLimiterProtocol


@dataclass(slots=True)
class _Window:
    started_at: float
    count: int


class MemoryRateLimiter(RateLimiterProtocol):
    """Janela fixa por chave (ex: IP do cliente)."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests deve ser >= 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds deve ser > 0")
        self._max_requests = max_requests
        self._window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()

    @property
    def max_requests(self) -> int:
        return self._max_requests

    def _cleanup_expired(self, now: float) -> None:
        """Remove janelas encerradas."""
        expired = [
            key
            for key, window in self._windows.items()
            if now - window.started_at >= self._window_seconds
        ]
        for key in expired:
            del self._windows[key]

    def hit(self, key: str) -> RateLimitDecision:
        """Conta uma requisição para `key` e decide se ela é permitida."""
        with self._lock:
            now = self._clock()
            self._cleanup_expired(now)

            window = self._windows.get(key)
            if window is None:
                window = _Window(started_at=now, count=0)
                self._windows[key] = window

            window.count += 1
            remaining = max(self._max_requests - window.count, 0)
            reset_in = self._window_seconds - (now - window.started_at)

            if window.count > self._max_requests:
                return RateLimitDecision(
                    allowed=False,
                    remaining=0,
                    retry_after_seconds=max(math.ceil(reset_in), 1),
                )
            return RateLimitDecision(
                allowed=True,
                remaining=remaining,
                retry_after_seconds=0,
            )

    def reset(self) -> None:
        """Zera todos os contadores."""
        with self._lock:
            self._windows.clear()
