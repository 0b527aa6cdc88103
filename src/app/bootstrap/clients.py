"""Factories dos recursos compartilhados do processo.

Criados uma vez no lifespan da aplicação e guardados em app.state;
nunca como singletons de módulo.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.http import RelayHttpClient, create_relay_http_client
from app.infra.stores import MemoryRateLimiter

if TYPE_CHECKING:
    from config.settings import RelaySettings, SecuritySettings

logger = logging.getLogger(__name__)


def create_relay_client(settings: RelaySettings) -> RelayHttpClient:
    """Cria o cliente outbound do relay (pool de conexões compartilhado).

    Args:
        settings: RelaySettings carregadas no startup.

    Returns:
        RelayHttpClient pronto para uso concorrente.
    """
    client = create_relay_http_client(
        timeout_seconds=settings.timeout_seconds,
        max_redirects=settings.max_redirects,
        max_connections=settings.max_connections,
        max_keepalive_connections=settings.max_keepalive_connections,
        keepalive_expiry_seconds=settings.keepalive_expiry_seconds,
        verify_ssl=settings.verify_ssl,
    )
    logger.info(
        "relay_client_created",
        extra={
            "timeout_seconds": settings.timeout_seconds,
            "max_redirects": settings.max_redirects,
            "max_connections": settings.max_connections,
            "verify_ssl": settings.verify_ssl,
        },
    )
    if not settings.verify_ssl:
        logger.warning("relay_tls_verification_disabled")
    return client


def create_rate_limiter(settings: SecuritySettings) -> MemoryRateLimiter | None:
    """Cria o rate limiter por cliente, ou None quando desabilitado."""
    if not settings.rate_limit_enabled:
        logger.info("rate_limiter_disabled")
        return None

    limiter = MemoryRateLimiter(
        max_requests=settings.rate_limit_max_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )
    logger.info(
        "rate_limiter_created",
        extra={
            "max_requests": settings.rate_limit_max_requests,
            "window_seconds": settings.rate_limit_window_seconds,
        },
    )
    return limiter
