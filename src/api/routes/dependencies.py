"""Dependências FastAPI que expõem os recursos do processo às rotas.

Os recursos vivem em app.state (criados no lifespan) e são injetados por
requisição; nenhuma rota acessa singletons de módulo.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, Request, status

from app.constants.relay import ERROR_CLIENT_NOT_READY, ERROR_RATE_LIMITED
from app.protocols.rate_limiter import RateLimiterProtocol
from app.use_cases.relay import RelayRequestUseCase

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"


def client_key(request: Request) -> str:
    """Chave de rate limit: IP do peer TCP."""
    if request.client is None or not request.client.host:
        return UNKNOWN_CLIENT
    return request.client.host


def get_relay_use_case(request: Request) -> RelayRequestUseCase:
    """Monta o use case sobre o cliente outbound compartilhado.

    Raises:
        HTTPException: 503 se o pool ainda não existe ou já foi fechado.
    """
    client = getattr(request.app.state, "relay_client", None)
    if client is None or client.is_closed:
        logger.error("relay_client_unavailable")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=ERROR_CLIENT_NOT_READY,
        )
    return RelayRequestUseCase(client=client)


def enforce_rate_limit(request: Request) -> None:
    """Aplica o limite por cliente; sem limiter configurado, não limita.

    Raises:
        HTTPException: 429 com Retry-After quando o limite estoura.
    """
    limiter: RateLimiterProtocol | None = getattr(request.app.state, "rate_limiter", None)
    if limiter is None:
        return

    decision = limiter.hit(client_key(request))
    if decision.allowed:
        return

    logger.warning(
        "rate_limit_exceeded",
        extra={"retry_after_seconds": decision.retry_after_seconds},
    )
    raise HTTPException(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        detail=ERROR_RATE_LIMITED,
        headers={
            "Retry-After": str(decision.retry_after_seconds),
            "RateLimit-Limit": str(limiter.max_requests),
            "RateLimit-Remaining": "0",
        },
    )
