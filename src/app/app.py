"""Entrypoint do envelope_relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 3000

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import CorrelationIdMiddleware, SecurityHeadersMiddleware
from api.routes import create_api_router, register_exception_handlers
from app.bootstrap import (
    create_rate_limiter,
    create_relay_client,
    initialize_app,
    validate_runtime_settings,
)
from config.logging import get_logger
from config.settings import get_base_settings, get_relay_settings, get_security_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer log de módulo
initialize_app()

logger = get_logger(__name__)

CORS_ALLOWED_METHODS = ["GET", "POST", "OPTIONS"]
CORS_ALLOWED_HEADERS = ["Content-Type", "Authorization"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria pool outbound e rate limiter (app.state)

    Shutdown:
    - Fecha o pool outbound aguardando conexões em uso
    """
    base = get_base_settings()
    logger.info(
        "app_starting",
        extra={"service": base.service_name, "environment": base.environment},
    )
    validate_runtime_settings()

    app.state.started_at = time.monotonic()
    app.state.relay_client = create_relay_client(get_relay_settings())
    app.state.rate_limiter = create_rate_limiter(get_security_settings())

    try:
        yield
    finally:
        logger.info("app_shutting_down", extra={"service": base.service_name})
        await app.state.relay_client.aclose()
        logger.info("relay_client_closed")


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    base = get_base_settings()
    security = get_security_settings()

    fastapi_app = FastAPI(
        title="envelope_relay",
        description="Relay HTTP de envelope único (JSON/XML)",
        version="1.0.0",
        lifespan=lifespan,
        # Docs desabilitadas em produção
        docs_url=None if base.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if base.is_production else "/openapi.json",
    )

    # Ordem: o último adicionado é o mais externo (CORS responde preflight primeiro)
    fastapi_app.add_middleware(SecurityHeadersMiddleware, hsts_enabled=security.hsts_enabled)
    fastapi_app.add_middleware(CorrelationIdMiddleware)
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(security.allowed_origins),
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=CORS_ALLOWED_HEADERS,
    )

    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info(
        "app_configured",
        extra={"service": base.service_name, "allowed_origins": list(security.allowed_origins)},
    )

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    base = get_base_settings()
    logger.info("Starting envelope_relay", extra={"host": base.host, "port": base.port})
    uvicorn.run(
        "app.app:app",
        host=base.host,
        port=base.port,
        reload=base.is_development and base.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
