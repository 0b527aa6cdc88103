"""Instalação do logging JSON do processo.

Chamado uma vez pelo bootstrap, antes de criar a aplicação. Todo logger
do processo (inclusive uvicorn e httpx) passa pelo mesmo handler.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, RelayPayloadFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "envelope_relay"

# Bibliotecas que logam cada request outbound/inbound com a URL completa
NOISY_LOGGERS: dict[str, int] = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> logging.Handler:
    """Substitui os handlers da raiz por um único handler JSON em stderr.

    Args:
        level: Nível mínimo (case-insensitive).
        service_name: Valor do campo `service` em toda linha.
        correlation_id_getter: Fonte do correlation_id da requisição corrente.

    Returns:
        O handler instalado.

    Raises:
        ValueError: Se o nível não é um dos VALID_LOG_LEVELS.
    """
    level_name = level.upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(RelayPayloadFilter())

    root = logging.getLogger()
    root.setLevel(level_name)
    root.handlers = [handler]

    for name, noisy_level in NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(max(noisy_level, root.level))

    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
