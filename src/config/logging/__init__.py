"""Logging estruturado (JSON) do envelope_relay.

    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", correlation_id_getter=get_correlation_id)
    logger = get_logger(__name__)
    logger.info("relay_completed", extra={"status_code": 200})

Headers, bodies e URLs relayados nunca vão para os logs: chaves sensíveis
em `extra` são mascaradas pelo RelayPayloadFilter.
"""

from config.logging.config import NOISY_LOGGERS, configure_logging, get_logger
from config.logging.filters import REDACTED, CorrelationIdFilter, RelayPayloadFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "NOISY_LOGGERS",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "RelayPayloadFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
