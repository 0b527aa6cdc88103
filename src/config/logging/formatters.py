"""Formatter JSON dos logs do relay.

Uma linha JSON por evento. O instante vai em `timestamp` (ISO 8601, UTC);
campos de `extra` saem no topo do objeto ao lado dos fixos.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Presentes em toda linha, nesta ordem
REQUIRED_LOG_FIELDS = (
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TIMESTAMP_FIELD = "timestamp"


def create_json_formatter(static_fields: dict[str, str] | None = None) -> JsonFormatter:
    """Cria o formatter JSON.

    Args:
        static_fields: Campos constantes anexados a toda linha (ex: versão).

    Exemplo de output:
        {"level": "INFO", "logger": "api.routes.relay.router",
         "message": "relay_completed", "correlation_id": "abc-123",
         "service": "envelope_relay", "status_code": 200,
         "timestamp": "2026-10-18T10:30:00.123000+00:00"}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        static_fields=static_fields or {},
        timestamp=TIMESTAMP_FIELD,
    )
