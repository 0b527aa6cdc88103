"""Observabilidade: logs estruturados, correlation_id e métricas.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_relay_latency, record_relay_outcome
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    MAX_CORRELATION_ID_LENGTH,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    record_envelope_rejected,
    record_relay_latency,
    record_relay_outcome,
)

__all__ = [
    "CORRELATION_ID_HEADER",
    "MAX_CORRELATION_ID_LENGTH",
    "generate_correlation_id",
    "get_correlation_id",
    "record_envelope_rejected",
    "record_relay_latency",
    "record_relay_outcome",
    "reset_correlation_id",
    "set_correlation_id",
]
