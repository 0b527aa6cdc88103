"""Métricas do relay como eventos de log estruturado.

Sem cliente de métricas no processo: o coletor de logs agrega pelos
campos `metric_type` e `metric`. Nenhum evento carrega URL, headers ou body.

Eventos:
- relay_latency (histogram): duração da chamada ao target, por método/desfecho
- relay_outcome (counter): desfecho do executor (mirrored, timeout, ...)
- envelope_rejected (counter): envelope recusado antes da chamada (4xx)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def _emit(metric: str, metric_type: str, correlation_id: str | None, **fields: object) -> None:
    logger.info(
        f"metric_{metric}",
        extra={
            "metric": metric,
            "metric_type": metric_type,
            "correlation_id": correlation_id,
            **fields,
        },
    )


def record_relay_latency(
    method: str,
    outcome: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra a duração de uma chamada ao target.

    Args:
        method: Método HTTP outbound
        outcome: Classe do desfecho (ver record_relay_outcome)
        latency_ms: Duração em milissegundos
        correlation_id: ID de correlação da requisição
    """
    _emit(
        "relay_latency",
        "histogram",
        correlation_id,
        method=method,
        outcome=outcome,
        latency_ms=round(latency_ms, 2),
    )


def record_relay_outcome(
    outcome: str,
    status_code: int,
    correlation_id: str | None = None,
) -> None:
    """Conta um desfecho do executor.

    Args:
        outcome: "mirrored", "timeout", "dns_failure", "connect_failure",
            "too_many_redirects" ou "transport_failure"
        status_code: Status devolvido ao chamador
        correlation_id: ID de correlação da requisição
    """
    _emit("relay_outcome", "counter", correlation_id, outcome=outcome, status_code=status_code)


def record_envelope_rejected(
    error_type: str,
    status_code: int,
    correlation_id: str | None = None,
) -> None:
    """Conta um envelope recusado na borda (nenhuma chamada ao target)."""
    _emit("envelope_rejected", "counter", correlation_id, error_type=error_type, status_code=status_code)
