"""Endpoint do relay HTTP.

Endpoint:
- POST /: recebe o envelope (JSON ou XML), executa a chamada descrita
  contra o target e devolve a resposta dele.

Fluxo:
1. Rate limit por cliente (dependência)
2. Content-Type -> formato (415 antes de ler/parsear)
3. Leitura do body com limite de tamanho (413)
4. Decodificação + validação do envelope (400)
5. Execução no target e espelhamento da resposta (ou 502/504)

Nenhuma exceção escapa desta rota: falhas inesperadas viram 500.
"""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, Request, Response, status

from api.normalizers.relay import detect_envelope_format, parse_envelope
from api.routes.dependencies import enforce_rate_limit, get_relay_use_case
from api.routes.responses import error_response, relay_result_response
from api.validators.relay import EnvelopeError, PayloadTooLargeError
from app.constants.relay import ERROR_CLIENT_NOT_READY, ERROR_INTERNAL
from app.observability import get_correlation_id, record_envelope_rejected
from app.use_cases.relay import RelayRequestUseCase
from config.settings import get_relay_settings
from utils.errors import RelayClientUnavailableError

logger = logging.getLogger(__name__)

router = APIRouter()


async def read_body_limited(request: Request, max_bytes: int) -> bytes:
    """Lê o body inteiro, abortando assim que passar de `max_bytes`.

    Raises:
        PayloadTooLargeError: Se Content-Length ou o body lido excedem o limite.
    """
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > max_bytes:
        raise PayloadTooLargeError(details=f"declared {declared} bytes, limit {max_bytes}")

    buffer = bytearray()
    async for chunk in request.stream():
        buffer.extend(chunk)
        if len(buffer) > max_bytes:
            raise PayloadTooLargeError(details=f"body exceeds limit of {max_bytes} bytes")
    return bytes(buffer)


@router.post("/", response_model=None, dependencies=[Depends(enforce_rate_limit)])
async def relay_request(
    request: Request,
    use_case: RelayRequestUseCase = Depends(get_relay_use_case),
) -> Response:
    """Relay de uma chamada HTTP descrita no envelope."""
    started_at = time.perf_counter()

    try:
        envelope_format = detect_envelope_format(request.headers.get("content-type"))
        raw_body = await read_body_limited(request, get_relay_settings().max_body_bytes)
        envelope = parse_envelope(raw_body, envelope_format)
    except EnvelopeError as exc:
        logger.warning(
            "relay_envelope_rejected",
            extra={
                "status_code": exc.status_code,
                "error": exc.message,
                "error_type": type(exc).__name__,
            },
        )
        record_envelope_rejected(type(exc).__name__, exc.status_code, get_correlation_id())
        return error_response(exc.status_code, exc.message, details=exc.details)

    try:
        result = await use_case.execute(envelope)
    except RelayClientUnavailableError as exc:
        logger.error("relay_client_unavailable", extra={"error_type": type(exc).__name__})
        return error_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            ERROR_CLIENT_NOT_READY,
            details=str(exc),
        )
    except Exception as exc:
        logger.exception(
            "relay_internal_error",
            extra={"error_type": type(exc).__name__, "format": envelope_format.value},
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ERROR_INTERNAL,
            details=f"{type(exc).__name__}: {exc}",
        )

    logger.info(
        "relay_completed",
        extra={
            "format": envelope_format.value,
            "method": envelope.method.value,
            "status_code": result.status_code,
            "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
        },
    )
    return relay_result_response(result)
