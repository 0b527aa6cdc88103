"""Executor do relay: executa o OutboundRequest contra o target via httpx.

Comportamento:
- Um único httpx.AsyncClient por processo (pool de conexões com keep-alive)
- Timeout total por chamada; estouro cancela só aquela chamada
- Redirects seguidos até o limite configurado
- Qualquer status do target é espelhado (4xx/5xx não são erro do relay)
- Falhas de transporte viram RelayFailure (502/504), sem retry
"""

from __future__ import annotations

import asyncio
import json
import logging
import socket
import time
from typing import TYPE_CHECKING

import httpx

from app.constants.relay import (
    ERROR_CONNECT_FAILURE,
    ERROR_DNS_FAILURE,
    ERROR_NO_RESPONSE,
    ERROR_REQUEST_TIMEOUT,
    ERROR_TOO_MANY_REDIRECTS,
    FALLBACK_CONTENT_TYPE,
)
from app.domain.relay import (
    JsonBody,
    OutboundBody,
    OutboundRequest,
    RelayFailure,
    RelayResponse,
    RelayResult,
    TextBody,
)
from app.observability import get_correlation_id, record_relay_latency, record_relay_outcome
from app.protocols.relay_client import RelayClientProtocol
from utils.errors import RelayClientUnavailableError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

# Mensagens de getaddrinfo por plataforma (quando a causa original se perde)
_DNS_ERROR_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "getaddrinfo failed",
    "temporary failure in name resolution",
    "no address associated with hostname",
    "name resolution",
)


def is_dns_resolution_error(exc: BaseException) -> bool:
    """Retorna True se a falha de conexão veio da resolução de nome do host."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if isinstance(current, socket.gaierror):
            return True
        message = str(current).lower()
        if any(marker in message for marker in _DNS_ERROR_MARKERS):
            return True
        current = current.__cause__ or current.__context__
    return False


def encode_outbound_body(
    body: OutboundBody | None,
    headers: Mapping[str, str],
) -> tuple[bytes | None, dict[str, str]]:
    """Serializa o body outbound e completa Content-Type para JSON quando ausente."""
    merged = dict(headers)
    match body:
        case JsonBody(value=value):
            if not any(name.lower() == "content-type" for name in merged):
                merged["Content-Type"] = "application/json"
            content = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
            return content.encode("utf-8"), merged
        case TextBody(text=text):
            return text.encode("utf-8"), merged
        case _:
            return None, merged


class RelayHttpClient(RelayClientProtocol):
    """Cliente HTTP do relay sobre um httpx.AsyncClient compartilhado."""

    def __init__(self, client: httpx.AsyncClient, *, timeout_seconds: float) -> None:
        self._client = client
        self._timeout_seconds = timeout_seconds

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        """Fecha o pool de conexões (shutdown)."""
        await self._client.aclose()

    async def send(self, request: OutboundRequest) -> RelayResult:
        """Executa a chamada e classifica o desfecho.

        Exceções fora da família httpx/timeout propagam para o handler global.

        Raises:
            RelayClientUnavailableError: Se o pool já foi fechado (shutdown).
        """
        if self._client.is_closed:
            raise RelayClientUnavailableError("relay client is closed")

        content, headers = encode_outbound_body(request.body, request.headers)
        target_host = httpx.URL(request.url).host
        started_at = time.perf_counter()

        try:
            response = await asyncio.wait_for(
                self._client.request(
                    request.method.value,
                    request.url,
                    headers=headers,
                    content=content,
                ),
                timeout=self._timeout_seconds,
            )
        except (httpx.TimeoutException, TimeoutError) as exc:
            result: RelayResult = RelayFailure(
                status_code=504,
                error=ERROR_REQUEST_TIMEOUT,
                details=_describe(exc) or f"no response within {self._timeout_seconds}s",
            )
            outcome = "timeout"
        except httpx.ConnectError as exc:
            if is_dns_resolution_error(exc):
                result = RelayFailure(status_code=502, error=ERROR_DNS_FAILURE, details=_describe(exc))
                outcome = "dns_failure"
            else:
                result = RelayFailure(status_code=502, error=ERROR_CONNECT_FAILURE, details=_describe(exc))
                outcome = "connect_failure"
        except httpx.TooManyRedirects as exc:
            result = RelayFailure(status_code=502, error=ERROR_TOO_MANY_REDIRECTS, details=_describe(exc))
            outcome = "too_many_redirects"
        except httpx.RequestError as exc:
            # Inclui leitura interrompida no meio do body: falha de transporte, não sucesso parcial
            result = RelayFailure(status_code=502, error=ERROR_NO_RESPONSE, details=_describe(exc))
            outcome = "transport_failure"
        else:
            result = RelayResponse(
                status_code=response.status_code,
                content_type=response.headers.get("content-type") or FALLBACK_CONTENT_TYPE,
                content=response.content,
            )
            outcome = "mirrored"

        latency_ms = (time.perf_counter() - started_at) * 1000
        self._log_outcome(request, target_host, result, outcome, latency_ms)
        return result

    def _log_outcome(
        self,
        request: OutboundRequest,
        target_host: str,
        result: RelayResult,
        outcome: str,
        latency_ms: float,
    ) -> None:
        correlation_id = get_correlation_id()
        extra = {
            "method": request.method.value,
            "target_host": target_host,
            "status_code": result.status_code,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
        }
        if isinstance(result, RelayFailure):
            logger.warning("relay_target_failed", extra={**extra, "error": result.error})
        else:
            logger.info("relay_target_responded", extra=extra)

        record_relay_latency(request.method.value, outcome, latency_ms, correlation_id)
        record_relay_outcome(outcome, result.status_code, correlation_id)


def _describe(exc: BaseException) -> str:
    message = str(exc)
    return f"{type(exc).__name__}: {message}" if message else type(exc).__name__


def create_relay_http_client(
    *,
    timeout_seconds: float,
    max_redirects: int,
    max_connections: int,
    max_keepalive_connections: int,
    keepalive_expiry_seconds: float,
    verify_ssl: bool,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RelayHttpClient:
    """Cria o cliente do relay com pool limitado e política de redirects/TLS."""
    client = httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        limits=httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive_connections,
            keepalive_expiry=keepalive_expiry_seconds,
        ),
        follow_redirects=True,
        max_redirects=max_redirects,
        verify=verify_ssl,
        transport=transport,
    )
    return RelayHttpClient(client, timeout_seconds=timeout_seconds)
