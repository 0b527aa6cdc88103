"""Construção das respostas HTTP do relay.

Sucesso: status, Content-Type e bytes do target, sem outros headers.
Falha: JSON {"error": ..., "details"?: ...}; details só fora de produção.
"""

from __future__ import annotations

from collections.abc import Mapping

from fastapi import Response
from fastapi.responses import JSONResponse

from app.domain.relay import RelayFailure, RelayResponse, RelayResult
from config.settings import get_base_settings


def expose_error_details() -> bool:
    """Detalhes de diagnóstico só saem em ambientes não produtivos."""
    return not get_base_settings().is_production


def error_response(
    status_code: int,
    error: str,
    *,
    details: str | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Resposta de erro no formato padrão do relay."""
    failure = RelayFailure(status_code=status_code, error=error, details=details)
    return failure_response(failure, headers=headers)


def failure_response(
    failure: RelayFailure,
    *,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        content=failure.as_dict(include_details=expose_error_details()),
        status_code=failure.status_code,
        headers=dict(headers) if headers else None,
    )


def mirrored_response(result: RelayResponse) -> Response:
    """Espelha a resposta do target: só Content-Type é repassado."""
    return Response(
        content=result.content,
        status_code=result.status_code,
        headers={"Content-Type": result.content_type},
    )


def relay_result_response(result: RelayResult) -> Response:
    if isinstance(result, RelayFailure):
        return failure_response(result)
    return mirrored_response(result)
