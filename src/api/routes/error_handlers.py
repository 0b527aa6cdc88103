"""Handlers globais: toda falha vira JSON {"error": ...}.

Última barreira antes do processo: rotas desconhecidas, métodos não
permitidos, HTTPException das dependências e exceções inesperadas.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes.responses import error_response

logger = logging.getLogger(__name__)

ERROR_NOT_FOUND = "Endpoint not found"
ERROR_METHOD_NOT_ALLOWED = "Method not allowed"
ERROR_INTERNAL_SERVER = "Internal server error"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Converte HTTPException (inclui 404/405 do roteador) para o formato padrão."""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = ERROR_NOT_FOUND
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = ERROR_METHOD_NOT_ALLOWED
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message, headers=exc.headers)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Exceção inesperada: 500, stack no log, detalhe só fora de produção."""
    logger.exception(
        "unhandled_error",
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ERROR_INTERNAL_SERVER,
        details=f"{type(exc).__name__}: {exc}",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
