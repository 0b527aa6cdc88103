"""Filters aplicados ao handler raiz.

- CorrelationIdFilter: carimba correlation_id e service em cada record
- RelayPayloadFilter: mascara campos de `extra` que carregariam dados do
  chamador ou do target (headers, bodies, URLs completas)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[redacted]"

# Nomes de `extra` que nunca podem sair em claro
SENSITIVE_EXTRA_FIELDS = frozenset(
    {
        "authorization",
        "body",
        "cookie",
        "headers",
        "payload",
        "url",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Anexa correlation_id (do contexto da requisição) e o nome do serviço.

    Um correlation_id passado explicitamente em `extra` é mantido.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter is not None else ""
        record.service = self._service_name
        return True


class RelayPayloadFilter(logging.Filter):
    """Substitui por REDACTED os atributos sensíveis presentes no record."""

    def __init__(self, fields: Iterable[str] = SENSITIVE_EXTRA_FIELDS) -> None:
        super().__init__()
        self._fields = frozenset(fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields:
            if name in record.__dict__:
                record.__dict__[name] = REDACTED
        return True
