"""Modelos de domínio do relay.

Envelope (entrada decodificada), OutboundRequest (chamada ao target) e
RelayResult (o que volta ao chamador). Todos vivem apenas durante uma
requisição; nada é persistido nem compartilhado entre requisições.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.constants.relay import HttpMethod


@dataclass(frozen=True, slots=True)
class HeaderLines:
    """Headers no formato lista de strings "Name: Value"."""

    lines: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class HeaderMapping:
    """Headers no formato objeto name -> value."""

    entries: tuple[tuple[str, str], ...] = ()


HeaderSpec = HeaderLines | HeaderMapping


@dataclass(frozen=True, slots=True)
class Envelope:
    """Descrição da chamada outbound carregada no body inbound.

    Attributes:
        url: URL absoluta do target, copiada sem reescrita
        method: Método já validado e normalizado
        headers: Forma dos headers resolvida na decodificação
        body: Valor bruto de api.body (None quando ausente)
    """

    url: str
    method: HttpMethod
    headers: HeaderSpec = field(default_factory=HeaderLines)
    body: Any = None


@dataclass(frozen=True, slots=True)
class JsonBody:
    """Body estruturado, serializado como JSON no envio."""

    value: Any


@dataclass(frozen=True, slots=True)
class TextBody:
    """Body enviado exatamente como recebido."""

    text: str


OutboundBody = JsonBody | TextBody


@dataclass(frozen=True, slots=True)
class OutboundRequest:
    """Request canônico executado contra o target."""

    method: HttpMethod
    url: str
    headers: dict[str, str]
    body: OutboundBody | None = None


@dataclass(frozen=True, slots=True)
class RelayResponse:
    """Resposta do target espelhada ao chamador (qualquer status)."""

    status_code: int
    content_type: str
    content: bytes


@dataclass(frozen=True, slots=True)
class RelayFailure:
    """Falha de transporte sintetizada pelo relay (nenhuma resposta recebida)."""

    status_code: int
    error: str
    details: str | None = None

    def as_dict(self, *, include_details: bool) -> dict[str, str]:
        payload = {"error": self.error}
        if include_details and self.details:
            payload["details"] = self.details
        return payload


RelayResult = RelayResponse | RelayFailure


__all__ = [
    "Envelope",
    "HeaderLines",
    "HeaderMapping",
    "HeaderSpec",
    "JsonBody",
    "OutboundBody",
    "OutboundRequest",
    "RelayFailure",
    "RelayResponse",
    "RelayResult",
    "TextBody",
]
