"""Montagem do OutboundRequest a partir de um Envelope."""

from __future__ import annotations

from app.domain.relay import Envelope, OutboundRequest
from app.services.relay_body import materialize_body
from app.services.relay_headers import normalize_headers


def build_outbound_request(envelope: Envelope) -> OutboundRequest:
    """Converte o envelope no request canônico (URL copiada sem alteração)."""
    return OutboundRequest(
        method=envelope.method,
        url=envelope.url,
        headers=normalize_headers(envelope.headers),
        body=materialize_body(envelope.method, envelope.body),
    )
