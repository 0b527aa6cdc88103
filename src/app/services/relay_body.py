"""Decide o body do request outbound a partir de api.body."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from app.constants.relay import BODYLESS_METHODS, HttpMethod
from app.domain.relay import JsonBody, OutboundBody, TextBody


def coerce_text_body(text: str) -> OutboundBody:
    """Tenta parsear a string como JSON; se falhar, envia o texto original."""
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        # Aninhamento profundo demais também cai no texto cru
        return TextBody(text=text)
    return JsonBody(value=parsed)


def materialize_body(method: HttpMethod, raw_body: Any) -> OutboundBody | None:
    """Retorna o body a enviar, ou None quando nenhum body deve ir ao target.

    - GET/HEAD: sempre None, qualquer que seja api.body
    - ausente, null, string vazia ou objeto vazio: None
    - string: JSON parseado quando possível, senão o texto cru
    - valor estruturado: enviado como está
    """
    if method in BODYLESS_METHODS:
        return None

    if raw_body is None:
        return None

    if isinstance(raw_body, str):
        if raw_body == "":
            return None
        return coerce_text_body(raw_body)

    if isinstance(raw_body, Mapping) and not raw_body:
        return None

    return JsonBody(value=raw_body)
