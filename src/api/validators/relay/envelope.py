"""Validação dos campos obrigatórios do envelope (api.url, api.method)."""

from __future__ import annotations

from typing import Any

import httpx

from api.validators.relay.errors import InvalidMethodError, InvalidUrlError
from app.constants.relay import HttpMethod

SUPPORTED_URL_SCHEMES = frozenset({"http", "https"})


def validate_method(raw_method: Any) -> HttpMethod:
    """Normaliza api.method para maiúsculas e valida contra o conjunto permitido.

    Raises:
        InvalidMethodError: Se o valor não é string ou não é um método aceito.
    """
    if not isinstance(raw_method, str):
        raise InvalidMethodError(details=f"method must be a string, got {type(raw_method).__name__}")

    candidate = raw_method.strip().upper()
    try:
        return HttpMethod(candidate)
    except ValueError as exc:
        raise InvalidMethodError(details=f"unsupported method: {raw_method!r}") from exc


def validate_url(raw_url: Any) -> str:
    """Garante que api.url é uma URL absoluta http(s) com host.

    A URL é devolvida sem alteração: o relay não reescreve o destino.

    Raises:
        InvalidUrlError: Se a URL não é absoluta ou não parseia.
    """
    if not isinstance(raw_url, str) or not raw_url:
        raise InvalidUrlError(details="url must be a non-empty string")

    if any(char.isspace() for char in raw_url):
        raise InvalidUrlError(details="url must not contain whitespace")

    try:
        parsed = httpx.URL(raw_url)
    except httpx.InvalidURL as exc:
        raise InvalidUrlError(details=str(exc)) from exc

    if parsed.scheme not in SUPPORTED_URL_SCHEMES:
        raise InvalidUrlError(details=f"unsupported or missing scheme: {parsed.scheme!r}")

    if not parsed.host:
        raise InvalidUrlError(details="url has no host")

    return raw_url
