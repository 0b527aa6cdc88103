"""Normalização de headers do envelope para o mapping outbound."""

from __future__ import annotations

from app.constants.relay import DEFAULT_OUTBOUND_HEADERS
from app.domain.relay import HeaderLines, HeaderMapping, HeaderSpec


def parse_header_line(line: str) -> tuple[str, str] | None:
    """Divide "Name: Value" no primeiro ':'.

    Returns:
        (name, value) com espaços removidos, ou None se a linha não tem ':'
        ou o nome fica vazio. Dois-pontos seguintes permanecem no valor.
    """
    name, sep, value = line.partition(":")
    if not sep:
        return None
    name = name.strip()
    if not name:
        return None
    return name, value.strip()


def normalize_headers(spec: HeaderSpec) -> dict[str, str]:
    """Converte HeaderSpec em mapping name -> value para o request outbound.

    Nomes são comparados sem diferenciar maiúsculas; a última ocorrência
    vence. Resultado vazio recebe os headers padrão JSON.
    """
    match spec:
        case HeaderLines(lines=lines):
            pairs = [pair for line in lines if (pair := parse_header_line(line)) is not None]
        case HeaderMapping(entries=entries):
            pairs = [(name.strip(), value) for name, value in entries if name.strip()]
        case _:
            pairs = []

    headers: dict[str, str] = {}
    for name, value in pairs:
        for existing in [key for key in headers if key.lower() == name.lower()]:
            del headers[existing]
        headers[name] = value

    if not headers:
        return dict(DEFAULT_OUTBOUND_HEADERS)
    return headers
