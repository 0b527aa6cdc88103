"""Resolução da forma de api.header no momento da decodificação.

api.header chega como lista de "Name: Value", string única (XML com um só
<header>) ou objeto name -> value. Aqui a forma é decidida uma única vez e
o resto do pipeline só vê HeaderLines ou HeaderMapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.domain.relay import HeaderLines, HeaderMapping, HeaderSpec


def resolve_header_spec(raw_header: Any) -> HeaderSpec:
    """Converte o valor bruto de api.header em HeaderSpec.

    Valores sem forma reconhecível viram lista vazia (sem headers custom).
    """
    if raw_header is None:
        return HeaderLines()

    if isinstance(raw_header, str):
        return HeaderLines(lines=(raw_header,))

    if isinstance(raw_header, list):
        return HeaderLines(lines=tuple(item for item in raw_header if isinstance(item, str)))

    if isinstance(raw_header, Mapping):
        entries = tuple(
            (str(name), rendered)
            for name, value in raw_header.items()
            if (rendered := _render_header_value(value)) is not None
        )
        return HeaderMapping(entries=entries)

    return HeaderLines()


def _render_header_value(value: Any) -> str | None:
    # Listas/objetos não têm representação de header
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return None
