"""Serviços de aplicação.

Unidades reutilizáveis do relay (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.relay_body import coerce_text_body, materialize_body
from app.services.relay_headers import normalize_headers, parse_header_line
from app.services.relay_outbound import build_outbound_request

__all__ = [
    "build_outbound_request",
    "coerce_text_body",
    "materialize_body",
    "normalize_headers",
    "parse_header_line",
]
