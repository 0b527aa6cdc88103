"""Clientes HTTP concretos (IO outbound)."""

from app.infra.http.relay_client import (
    RelayHttpClient,
    create_relay_http_client,
    encode_outbound_body,
    is_dns_resolution_error,
)

__all__ = [
    "RelayHttpClient",
    "create_relay_http_client",
    "encode_outbound_body",
    "is_dns_resolution_error",
]
