"""Constantes do relay HTTP."""

from __future__ import annotations

from enum import StrEnum


class HttpMethod(StrEnum):
    """Métodos aceitos em api.method."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class EnvelopeFormat(StrEnum):
    """Codificações aceitas para o envelope inbound."""

    JSON = "json"
    XML = "xml"


# Métodos que nunca carregam body no request outbound
BODYLESS_METHODS = frozenset({HttpMethod.GET, HttpMethod.HEAD})

JSON_MEDIA_TYPES = frozenset({"application/json"})
XML_MEDIA_TYPES = frozenset({"application/xml", "text/xml"})

# Aplicados quando o envelope não traz nenhum header utilizável
DEFAULT_OUTBOUND_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

FALLBACK_CONTENT_TYPE = "application/octet-stream"

# Mensagens públicas de erro
ERROR_UNSUPPORTED_CONTENT_TYPE = "Unsupported Content-Type"
ERROR_INVALID_JSON = "Invalid JSON input"
ERROR_INVALID_XML = "Invalid XML input"
ERROR_INVALID_INPUT_FORMAT = "Invalid input format"
ERROR_INVALID_METHOD = "Invalid HTTP method"
ERROR_INVALID_URL = "Invalid URL format"
ERROR_PAYLOAD_TOO_LARGE = "Payload too large"
ERROR_REQUEST_TIMEOUT = "Request timeout"
ERROR_DNS_FAILURE = "Failed to resolve host"
ERROR_CONNECT_FAILURE = "Failed to connect to target server"
ERROR_TOO_MANY_REDIRECTS = "Too many redirects"
ERROR_NO_RESPONSE = "No response received from target server"
ERROR_INTERNAL = "Internal proxy error"
ERROR_CLIENT_NOT_READY = "Relay client not ready"
ERROR_RATE_LIMITED = "Too many requests from this IP, please try again later"
