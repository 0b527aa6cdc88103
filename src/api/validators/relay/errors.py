"""Erros de entrada do envelope (falhas do cliente, nunca do target)."""

from __future__ import annotations

from app.constants.relay import (
    ERROR_INVALID_INPUT_FORMAT,
    ERROR_INVALID_JSON,
    ERROR_INVALID_METHOD,
    ERROR_INVALID_URL,
    ERROR_INVALID_XML,
    ERROR_PAYLOAD_TOO_LARGE,
    ERROR_UNSUPPORTED_CONTENT_TYPE,
)


class EnvelopeError(ValueError):
    """Erro base do envelope.

    Attributes:
        status_code: Status HTTP devolvido ao chamador
        message: Mensagem pública (vai no campo "error")
        details: Diagnóstico, exposto apenas fora de produção
    """

    status_code: int = 400
    default_message: str = ERROR_INVALID_INPUT_FORMAT

    def __init__(self, message: str | None = None, *, details: str | None = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class UnsupportedContentTypeError(EnvelopeError):
    """Content-Type fora de JSON/XML."""

    status_code = 415
    default_message = ERROR_UNSUPPORTED_CONTENT_TYPE


class PayloadTooLargeError(EnvelopeError):
    """Envelope acima do limite configurado."""

    status_code = 413
    default_message = ERROR_PAYLOAD_TOO_LARGE


class InvalidJsonError(EnvelopeError):
    """Body declarado como JSON não parseia."""

    default_message = ERROR_INVALID_JSON


class InvalidXmlError(EnvelopeError):
    """Body declarado como XML não parseia."""

    default_message = ERROR_INVALID_XML


class InvalidEnvelopeFormatError(EnvelopeError):
    """Documento válido cuja raiz não é um objeto."""


class MissingFieldsError(EnvelopeError):
    """Objeto api ou seus campos obrigatórios ausentes."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = tuple(fields)
        names = ", ".join(f"'{name}'" for name in fields)
        super().__init__(f"Missing required fields: {names}")


class InvalidMethodError(EnvelopeError):
    """api.method fora do conjunto permitido."""

    default_message = ERROR_INVALID_METHOD


class InvalidUrlError(EnvelopeError):
    """api.url não é uma URL absoluta."""

    default_message = ERROR_INVALID_URL
