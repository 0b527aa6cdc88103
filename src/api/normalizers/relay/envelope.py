"""Decodificação do envelope inbound (JSON ou XML) para Envelope.

Fluxo:
1. Content-Type decide o formato (415 antes de qualquer parse)
2. Parse do documento (400 "Invalid JSON input" / "Invalid XML input")
3. Extração de api.url / api.method / api.header / api.body
4. Validação de método e URL

Transformação pura: nenhum IO, nenhum estado.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from api.normalizers.relay.header_spec import resolve_header_spec
from api.validators.relay import (
    InvalidEnvelopeFormatError,
    InvalidJsonError,
    InvalidXmlError,
    MissingFieldsError,
    UnsupportedContentTypeError,
    validate_method,
    validate_url,
)
from app.constants.relay import JSON_MEDIA_TYPES, XML_MEDIA_TYPES, EnvelopeFormat
from app.domain.relay import Envelope

REQUIRED_API_FIELDS = ("url", "method")


def detect_envelope_format(content_type: str | None) -> EnvelopeFormat:
    """Determina o formato do envelope a partir do Content-Type.

    Parâmetros do media type (ex: charset) são ignorados.

    Raises:
        UnsupportedContentTypeError: Se não for JSON nem XML.
    """
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type in JSON_MEDIA_TYPES:
        return EnvelopeFormat.JSON
    if media_type in XML_MEDIA_TYPES:
        return EnvelopeFormat.XML
    raise UnsupportedContentTypeError(details=f"received content type: {content_type or '<none>'}")


def parse_envelope(raw_body: bytes, envelope_format: EnvelopeFormat) -> Envelope:
    """Parseia o documento e constrói o Envelope validado."""
    if envelope_format is EnvelopeFormat.JSON:
        document = _parse_json(raw_body)
    else:
        document = _parse_xml(raw_body)
    return _build_envelope(document)


def decode_envelope(raw_body: bytes, content_type: str | None) -> Envelope:
    """Decodifica body bruto + Content-Type em Envelope.

    Raises:
        EnvelopeError: Qualquer falha de entrada (415/400).
    """
    return parse_envelope(raw_body, detect_envelope_format(content_type))


def _parse_json(raw_body: bytes) -> Any:
    try:
        return json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise InvalidJsonError(details=str(exc)) from exc


def _parse_xml(raw_body: bytes) -> Any:
    """Parse XML com atributos ignorados e sem embrulhar elementos únicos em lista.

    Elementos vazios viram None; elementos repetidos viram lista.
    """
    try:
        return xmltodict.parse(raw_body, xml_attribs=False, disable_entities=True)
    except (ExpatError, ValueError) as exc:
        raise InvalidXmlError(details=str(exc)) from exc


def _build_envelope(document: Any) -> Envelope:
    if not isinstance(document, Mapping):
        raise InvalidEnvelopeFormatError(details="document root must be an object")

    api = document.get("api")
    if not isinstance(api, Mapping):
        raise MissingFieldsError(["api"])

    missing = [name for name in REQUIRED_API_FIELDS if _is_blank(api.get(name))]
    if missing:
        raise MissingFieldsError(missing)

    method = validate_method(api["method"])
    url = validate_url(api["url"])

    return Envelope(
        url=url,
        method=method,
        headers=resolve_header_spec(api.get("header")),
        body=api.get("body"),
    )


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
