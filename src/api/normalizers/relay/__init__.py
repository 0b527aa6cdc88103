"""Normalizer do envelope de relay (JSON/XML -> Envelope)."""

from .envelope import decode_envelope, detect_envelope_format, parse_envelope
from .header_spec import resolve_header_spec

__all__ = [
    "decode_envelope",
    "detect_envelope_format",
    "parse_envelope",
    "resolve_header_spec",
]
