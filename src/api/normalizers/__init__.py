"""Normalizers: conversão de payloads externos para modelos internos.

Estrutura:
- relay/: envelope JSON/XML -> Envelope
"""

from .relay import decode_envelope, detect_envelope_format, parse_envelope

__all__ = [
    "decode_envelope",
    "detect_envelope_format",
    "parse_envelope",
]
