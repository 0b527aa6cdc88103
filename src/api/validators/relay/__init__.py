"""Validators do envelope de relay."""

from .envelope import SUPPORTED_URL_SCHEMES, validate_method, validate_url
from .errors import (
    EnvelopeError,
    InvalidEnvelopeFormatError,
    InvalidJsonError,
    InvalidMethodError,
    InvalidUrlError,
    InvalidXmlError,
    MissingFieldsError,
    PayloadTooLargeError,
    UnsupportedContentTypeError,
)

__all__ = [
    "SUPPORTED_URL_SCHEMES",
    "EnvelopeError",
    "InvalidEnvelopeFormatError",
    "InvalidJsonError",
    "InvalidMethodError",
    "InvalidUrlError",
    "InvalidXmlError",
    "MissingFieldsError",
    "PayloadTooLargeError",
    "UnsupportedContentTypeError",
    "validate_method",
    "validate_url",
]
