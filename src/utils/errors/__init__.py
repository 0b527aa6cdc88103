"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    InfrastructureError,
    InvalidSettingsError,
    RelayClientUnavailableError,
)

__all__ = [
    "InfrastructureError",
    "InvalidSettingsError",
    "RelayClientUnavailableError",
]
