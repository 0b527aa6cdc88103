"""Agregador de settings do envelope_relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Relay settings
from config.settings.relay import (
    DEFAULT_MAX_BODY_BYTES,
    RelaySettings,
    get_relay_settings,
)

# Borda HTTP
from config.settings.security import (
    SecuritySettings,
    get_security_settings,
)

__all__ = [
    # Constants
    "DEFAULT_MAX_BODY_BYTES",
    # Base
    "BaseSettings",
    "Environment",
    # Relay
    "RelaySettings",
    # Security
    "SecuritySettings",
    "get_base_settings",
    "get_relay_settings",
    "get_security_settings",
]
