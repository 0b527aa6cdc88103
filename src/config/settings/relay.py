"""Settings do relay HTTP (chamada outbound ao target).

Limites de timeout, redirects e pool de conexões compartilhado.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.base import get_base_settings

DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class RelaySettings:
    """Configurações do executor de relay.

    Attributes:
        timeout_seconds: Timeout total por chamada outbound
        max_redirects: Máximo de redirects seguidos
        max_connections: Máximo de sockets simultâneos no pool
        max_keepalive_connections: Máximo de conexões ociosas mantidas
        keepalive_expiry_seconds: Tempo até fechar conexão ociosa
        verify_ssl: Valida certificados do target (switch de deploy)
        max_body_bytes: Tamanho máximo do envelope inbound
    """

    timeout_seconds: float = 10.0
    max_redirects: int = 5
    max_connections: int = 100
    max_keepalive_connections: int = 100
    keepalive_expiry_seconds: float = 5.0
    verify_ssl: bool = True
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES

    def validate(self) -> list[str]:
        """Valida configurações do relay.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.timeout_seconds <= 0:
            errors.append("RELAY_TIMEOUT_SECONDS deve ser > 0")

        if self.max_redirects < 0:
            errors.append("RELAY_MAX_REDIRECTS deve ser >= 0")

        if self.max_connections < 1:
            errors.append("RELAY_MAX_CONNECTIONS deve ser >= 1")

        if self.max_keepalive_connections > self.max_connections:
            errors.append("RELAY_MAX_KEEPALIVE_CONNECTIONS não pode exceder RELAY_MAX_CONNECTIONS")

        if self.max_body_bytes < 1:
            errors.append("RELAY_MAX_BODY_BYTES deve ser >= 1")

        return errors


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.lower() in ("true", "1", "yes")


def _load_relay_from_env() -> RelaySettings:
    """Carrega RelaySettings de variáveis de ambiente.

    Sem RELAY_VERIFY_SSL explícito, certificados só são validados em produção.
    """
    is_production = get_base_settings().is_production
    return RelaySettings(
        timeout_seconds=float(os.getenv("RELAY_TIMEOUT_SECONDS", "10")),
        max_redirects=int(os.getenv("RELAY_MAX_REDIRECTS", "5")),
        max_connections=int(os.getenv("RELAY_MAX_CONNECTIONS", "100")),
        max_keepalive_connections=int(os.getenv("RELAY_MAX_KEEPALIVE_CONNECTIONS", "100")),
        keepalive_expiry_seconds=float(os.getenv("RELAY_KEEPALIVE_EXPIRY_SECONDS", "5")),
        verify_ssl=_parse_bool(os.getenv("RELAY_VERIFY_SSL"), default=is_production),
        max_body_bytes=int(os.getenv("RELAY_MAX_BODY_BYTES", str(DEFAULT_MAX_BODY_BYTES))),
    )


@lru_cache(maxsize=1)
def get_relay_settings() -> RelaySettings:
    """Retorna instância cacheada de RelaySettings."""
    return _load_relay_from_env()
