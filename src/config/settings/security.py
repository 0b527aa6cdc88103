"""Settings de proteção da borda HTTP.

CORS e limite de requisições por cliente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

from config.settings.base import get_base_settings


@dataclass(frozen=True)
class SecuritySettings:
    """Configurações de CORS e rate limit.

    Attributes:
        allowed_origins: Origens aceitas pelo CORS
        rate_limit_enabled: Se o rate limit está ativo
        rate_limit_window_seconds: Janela de contagem por cliente
        rate_limit_max_requests: Requisições permitidas por janela
        hsts_enabled: Envia Strict-Transport-Security
    """

    allowed_origins: tuple[str, ...] = field(default_factory=lambda: ("*",))
    rate_limit_enabled: bool = True
    rate_limit_window_seconds: int = 15 * 60
    rate_limit_max_requests: int = 100
    hsts_enabled: bool = False

    def validate(self) -> list[str]:
        """Valida configurações de segurança.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.allowed_origins:
            errors.append("ALLOWED_ORIGINS não pode ser vazio")

        if self.rate_limit_window_seconds < 1:
            errors.append("RATE_LIMIT_WINDOW_SECONDS deve ser >= 1")

        if self.rate_limit_max_requests < 1:
            errors.append("RATE_LIMIT_MAX_REQUESTS deve ser >= 1")

        return errors


def _parse_origins(raw: str | None, is_production: bool) -> tuple[str, ...]:
    """Fora de produção qualquer origem é aceita."""
    if not is_production or not raw:
        return ("*",)
    origins = tuple(origin.strip() for origin in raw.split(",") if origin.strip())
    return origins or ("*",)


def _load_security_from_env() -> SecuritySettings:
    """Carrega SecuritySettings de variáveis de ambiente."""
    is_production = get_base_settings().is_production
    return SecuritySettings(
        allowed_origins=_parse_origins(os.getenv("ALLOWED_ORIGINS"), is_production),
        rate_limit_enabled=os.getenv("RATE_LIMIT_ENABLED", "true").lower() in ("true", "1"),
        rate_limit_window_seconds=int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "900")),
        rate_limit_max_requests=int(os.getenv("RATE_LIMIT_MAX_REQUESTS", "100")),
        hsts_enabled=is_production,
    )


@lru_cache(maxsize=1)
def get_security_settings() -> SecuritySettings:
    """Retorna instância cacheada de SecuritySettings."""
    return _load_security_from_env()
