"""Settings do processo: ambiente de execução e listener HTTP.

O ambiente decide comportamentos de segurança em outros módulos:
validação de certificados do target, `details` nas respostas de erro,
HSTS, origens CORS e docs da API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"development", "staging", "production"})

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "prod": "production",
    "production": "production",
    "stage": "staging",
    "staging": "staging",
}

DEFAULT_PORT = 3000


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do relay.

    Attributes:
        environment: development | staging | production
        service_name: Campo `service` dos logs e do /health
        debug: Habilita reload do uvicorn em development
        host: Interface do listener
        port: Porta do listener
    """

    environment: Environment = "development"
    service_name: str = "envelope-relay"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.environment not in VALID_ENVIRONMENTS:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name.strip():
            errors.append("SERVICE_NAME não pode ser vazio")

        if not self.host:
            errors.append("HOST não pode ser vazio")

        if not 0 < self.port < 65536:
            errors.append(f"PORT fora do intervalo válido: {self.port}")

        return errors


def _parse_environment(raw: str) -> Environment:
    """Aceita aliases curtos; qualquer valor desconhecido vira development."""
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "envelope-relay"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", str(DEFAULT_PORT))),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
