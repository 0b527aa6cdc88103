"""Exceções de infraestrutura do relay (não viram resposta 4xx)."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura do próprio serviço."""


class RelayClientUnavailableError(InfrastructureError):
    """Pool de conexões outbound não inicializado ou já fechado."""


class InvalidSettingsError(InfrastructureError):
    """Settings inválidas em ambiente estrito; o processo não deve subir."""

    def __init__(self, environment: str, errors: list[str]) -> None:
        self.environment = environment
        self.errors = errors
        details = "\n".join(f"- {error}" for error in errors)
        super().__init__(f"Configuração inválida para {environment}:\n{details}")
