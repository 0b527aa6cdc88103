"""Use cases do relay HTTP."""

from .relay_request import RelayRequestUseCase

__all__ = [
    "RelayRequestUseCase",
]
