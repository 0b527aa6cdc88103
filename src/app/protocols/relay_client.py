"""Protocolo do executor de relay.

Evita dependência direta do use case em httpx.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.relay import OutboundRequest, RelayResult


class RelayClientProtocol(Protocol):
    """Executa um OutboundRequest e devolve o resultado já classificado.

    Falhas de transporte viram RelayFailure; só um pool já fechado levanta
    RelayClientUnavailableError.
    """

    @property
    def is_closed(self) -> bool: ...

    async def send(self, request: OutboundRequest) -> RelayResult: ...

    async def aclose(self) -> None: ...
