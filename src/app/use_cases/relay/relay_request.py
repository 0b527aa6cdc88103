"""Use case do relay: Envelope -> OutboundRequest -> RelayResult."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.services.relay_outbound import build_outbound_request

if TYPE_CHECKING:
    from app.domain.relay import Envelope, RelayResult
    from app.protocols.relay_client import RelayClientProtocol

logger = logging.getLogger(__name__)


class RelayRequestUseCase:
    """Orquestra a montagem do request outbound e sua execução.

    Cada execução produz exatamente uma chamada ao target. O cliente
    injetado é o único recurso compartilhado entre execuções.
    """

    def __init__(self, client: RelayClientProtocol) -> None:
        self._client = client

    async def execute(self, envelope: Envelope) -> RelayResult:
        """Executa o relay de um envelope já decodificado e validado."""
        outbound = build_outbound_request(envelope)
        logger.debug(
            "relay_outbound_built",
            extra={
                "method": outbound.method.value,
                "header_count": len(outbound.headers),
                "has_body": outbound.body is not None,
            },
        )
        return await self._client.send(outbound)
