"""Testes do RelayRequestUseCase."""

from __future__ import annotations

import pytest
from fakes.fake_relay_client import FakeRelayClient

from app.constants.relay import HttpMethod
from app.domain.relay import Envelope, HeaderMapping, JsonBody, RelayFailure
from app.use_cases.relay import RelayRequestUseCase


@pytest.mark.asyncio
async def test_execute_sends_one_outbound_request() -> None:
    client = FakeRelayClient()
    use_case = RelayRequestUseCase(client)
    envelope = Envelope(
        url="https://api.example.com/users?page=2",
        method=HttpMethod.PATCH,
        headers=HeaderMapping(entries=(("Authorization", "Bearer t"),)),
        body={"name": "relay"},
    )

    result = await use_case.execute(envelope)

    assert result is client.result
    assert len(client.sent) == 1
    outbound = client.sent[0]
    assert outbound.method is HttpMethod.PATCH
    assert outbound.url == "https://api.example.com/users?page=2"
    assert outbound.headers == {"Authorization": "Bearer t"}
    assert outbound.body == JsonBody(value={"name": "relay"})


@pytest.mark.asyncio
async def test_execute_returns_transport_failure_unchanged() -> None:
    failure = RelayFailure(status_code=504, error="Request timeout")
    use_case = RelayRequestUseCase(FakeRelayClient(failure))

    result = await use_case.execute(Envelope(url="http://x.example", method=HttpMethod.GET))

    assert result == failure


@pytest.mark.asyncio
async def test_execute_propagates_unexpected_errors() -> None:
    use_case = RelayRequestUseCase(FakeRelayClient(error=RuntimeError("boom")))

    with pytest.raises(RuntimeError, match="boom"):
        await use_case.execute(Envelope(url="http://x.example", method=HttpMethod.GET))
