"""Testes do endpoint POST / (relay) ponta a ponta com TestClient."""

from __future__ import annotations

import json
from collections.abc import Iterator
from types import SimpleNamespace

import httpx
import pytest
from fakes.fake_relay_client import FakeRelayClient
from fastapi import HTTPException
from fastapi.testclient import TestClient

from api.routes.dependencies import client_key, get_relay_use_case
from app.app import create_app
from app.constants.relay import HttpMethod
from app.domain.relay import JsonBody, RelayFailure, RelayResponse, TextBody
from app.infra.stores import MemoryRateLimiter
from app.use_cases.relay import RelayRequestUseCase
from config.settings import get_relay_settings
from utils.errors import RelayClientUnavailableError

TARGET = "https://api.example.com/items"


@pytest.fixture
def fake_client() -> FakeRelayClient:
    return FakeRelayClient()


@pytest.fixture
def client(fake_client: FakeRelayClient) -> Iterator[TestClient]:
    app = create_app()
    app.dependency_overrides[get_relay_use_case] = lambda: RelayRequestUseCase(fake_client)
    with TestClient(app) as test_client:
        yield test_client


def _post_json(client: TestClient, api: object) -> httpx.Response:
    return client.post("/", content=json.dumps({"api": api}), headers={"Content-Type": "application/json"})


class TestRelaySuccess:
    def test_json_envelope_is_relayed_and_mirrored(self, client: TestClient, fake_client: FakeRelayClient) -> None:
        fake_client.result = RelayResponse(status_code=201, content_type="application/json", content=b'{"id":9}')

        response = _post_json(
            client,
            {"url": TARGET, "method": "post", "header": ["X-Api-Key: k"], "body": '{"name":"x"}'},
        )

        assert response.status_code == 201
        assert response.json() == {"id": 9}
        assert response.headers["content-type"] == "application/json"
        outbound = fake_client.sent[0]
        assert outbound.method is HttpMethod.POST
        assert outbound.url == TARGET
        assert outbound.headers == {"X-Api-Key": "k"}
        assert outbound.body == JsonBody(value={"name": "x"})

    def test_xml_envelope_is_relayed(self, client: TestClient, fake_client: FakeRelayClient) -> None:
        xml = (
            "<api><url>https://api.example.com/items</url><method>PUT</method>"
            "<header>Content-Type: text/plain</header><body>not json</body></api>"
        )

        response = client.post("/", content=xml, headers={"Content-Type": "application/xml"})

        assert response.status_code == 200
        outbound = fake_client.sent[0]
        assert outbound.headers == {"Content-Type": "text/plain"}
        assert outbound.body == TextBody(text="not json")

    def test_target_error_status_is_mirrored_with_only_content_type(
        self, client: TestClient, fake_client: FakeRelayClient
    ) -> None:
        fake_client.result = RelayResponse(status_code=404, content_type="text/html", content=b"<h1>nf</h1>")

        response = _post_json(client, {"url": TARGET, "method": "GET"})

        assert response.status_code == 404
        assert response.content == b"<h1>nf</h1>"
        assert response.headers["content-type"] == "text/html"
        assert "set-cookie" not in response.headers

    def test_get_envelope_sends_no_body(self, client: TestClient, fake_client: FakeRelayClient) -> None:
        _post_json(client, {"url": TARGET, "method": "GET", "body": {"ignored": True}})
        assert fake_client.sent[0].body is None


class TestRelayFailures:
    def test_transport_failure_is_json_error(self, client: TestClient, fake_client: FakeRelayClient) -> None:
        fake_client.result = RelayFailure(status_code=504, error="Request timeout", details="ReadTimeout")

        response = _post_json(client, {"url": TARGET, "method": "GET"})

        assert response.status_code == 504
        assert response.json() == {"error": "Request timeout", "details": "ReadTimeout"}

    def test_unexpected_error_is_500(self, client: TestClient, fake_client: FakeRelayClient) -> None:
        fake_client.error = RuntimeError("boom")

        response = _post_json(client, {"url": TARGET, "method": "GET"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal proxy error", "details": "RuntimeError: boom"}

    def test_client_closed_mid_flight_is_503(self, client: TestClient, fake_client: FakeRelayClient) -> None:
        fake_client.error = RelayClientUnavailableError("relay client is closed")

        response = _post_json(client, {"url": TARGET, "method": "GET"})

        assert response.status_code == 503
        assert response.json()["error"] == "Relay client not ready"


class TestEnvelopeRejections:
    def test_unsupported_content_type(self, client: TestClient, fake_client: FakeRelayClient) -> None:
        response = client.post("/", content=b"{{{ garbage", headers={"Content-Type": "text/plain"})

        assert response.status_code == 415
        assert response.json()["error"] == "Unsupported Content-Type"
        assert fake_client.sent == []

    def test_invalid_json(self, client: TestClient) -> None:
        response = client.post("/", content=b"{oops", headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid JSON input"

    def test_invalid_xml(self, client: TestClient) -> None:
        response = client.post("/", content=b"<api><url>", headers={"Content-Type": "text/xml"})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid XML input"

    def test_missing_api_object(self, client: TestClient) -> None:
        response = client.post("/", content=b'{"url": "x"}', headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: 'api'"

    def test_deeply_nested_json_is_rejected_at_the_edge(self, client: TestClient, fake_client: FakeRelayClient) -> None:
        raw = b'{"api": ' + b"[" * 100_000 + b"]" * 100_000 + b"}"

        response = client.post("/", content=raw, headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid JSON input"
        assert response.headers["X-Correlation-Id"]
        assert fake_client.sent == []

    def test_deeply_nested_string_body_is_sent_raw(self, client: TestClient, fake_client: FakeRelayClient) -> None:
        text = "[" * 100_000 + "]" * 100_000

        response = _post_json(client, {"url": TARGET, "method": "POST", "body": text})

        assert response.status_code == 200
        assert fake_client.sent[0].body == TextBody(text=text)

    def test_missing_fields(self, client: TestClient) -> None:
        response = _post_json(client, {"url": TARGET})
        assert response.status_code == 400
        assert response.json()["error"] == "Missing required fields: 'method'"

    def test_invalid_method(self, client: TestClient) -> None:
        response = _post_json(client, {"url": TARGET, "method": "TRACE"})
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid HTTP method"

    def test_invalid_url_never_reaches_target(self, client: TestClient, fake_client: FakeRelayClient) -> None:
        response = _post_json(client, {"url": "not a url", "method": "GET"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid URL format"
        assert fake_client.sent == []

    def test_payload_too_large(self, monkeypatch: pytest.MonkeyPatch, client: TestClient) -> None:
        monkeypatch.setenv("RELAY_MAX_BODY_BYTES", "64")
        get_relay_settings.cache_clear()

        response = _post_json(client, {"url": TARGET, "method": "POST", "body": "x" * 200})

        assert response.status_code == 413
        assert response.json()["error"] == "Payload too large"

    def test_details_hidden_in_production(self, monkeypatch: pytest.MonkeyPatch, fake_client: FakeRelayClient) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        app = create_app()
        app.dependency_overrides[get_relay_use_case] = lambda: RelayRequestUseCase(fake_client)

        with TestClient(app) as prod_client:
            response = prod_client.post("/", content=b"{oops", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON input"}

    def test_missing_api_named_in_production(self, monkeypatch: pytest.MonkeyPatch, fake_client: FakeRelayClient) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        app = create_app()
        app.dependency_overrides[get_relay_use_case] = lambda: RelayRequestUseCase(fake_client)

        with TestClient(app) as prod_client:
            response = prod_client.post("/", content=b'{"url": "http://x"}', headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: 'api'"}


class TestRateLimit:
    def test_requests_over_limit_get_429(self, client: TestClient) -> None:
        client.app.state.rate_limiter = MemoryRateLimiter(max_requests=2, window_seconds=60)

        statuses = [_post_json(client, {"url": TARGET, "method": "GET"}).status_code for _ in range(3)]
        blocked = _post_json(client, {"url": TARGET, "method": "GET"})

        assert statuses == [200, 200, 429]
        assert blocked.status_code == 429
        assert blocked.json() == {"error": "Too many requests from this IP, please try again later"}
        assert int(blocked.headers["retry-after"]) >= 1
        assert blocked.headers["ratelimit-limit"] == "2"

    def test_disabled_limiter_never_blocks(self, client: TestClient) -> None:
        client.app.state.rate_limiter = None
        statuses = {_post_json(client, {"url": TARGET, "method": "GET"}).status_code for _ in range(5)}
        assert statuses == {200}


class TestUnknownRoutes:
    def test_unknown_path_is_json_404(self, client: TestClient) -> None:
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found"}

    def test_wrong_method_on_relay_path(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}


class TestDependencies:
    def _request(self, state: SimpleNamespace, host: str | None = "10.1.2.3") -> SimpleNamespace:
        return SimpleNamespace(
            app=SimpleNamespace(state=state),
            client=SimpleNamespace(host=host) if host else None,
        )

    def test_client_key_uses_peer_address(self) -> None:
        assert client_key(self._request(SimpleNamespace())) == "10.1.2.3"
        assert client_key(self._request(SimpleNamespace(), host=None)) == "unknown"

    @pytest.mark.asyncio
    async def test_use_case_unavailable_when_client_closed(self) -> None:
        closed = FakeRelayClient()
        await closed.aclose()

        with pytest.raises(HTTPException) as exc_info:
            get_relay_use_case(self._request(SimpleNamespace(relay_client=closed)))
        assert exc_info.value.status_code == 503

    def test_use_case_unavailable_without_client(self) -> None:
        with pytest.raises(HTTPException) as exc_info:
            get_relay_use_case(self._request(SimpleNamespace()))
        assert exc_info.value.detail == "Relay client not ready"

    def test_use_case_built_over_shared_client(self) -> None:
        use_case = get_relay_use_case(self._request(SimpleNamespace(relay_client=FakeRelayClient())))
        assert isinstance(use_case, RelayRequestUseCase)
