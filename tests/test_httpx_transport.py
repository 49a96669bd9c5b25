from __future__ import annotations

import json
from typing import List

import httpx
import pytest

from pubg_api.domain.entities import RequestHeaders, RequestOptions
from pubg_api.infrastructure.api import HttpxTransport, PUBGClient


@pytest.mark.asyncio
async def test_get_sends_headers_and_decodes_json() -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": {"type": "status", "id": "pubg-api"}})

    transport = HttpxTransport(transport=httpx.MockTransport(handler))
    response = await transport.get(
        "https://api.pubg.com/status", RequestOptions(headers=RequestHeaders.bearer("k"))
    )
    await transport.aclose()

    assert response.status_code == 200
    assert response.data["data"]["id"] == "pubg-api"
    assert seen[0].headers["Accept"] == "application/vnd.api+json"
    assert seen[0].headers["Authorization"] == "Bearer k"


@pytest.mark.asyncio
async def test_non_2xx_raises_status_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"errors": [{"title": "Unauthorized"}]})

    transport = HttpxTransport(transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        await transport.get("https://api.pubg.com/tournaments", RequestOptions())
    await transport.aclose()

    assert excinfo.value.response.status_code == 401


@pytest.mark.asyncio
async def test_malformed_json_propagates() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>nope</html>")

    transport = HttpxTransport(transport=httpx.MockTransport(handler))

    with pytest.raises(ValueError):
        await transport.get("https://api.pubg.com/status", RequestOptions())
    await transport.aclose()


@pytest.mark.asyncio
async def test_network_errors_propagate() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    transport = HttpxTransport(transport=httpx.MockTransport(handler))

    with pytest.raises(httpx.ConnectError):
        await transport.get("https://api.pubg.com/status", RequestOptions())
    await transport.aclose()


@pytest.mark.asyncio
async def test_client_end_to_end_players_and_telemetry() -> None:
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.host == "telemetry.example":
            return httpx.Response(200, content=json.dumps([{"_T": "LogMatchStart"}]).encode())
        if request.url.path.endswith("/matches/abc123"):
            return httpx.Response(
                200,
                json={
                    "data": {"type": "match", "id": "abc123"},
                    "included": [{"type": "asset", "id": "a", "attributes": {"URL": "https://telemetry.example/x"}}],
                },
            )
        return httpx.Response(200, json={"data": []})

    transport = HttpxTransport(transport=httpx.MockTransport(handler))
    async with PUBGClient("k", "steam", transport=transport) as api:
        await api.get_players_info("playerNames", ["shroud", "cytandhyw00"])
        telemetry = await api.get_telemetry_for_match("abc123")
    await transport.aclose()

    players_request, match_request, telemetry_request = seen
    assert players_request.url.path == "/shards/steam/players"
    assert players_request.url.params["filter[playerNames]"] == "shroud,cytandhyw00"
    assert match_request.headers["Authorization"] == "Bearer k"
    assert str(telemetry_request.url) == "https://telemetry.example/x"
    assert "Authorization" not in telemetry_request.headers
    assert telemetry.data == [{"_T": "LogMatchStart"}]


@pytest.mark.asyncio
async def test_external_client_is_left_open() -> None:
    session = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
    transport = HttpxTransport(client=session)

    await transport.aclose()

    assert not session.is_closed
    await session.aclose()


def test_default_timeout_ignores_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PUBG_REQUEST_TIMEOUT", "30s")

    assert HttpxTransport().timeout == 30.0
    assert HttpxTransport(timeout=5.0).timeout == 5.0
