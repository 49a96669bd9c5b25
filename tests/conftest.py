from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from pubg_api.domain.entities import APIResponse, RequestOptions
from pubg_api.domain.interfaces import Transport
from pubg_api.infrastructure.api import PUBGClient

API_KEY = "test-key"
TELEMETRY_URL = "https://telemetry.example/x"


class RecordingTransport(Transport):
    """Returns canned bodies keyed by URL and records every request."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, RequestOptions]] = []
        self.responses: Dict[str, Any] = {}
        self.closed = False

    async def get(self, url: str, options: RequestOptions) -> APIResponse:
        self.calls.append((url, options))
        payload = self.responses.get(url, {"data": []})
        if isinstance(payload, Exception):
            raise payload
        return APIResponse(status_code=200, data=payload, url=url)

    async def aclose(self) -> None:
        self.closed = True

    @property
    def urls(self) -> List[str]:
        return [url for url, _ in self.calls]

    def headers(self, index: int = -1) -> Dict[str, str]:
        return self.calls[index][1].headers.as_dict()


def match_payload(*included: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "data": {"type": "match", "id": "abc123", "attributes": {"gameMode": "squad-fpp"}},
        "included": list(included),
    }


def asset(url: str = TELEMETRY_URL) -> Dict[str, Any]:
    return {
        "type": "asset",
        "id": "1ad97f85-cf9b-11e7-b84e-0a586460f004",
        "attributes": {"URL": url, "name": "telemetry", "createdAt": "2018-01-01T00:00:00Z"},
    }


def participant(name: str = "shroud") -> Dict[str, Any]:
    return {"type": "participant", "id": f"p-{name}", "attributes": {"stats": {"name": name}}}


@pytest.fixture()
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture()
def client(transport: RecordingTransport) -> PUBGClient:
    return PUBGClient(API_KEY, "steam", transport=transport)
