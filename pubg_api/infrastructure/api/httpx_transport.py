"""Default transport backed by ``httpx.AsyncClient``."""
import time
from typing import Optional

import httpx

from ...core.logging import get_logger
from ...domain.entities import APIResponse, RequestOptions
from ...domain.interfaces import Transport

logger = get_logger(__name__, service="transport")

DEFAULT_TIMEOUT = 30.0


class HttpxTransport(Transport):
    """Asynchronous GET transport.

    Non-2xx responses raise ``httpx.HTTPStatusError`` and undecodable bodies
    raise ``ValueError`` from ``response.json()``; nothing is retried.
    """

    def __init__(
        self,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.timeout = DEFAULT_TIMEOUT if timeout is None else timeout
        self._owns_client = client is None
        self.session: httpx.AsyncClient = client or httpx.AsyncClient(
            timeout=self.timeout,
            transport=transport,
            follow_redirects=True,
        )

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *_) -> None:
        await self.aclose()

    async def get(self, url: str, options: RequestOptions) -> APIResponse:
        start = time.perf_counter()
        response = await self.session.get(url, headers=options.headers.as_dict())
        elapsed_ms = round((time.perf_counter() - start) * 1000.0, 2)
        logger.debug(
            lambda: "response",
            extra={"method": "GET", "url": url, "status": response.status_code, "elapsed_ms": elapsed_ms},
        )
        response.raise_for_status()
        return APIResponse(
            status_code=response.status_code,
            data=response.json(),
            url=str(response.url),
            headers=dict(response.headers),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self.session.aclose()
