"""Transport interface used by the API client."""
from abc import ABC, abstractmethod

from ..entities import APIResponse, RequestOptions


class Transport(ABC):
    """Issues GET requests on behalf of ``PUBGClient``.

    Implementations report failures (network errors, non-2xx statuses,
    undecodable bodies) by raising; the client never inspects them.
    """

    @abstractmethod
    async def get(self, url: str, options: RequestOptions) -> APIResponse:
        """Fetch ``url`` with the given headers and return the parsed body."""
        pass

    async def aclose(self) -> None:
        """Release network resources. Optional for stateless transports."""
        return None
