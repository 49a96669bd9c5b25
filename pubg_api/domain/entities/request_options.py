"""Per-request options sent with every API call."""
from dataclasses import dataclass, field
from typing import Dict, Optional

JSON_API_MEDIA_TYPE = "application/vnd.api+json"


@dataclass(frozen=True, slots=True)
class RequestHeaders:
    """The only two headers the API client ever sends.

    A closed record rather than a free-form mapping: there is no way to smuggle
    an extra header into a request.
    """

    accept: str = JSON_API_MEDIA_TYPE
    authorization: Optional[str] = None

    @classmethod
    def bearer(cls, api_key: str) -> 'RequestHeaders':
        return cls(authorization=f"Bearer {api_key}")

    @property
    def is_authorized(self) -> bool:
        return self.authorization is not None

    def as_dict(self) -> Dict[str, str]:
        """Render the wire header names, omitting Authorization when unset."""
        headers = {"Accept": self.accept}
        if self.authorization is not None:
            headers["Authorization"] = self.authorization
        return headers


@dataclass(frozen=True, slots=True)
class RequestOptions:
    headers: RequestHeaders = field(default_factory=RequestHeaders)
