"""URL construction for API endpoints."""
from typing import Iterable, Mapping, Optional, Sequence, Union
from urllib.parse import quote

QueryValue = Union[str, int, Sequence[str]]


def quote_segment(segment: Union[str, int]) -> str:
    """Percent-encode one path segment; ``/`` and ``?`` never survive."""
    return quote(str(segment), safe="")


def quote_query_value(value: QueryValue) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(quote(str(item), safe="") for item in value)
    return quote(str(value), safe="")


def build_url(
    base: str,
    *segments: Union[str, int],
    query: Optional[Union[Mapping[str, QueryValue], Iterable[tuple]]] = None,
) -> str:
    """Join ``base`` with encoded path segments and an optional query string.

    Query keys are emitted verbatim so bracketed names such as
    ``filter[playerNames]`` and ``page[number]`` reach the server literally.
    Sequence values are encoded item by item and joined with a bare comma.
    """
    url = base.rstrip("/")
    if segments:
        url += "/" + "/".join(quote_segment(s) for s in segments)
    if query:
        pairs = query.items() if isinstance(query, Mapping) else query
        url += "?" + "&".join(f"{key}={quote_query_value(value)}" for key, value in pairs)
    return url
