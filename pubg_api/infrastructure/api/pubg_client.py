"""PUBG API client."""
from typing import Any, Mapping, Optional, Sequence, Union

from ...core.logging import context, get_logger
from ...domain.entities import APIResponse, RequestHeaders, RequestOptions
from ...domain.enums import GameMode, Platform, PlayerFilter
from ...domain.errors import NoTelemetryAssetFound
from ...domain.interfaces import Transport
from .httpx_transport import HttpxTransport
from .urls import build_url

logger = get_logger(__name__, service="pubg-api")

DEFAULT_BASE_URL = "https://api.pubg.com"

# Leaderboards are only published for PC players, so the shard is fixed
# whatever platform the client was built for.
LEADERBOARDS_SHARD = Platform.STEAM.shard


def _value(item: Union[str, Platform, GameMode, PlayerFilter]) -> str:
    return item.value if isinstance(item, (Platform, GameMode, PlayerFilter)) else str(item)


def find_telemetry_url(match: Any, match_id: str = "") -> str:
    """Return ``attributes.URL`` of the first ``asset`` resource in a match document.

    ``match`` is either an ``APIResponse`` or the decoded JSON body of a
    match lookup. Raises ``NoTelemetryAssetFound`` when no asset is listed
    or the asset carries no URL.
    """
    response = match if isinstance(match, APIResponse) else APIResponse(status_code=200, data=match)
    for resource in response.included:
        if isinstance(resource, Mapping) and resource.get("type") == "asset":
            attributes = resource.get("attributes")
            url = attributes.get("URL") if isinstance(attributes, Mapping) else None
            if not url:
                raise NoTelemetryAssetFound(match_id, "asset resource has no attributes.URL")
            return url
    raise NoTelemetryAssetFound(match_id)


class PUBGClient:
    """Asynchronous client for the PUBG REST API.

    Every operation issues one GET (telemetry issues two) and returns the
    transport's ``APIResponse`` untouched. Nothing is validated locally:
    a bad platform or identifier fails at the server.

    Usage::

        async with PUBGClient(api_key, Platform.STEAM) as api:
            players = await api.get_players_info(PlayerFilter.PLAYER_NAMES, ["shroud"])
    """

    def __init__(
        self,
        api_key: str,
        platform: Union[str, Platform],
        *,
        transport: Optional[Transport] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
    ) -> None:
        self._api_key = api_key
        self._platform = _value(platform)
        self._api_root = base_url.rstrip("/")
        self._api_endpoint = f"{self._api_root}/shards/{self._platform}"
        self._owns_transport = transport is None
        # timeout only applies to the transport the client creates itself
        self._transport: Transport = transport or HttpxTransport(timeout=timeout)

    async def __aenter__(self) -> "PUBGClient":
        return self

    async def __aexit__(self, *_) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def platform(self) -> str:
        return self._platform

    @property
    def api_endpoint(self) -> str:
        """Base URL of shard-scoped resources, ``https://api.pubg.com/shards/<platform>``."""
        return self._api_endpoint

    def __repr__(self) -> str:
        return f"PUBGClient(platform={self._platform!r}, api_endpoint={self._api_endpoint!r})"

    # ── Players ────────────────────────────────────────────────────────

    async def get_players_info(
        self, filter: Union[str, PlayerFilter], players: Union[str, Sequence[str]]
    ) -> APIResponse:
        """Get up to ten players and their matches from the last 14 days.

        ``filter`` is ``playerIds`` or ``playerNames``; the two cannot be
        combined in one call. A single name or id may be passed as a plain
        string. Player objects are specific to a platform shard.
        """
        values = [players] if isinstance(players, str) else list(players)
        query = [(PlayerFilter.query_key_for(_value(filter)), values)]
        url = build_url(self._api_endpoint, "players", query=query)
        return await self._get(url, authorization=True)

    async def get_season_stats(self, account_id: str, season_id: str) -> APIResponse:
        """Get one player's aggregated stats per game mode for a season."""
        url = build_url(self._api_endpoint, "players", account_id, "seasons", season_id)
        return await self._get(url, authorization=True)

    # ── Seasons ────────────────────────────────────────────────────────

    async def get_available_seasons(self) -> APIResponse:
        """List the seasons of this shard.

        The list changes roughly every two months; callers should not poll it
        more than once a month.
        """
        return await self._get(build_url(self._api_endpoint, "seasons"), authorization=False)

    # ── Matches ────────────────────────────────────────────────────────

    async def get_match_info(self, match_id: str) -> APIResponse:
        return await self._get(build_url(self._api_endpoint, "matches", match_id), authorization=True)

    async def get_telemetry_url(self, match_id: str) -> str:
        """Look up the match and return the URL of its telemetry asset."""
        match = await self.get_match_info(match_id)
        try:
            return find_telemetry_url(match, match_id)
        except NoTelemetryAssetFound as exc:
            logger.warning(lambda: f"no telemetry asset for match {match_id}: {exc.reason}")
            raise

    async def get_telemetry_for_match(self, match_id: str) -> APIResponse:
        """Fetch the telemetry events of a match.

        Two requests: the match lookup, then the asset URL it references.
        The asset is served from a CDN and is fetched without the API key.
        """
        async with context(match_id=match_id):
            telemetry_url = await self.get_telemetry_url(match_id)
            return await self._get(telemetry_url, authorization=False)

    # ── Leaderboards ───────────────────────────────────────────────────

    async def get_leaderboards(self, gamemode: Union[str, GameMode], page: int) -> APIResponse:
        """Get a leaderboard page (``0`` or ``1``) for a game mode.

        Always targets the ``steam`` shard. Leaderboards are updated every
        two hours.
        """
        url = build_url(
            self._api_root,
            "shards",
            LEADERBOARDS_SHARD,
            "leaderboards",
            _value(gamemode),
            query=[("page[number]", page)],
        )
        return await self._get(url, authorization=True)

    # ── Tournaments ────────────────────────────────────────────────────

    async def get_available_tournaments(self) -> APIResponse:
        return await self._get(build_url(self._api_root, "tournaments"), authorization=True)

    async def get_tournament_info(self, tournament_id: str) -> APIResponse:
        return await self._get(build_url(self._api_root, "tournaments", tournament_id), authorization=True)

    # ── Status ─────────────────────────────────────────────────────────

    async def get_api_status(self) -> APIResponse:
        """Check that the API is up; the body carries the release date and version."""
        return await self._get(build_url(self._api_root, "status"), authorization=False)

    # ── Internals ──────────────────────────────────────────────────────

    def _apply_request_options(self, authorization: bool) -> RequestOptions:
        headers = RequestHeaders.bearer(self._api_key) if authorization else RequestHeaders()
        return RequestOptions(headers=headers)

    async def _get(self, url: str, *, authorization: bool) -> APIResponse:
        options = self._apply_request_options(authorization)
        logger.trace(lambda: "request", extra={"method": "GET", "url": url, "authorized": options.headers.is_authorized})
        return await self._transport.get(url, options)
