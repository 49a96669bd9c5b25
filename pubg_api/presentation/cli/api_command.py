from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable, Iterable, List, Optional, TextIO

import httpx

from ...config import settings
from ...core.logging import StructuredLogger, get_logger
from ...domain.entities import APIResponse
from ...domain.enums import GameMode, Platform, PlayerFilter
from ...domain.errors import PUBGAPIError
from ...infrastructure.api import PUBGClient

ClientFactory = Callable[[str, str], PUBGClient]

# Commands whose requests go out without the API key.
_KEYLESS_COMMANDS = {"status", "seasons"}


def default_client(api_key: str, platform: str) -> PUBGClient:
    """Build a client from the command settings (base URL, timeout)."""
    return PUBGClient(api_key, platform, base_url=settings.API_BASE_URL, timeout=settings.REQUEST_TIMEOUT)


def _split_csv(values: Iterable[str]) -> List[str]:
    out: List[str] = []
    for value in values:
        out.extend(v.strip() for v in value.split(",") if v.strip())
    return out


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pubg-api", description="Query the PUBG developer API.")
    parser.add_argument("--api-key", default=None, help="API key (default: $PUBG_API_KEY)")
    parser.add_argument(
        "--platform",
        default=None,
        help="platform shard, one of "
        + ", ".join(f"{p.shard} ({p.friendly})" for p in Platform)
        + " (default: $PUBG_PLATFORM)",
    )
    parser.add_argument("--json-indent", type=int, default=2, help="indentation of printed JSON, 0 for compact")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("status", help="API service status")
    sub.add_parser("seasons", help="list seasons of the platform")

    players = sub.add_parser("players", help="look up players by name or account id")
    who = players.add_mutually_exclusive_group(required=True)
    who.add_argument("--names", nargs="+", help="player names (space or comma separated)")
    who.add_argument("--ids", nargs="+", help="account ids (space or comma separated)")

    stats = sub.add_parser("season-stats", help="a player's stats for one season")
    stats.add_argument("account_id")
    stats.add_argument("season_id")

    match = sub.add_parser("match", help="a single match")
    match.add_argument("match_id")

    boards = sub.add_parser("leaderboards", help="leaderboard page of a game mode (steam shard)")
    boards.add_argument("gamemode", choices=[m.api_name for m in GameMode])
    boards.add_argument("--page", type=int, default=0, help="page number, 0 or 1")

    tournaments = sub.add_parser("tournaments", help="list tournaments, or one tournament by id")
    tournaments.add_argument("tournament_id", nargs="?")

    telemetry = sub.add_parser("telemetry", help="telemetry events of a match")
    telemetry.add_argument("match_id")
    telemetry.add_argument("--url-only", action="store_true", help="print the telemetry asset URL and stop")
    return parser


class APICommand:
    """Runs one API call described by command line arguments and prints the JSON body."""

    def __init__(
        self,
        client_factory: Optional[ClientFactory] = None,
        *,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.log: StructuredLogger = get_logger(__name__, service="cli")
        self.client_factory: ClientFactory = client_factory or default_client
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    async def run(self, argv: Optional[Iterable[str]] = None) -> int:
        args = build_parser().parse_args(list(argv) if argv is not None else None)
        api_key = args.api_key if args.api_key is not None else settings.PUBG_API_KEY
        platform = args.platform or settings.PLATFORM

        if args.command not in _KEYLESS_COMMANDS:
            try:
                if args.api_key is None:
                    settings.validate()
                elif not args.api_key:
                    raise ValueError("--api-key must not be empty")
            except ValueError as exc:
                print(f"error: {exc}", file=self.stderr)
                return 2

        self.log.info(lambda: f"command {args.command} platform={platform}")
        try:
            async with self.client_factory(api_key, platform) as api:
                result = await self._dispatch(api, args)
        except httpx.HTTPStatusError as exc:
            self.log.error(lambda: f"{args.command} failed: HTTP {exc.response.status_code}")
            print(f"error: HTTP {exc.response.status_code} for {exc.request.url}", file=self.stderr)
            return 1
        except httpx.HTTPError as exc:
            self.log.error(lambda: f"{args.command} failed: {exc!r}")
            print(f"error: {exc}", file=self.stderr)
            return 1
        except PUBGAPIError as exc:
            self.log.error(lambda: f"{args.command} failed: {exc}")
            print(f"error: {exc}", file=self.stderr)
            return 1
        except ValueError as exc:
            self.log.error(lambda: f"{args.command} failed: undecodable response: {exc}")
            print(f"error: invalid JSON in response: {exc}", file=self.stderr)
            return 1

        self._print(result, args.json_indent)
        return 0

    async def _dispatch(self, api: PUBGClient, args: argparse.Namespace) -> Any:
        command = args.command
        if command == "status":
            return await api.get_api_status()
        if command == "seasons":
            return await api.get_available_seasons()
        if command == "players":
            if args.names:
                return await api.get_players_info(PlayerFilter.PLAYER_NAMES, _split_csv(args.names))
            return await api.get_players_info(PlayerFilter.PLAYER_IDS, _split_csv(args.ids))
        if command == "season-stats":
            return await api.get_season_stats(args.account_id, args.season_id)
        if command == "match":
            return await api.get_match_info(args.match_id)
        if command == "leaderboards":
            return await api.get_leaderboards(GameMode.from_string(args.gamemode), args.page)
        if command == "tournaments":
            if args.tournament_id:
                return await api.get_tournament_info(args.tournament_id)
            return await api.get_available_tournaments()
        if command == "telemetry":
            if args.url_only:
                return await api.get_telemetry_url(args.match_id)
            return await api.get_telemetry_for_match(args.match_id)
        raise RuntimeError(f"unknown command: {command}")

    def _print(self, result: Any, indent: int) -> None:
        if isinstance(result, APIResponse):
            text = json.dumps(result.data, indent=indent or None, ensure_ascii=False)
        else:
            text = str(result)
        print(text, file=self.stdout)
