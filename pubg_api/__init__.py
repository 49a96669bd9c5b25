"""
PUBG API Client
===============

Asynchronous wrapper around the PUBG developer API (https://api.pubg.com).

Features:
- One coroutine per documented resource: players, season stats, seasons,
  matches, telemetry, leaderboards, tournaments and service status
- Layered layout (Domain → Infrastructure → Presentation)
- Pluggable HTTP transport, httpx by default
- Structured logging (console and JSONL)
"""

__version__ = "1.0.0"

from .domain import (
    APIResponse, RequestHeaders, RequestOptions,
    GameMode, Platform, PlayerFilter,
    NoTelemetryAssetFound, PUBGAPIError,
    Transport,
)

from .infrastructure import (
    PUBGClient,
    HttpxTransport,
    find_telemetry_url,
)

__all__ = [
    # Version info
    '__version__',

    # Domain
    'APIResponse',
    'RequestHeaders',
    'RequestOptions',
    'GameMode',
    'Platform',
    'PlayerFilter',
    'NoTelemetryAssetFound',
    'PUBGAPIError',
    'Transport',

    # Infrastructure
    'PUBGClient',
    'HttpxTransport',
    'find_telemetry_url',
]
