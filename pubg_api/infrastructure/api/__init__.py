"""Infrastructure API module."""
from .pubg_client import PUBGClient, find_telemetry_url, LEADERBOARDS_SHARD
from .httpx_transport import HttpxTransport
from .urls import build_url

__all__ = [
    'PUBGClient',
    'HttpxTransport',
    'LEADERBOARDS_SHARD',
    'build_url',
    'find_telemetry_url',
]
