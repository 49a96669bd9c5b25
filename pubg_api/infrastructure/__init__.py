"""Infrastructure layer - API client and HTTP transport."""
from .api import PUBGClient, HttpxTransport, build_url, find_telemetry_url

__all__ = [
    'PUBGClient',
    'HttpxTransport',
    'build_url',
    'find_telemetry_url',
]
