"""Domain layer - enums, request/response entities, interfaces and errors."""
from .entities import APIResponse, RequestHeaders, RequestOptions
from .enums import GameMode, Platform, PlayerFilter
from .errors import NoTelemetryAssetFound, PUBGAPIError
from .interfaces import Transport

__all__ = [
    # Entities
    'APIResponse',
    'RequestHeaders',
    'RequestOptions',
    # Enums
    'GameMode',
    'Platform',
    'PlayerFilter',
    # Errors
    'NoTelemetryAssetFound',
    'PUBGAPIError',
    # Interfaces
    'Transport',
]
