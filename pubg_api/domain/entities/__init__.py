"""Domain entities."""
from .request_options import JSON_API_MEDIA_TYPE, RequestHeaders, RequestOptions
from .response import APIResponse

__all__ = [
    'JSON_API_MEDIA_TYPE',
    'RequestHeaders',
    'RequestOptions',
    'APIResponse',
]
