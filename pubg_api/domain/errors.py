"""Errors raised by the client itself.

Transport failures (``httpx.HTTPError`` and friends) are not wrapped; they
reach the caller unchanged.
"""


class PUBGAPIError(Exception):
    """Base class for errors originating in this package."""


class NoTelemetryAssetFound(PUBGAPIError, LookupError):
    """The match payload does not reference a telemetry asset."""

    def __init__(self, match_id: str, reason: str = "no included resource of type 'asset'") -> None:
        super().__init__(f"match {match_id}: {reason}")
        self.match_id = match_id
        self.reason = reason
