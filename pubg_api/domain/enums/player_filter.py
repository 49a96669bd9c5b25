"""Filters accepted by the players endpoint."""
from enum import Enum


class PlayerFilter(Enum):
    """Either ids or names may be used for a players lookup, never both at once."""

    PLAYER_IDS = "playerIds"
    PLAYER_NAMES = "playerNames"

    @property
    def query_key(self) -> str:
        """Get the bracketed query parameter name, e.g. ``filter[playerNames]``."""
        return self.query_key_for(self.value)

    @staticmethod
    def query_key_for(name: str) -> str:
        """Bracketed key for any filter name; unknown names are passed through."""
        return f"filter[{name}]"
