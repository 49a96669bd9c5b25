"""Platform shard enumeration for the PUBG API."""
from enum import Enum


class Platform(Enum):
    """PUBG platform shards.

    Provides:
    - shard: the path segment used in ``/shards/{shard}``
    - friendly: short human-friendly label for the CLI
    """

    STEAM = "steam"            # PC (Steam)
    KAKAO = "kakao"            # PC (Kakao)
    CONSOLE = "console"        # Xbox and PlayStation, cross-platform seasons
    XBOX = "xbox"              # Xbox
    PSN = "psn"                # PlayStation
    STADIA = "stadia"          # Stadia
    TOURNAMENT = "tournament"  # Esports tournament matches

    @property
    def shard(self) -> str:
        """Get shard path segment for API calls."""
        return self.value

    @property
    def friendly(self) -> str:
        labels = {
            "steam": "PC (Steam)",
            "kakao": "PC (Kakao)",
            "console": "Console",
            "xbox": "Xbox",
            "psn": "PlayStation",
            "stadia": "Stadia",
            "tournament": "Tournaments",
        }
        return labels[self.value]
