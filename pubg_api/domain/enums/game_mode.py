"""Game mode enumeration for leaderboard queries."""
from enum import Enum


class GameMode(Enum):
    """Game modes accepted by the leaderboards endpoint.

    Provides:
    - api_name: string used in the leaderboards path
    """

    SOLO = "solo"
    DUO = "duo"
    SQUAD = "squad"
    SOLO_FPP = "solo-fpp"
    DUO_FPP = "duo-fpp"
    SQUAD_FPP = "squad-fpp"

    @property
    def api_name(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, mode_str: str) -> 'GameMode':
        value = mode_str.strip().lower()
        for mode in cls:
            if mode.value == value:
                return mode
        raise ValueError(f"Invalid game mode: {mode_str}")
