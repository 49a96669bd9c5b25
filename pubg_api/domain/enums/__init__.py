"""Domain enumerations."""
from .platform import Platform
from .game_mode import GameMode
from .player_filter import PlayerFilter

__all__ = [
    'Platform',
    'GameMode',
    'PlayerFilter',
]
