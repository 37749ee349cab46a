from .enums import PlayerOrder, Profession, Race
from .player import Player

__all__ = [
    "Player",
    "PlayerOrder",
    "Profession",
    "Race",
]
