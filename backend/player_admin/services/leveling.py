"""Level progression derived from a player's experience.

A player reaches level ``n`` once they have ``50 * n * (n + 1)`` experience,
so the level for a given experience is the largest ``n`` satisfying that
bound::

    level = floor((sqrt(2500 + 200 * experience) - 50) / 100)

The square root is taken with :func:`math.isqrt`, which gives the same result
as flooring the real-valued root but without floating point error near level
boundaries.
"""

from math import isqrt

from player_admin.models.player import Player


def level_for_experience(experience: int) -> int:
    if experience < 0:
        raise ValueError(f"experience must be non-negative, got {experience}")
    return (isqrt(2500 + 200 * experience) - 50) // 100


def until_next_level(level: int, experience: int) -> int:
    return 50 * (level + 1) * (level + 2) - experience


def apply_derived_fields(player: Player) -> Player:
    """Fill in defaults and recompute level fields before the row is written."""
    if player.experience is None:
        raise ValueError("experience must be set before deriving the level")

    if player.banned is None:
        player.banned = False

    player.level = level_for_experience(player.experience)
    player.until_next_level = until_next_level(player.level, player.experience)
    return player
