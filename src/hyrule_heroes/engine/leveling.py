"""Player progression: experience, level-ups, damage, healing and movement.

Level-up rule used everywhere in the game: experience only accumulates and
is never spent. After every gain, the hero levels up for as long as total
experience meets the requirement of the current level. Each level-up
raises max health by 20, fully heals, and adds 3 attack and 2 defense.
"""

from __future__ import annotations

from hyrule_heroes.core.constants import (
    ATTACK_PER_LEVEL,
    BASE_EXP_REQUIREMENT,
    DEFENSE_PER_LEVEL,
    EXP_MULTIPLIER,
    HEALTH_PER_LEVEL,
    MINIMUM_DAMAGE,
)
from hyrule_heroes.core.logging import get_logger
from hyrule_heroes.models import Direction, PlayerStats, Position


logger = get_logger(__name__)


# =============================================================================
# Experience
# =============================================================================


def exp_requirement(level: int) -> int:
    """Total experience needed to advance past ``level``.

    Example:
        >>> [exp_requirement(n) for n in (1, 2, 3, 4)]
        [100, 150, 225, 337]
    """
    return int(BASE_EXP_REQUIREMENT * EXP_MULTIPLIER ** (level - 1))


def should_level_up(experience: int, level: int) -> bool:
    return experience >= exp_requirement(level)


def level_up(stats: PlayerStats) -> PlayerStats:
    """Apply a single level-up step. Experience is left untouched."""
    new_max = stats.max_health + HEALTH_PER_LEVEL
    return stats.model_copy(
        update={
            "max_health": new_max,
            "health": new_max,
            "attack": stats.attack + ATTACK_PER_LEVEL,
            "defense": stats.defense + DEFENSE_PER_LEVEL,
            "level": stats.level + 1,
        }
    )


def gain_experience(stats: PlayerStats, exp: int) -> PlayerStats:
    """Add experience and apply every level-up it unlocks.

    Args:
        stats: Current stat sheet.
        exp: Experience gained.

    Returns:
        Updated stat sheet.
    """
    updated = stats.model_copy(update={"experience": stats.experience + exp})
    while should_level_up(updated.experience, updated.level):
        updated = level_up(updated)
        logger.info(
            "Level up",
            level=updated.level,
            max_health=updated.max_health,
            attack=updated.attack,
            defense=updated.defense,
        )
    return updated


def exp_to_next_level(stats: PlayerStats) -> int:
    """Experience still missing before the next level-up."""
    return max(exp_requirement(stats.level) - stats.experience, 0)


# =============================================================================
# Health
# =============================================================================


def create_player() -> PlayerStats:
    """Create a fresh level 1 hero."""
    return PlayerStats()


def effective_damage(raw_damage: int, defense: int) -> int:
    """Incoming damage after half the defense is absorbed, floored at 1."""
    return max(raw_damage - defense // 2, MINIMUM_DAMAGE)


def apply_damage(stats: PlayerStats, damage: int) -> PlayerStats:
    """Subtract already-resolved damage; health stops at zero."""
    return stats.model_copy(update={"health": max(stats.health - damage, 0)})


def take_damage(stats: PlayerStats, raw_damage: int) -> PlayerStats:
    """Apply raw damage after the hero's own defense reduction."""
    return apply_damage(stats, effective_damage(raw_damage, stats.defense))


def calculate_healed_health(current: int, amount: int, max_health: int) -> int:
    """Health after healing, capped at the maximum.

    Example:
        >>> calculate_healed_health(90, 50, 100)
        100
    """
    return min(current + amount, max_health)


def heal(stats: PlayerStats, amount: int) -> PlayerStats:
    return stats.model_copy(
        update={"health": calculate_healed_health(stats.health, amount, stats.max_health)}
    )


def is_defeated(stats: PlayerStats) -> bool:
    return stats.health == 0


# =============================================================================
# Movement
# =============================================================================


def move_player(position: Position, direction: Direction) -> Position:
    """Step one tile in a direction. Bounds are the caller's concern."""
    dx, dy = direction.delta
    return position.offset(dx, dy)


def calculate_distance(start: Position, end: Position) -> int:
    """Manhattan distance between two positions."""
    return start.manhattan_distance(end)


__all__ = [
    "exp_requirement",
    "should_level_up",
    "level_up",
    "gain_experience",
    "exp_to_next_level",
    "create_player",
    "effective_damage",
    "apply_damage",
    "take_damage",
    "calculate_healed_health",
    "heal",
    "is_defeated",
    "move_player",
    "calculate_distance",
]
