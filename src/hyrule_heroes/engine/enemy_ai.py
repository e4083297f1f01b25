"""Enemy spawning, movement AI and damage intake.

Each enemy kind has fixed base stats and a default behavior. Movement is
chosen by matching on the current behavior:

- Chase: one step toward the hero on each axis
- Flee: one step away from the hero on each axis
- Wander: one step in a direction picked from a position hash
- Guard and BossPattern: stay put

Enemies below 20% health switch to Flee, except the boss.
"""

from __future__ import annotations

from dataclasses import dataclass

from hyrule_heroes.core.constants import ATTACK_RANGE, FLEE_THRESHOLD, MINIMUM_DAMAGE
from hyrule_heroes.core.logging import get_logger
from hyrule_heroes.engine.hashing import wander_bucket
from hyrule_heroes.models import Behavior, EnemyKind, EnemyState, Position


logger = get_logger(__name__)


@dataclass(frozen=True)
class EnemyTemplate:
    """Base stats of an enemy kind.

    Attributes:
        health: Health at spawn.
        attack: Attack power.
        defense: Defense rating.
        exp_reward: Experience granted on defeat.
        behavior: Default AI mode.
    """

    health: int
    attack: int
    defense: int
    exp_reward: int
    behavior: Behavior


ENEMY_TEMPLATES: dict[EnemyKind, EnemyTemplate] = {
    EnemyKind.SLIME: EnemyTemplate(30, 5, 2, 10, Behavior.WANDER),
    EnemyKind.SKELETON: EnemyTemplate(50, 12, 5, 25, Behavior.GUARD),
    EnemyKind.BAT: EnemyTemplate(20, 8, 1, 15, Behavior.CHASE),
    EnemyKind.GOBLIN: EnemyTemplate(40, 10, 4, 20, Behavior.CHASE),
    EnemyKind.DARK_KNIGHT: EnemyTemplate(80, 20, 15, 50, Behavior.GUARD),
    EnemyKind.BOSS: EnemyTemplate(200, 30, 20, 100, Behavior.BOSS_PATTERN),
}

_WANDER_STEPS: dict[int, tuple[int, int]] = {
    0: (1, 0),
    1: (-1, 0),
    2: (0, 1),
}


# =============================================================================
# Spawning
# =============================================================================


def default_behavior(kind: EnemyKind) -> Behavior:
    return ENEMY_TEMPLATES[kind].behavior


def spawn(kind: EnemyKind, position: Position) -> EnemyState:
    """Create an enemy of the given kind with its base stats.

    Args:
        kind: Enemy species.
        position: Spawn location.

    Returns:
        A living EnemyState at full health.
    """
    template = ENEMY_TEMPLATES[kind]
    enemy = EnemyState(
        kind=kind,
        health=template.health,
        max_health=template.health,
        attack=template.attack,
        defense=template.defense,
        exp_reward=template.exp_reward,
        position=position,
        current_behavior=template.behavior,
    )
    logger.debug("Enemy spawned", kind=kind, x=position.x, y=position.y)
    return enemy


def spawn_boss(position: Position) -> EnemyState:
    return spawn(EnemyKind.BOSS, position)


def base_stats(kind: EnemyKind) -> EnemyState:
    """The kind's spawn state at the origin, for stat lookups."""
    return spawn(kind, Position())


# =============================================================================
# Movement AI
# =============================================================================


def _step_toward(source: int, target: int) -> int:
    if target > source:
        return 1
    if target < source:
        return -1
    return 0


def _chase_step(enemy: EnemyState, player_pos: Position) -> tuple[int, int]:
    return (
        _step_toward(enemy.position.x, player_pos.x),
        _step_toward(enemy.position.y, player_pos.y),
    )


def _wander_step(enemy: EnemyState) -> tuple[int, int]:
    # Any bucket outside 0..2 (including negative ones) walks north
    return _WANDER_STEPS.get(wander_bucket(enemy.position.x, enemy.position.y), (0, -1))


def calculate_move(enemy: EnemyState, player_pos: Position) -> Position:
    """Compute where the enemy wants to move this turn.

    Walkability and occupancy are not checked here; the caller decides
    whether to commit the move.

    Example:
        >>> bat = spawn(EnemyKind.BAT, Position(x=5, y=5))
        >>> calculate_move(bat, Position(x=5, y=10))
        Position(x=5, y=6)
    """
    match enemy.current_behavior:
        case Behavior.CHASE:
            dx, dy = _chase_step(enemy, player_pos)
        case Behavior.FLEE:
            dx, dy = _chase_step(enemy, player_pos)
            dx, dy = -dx, -dy
        case Behavior.WANDER:
            dx, dy = _wander_step(enemy)
        case Behavior.GUARD | Behavior.BOSS_PATTERN:
            dx, dy = 0, 0
    return enemy.position.offset(dx, dy)


def should_attack(enemy: EnemyState, player_pos: Position) -> bool:
    """Enemies attack when the hero is within reach."""
    return enemy.position.manhattan_distance(player_pos) <= ATTACK_RANGE


def is_low_health(enemy: EnemyState) -> bool:
    if enemy.max_health == 0:
        return True
    return enemy.health * 100 // enemy.max_health < FLEE_THRESHOLD


def update_behavior(enemy: EnemyState) -> Behavior:
    """Re-evaluate the enemy's behavior from its health.

    Returns:
        Flee for a badly hurt non-boss enemy, otherwise the kind's default.
    """
    if is_low_health(enemy) and enemy.kind != EnemyKind.BOSS:
        return Behavior.FLEE
    return default_behavior(enemy.kind)


def with_behavior(enemy: EnemyState, behavior: Behavior) -> EnemyState:
    """Return the enemy switched to ``behavior``."""
    if behavior != enemy.current_behavior:
        logger.debug(
            "Behavior changed",
            kind=enemy.kind,
            old=enemy.current_behavior,
            new=behavior,
        )
    return enemy.model_copy(update={"current_behavior": behavior})


def move_to(enemy: EnemyState, position: Position) -> EnemyState:
    return enemy.model_copy(update={"position": position})


# =============================================================================
# Damage
# =============================================================================


def effective_damage(raw_damage: int, defense: int) -> int:
    return max(raw_damage - defense // 2, MINIMUM_DAMAGE)


def apply_damage(enemy: EnemyState, damage: int) -> EnemyState:
    """Subtract already-resolved damage; health stops at zero."""
    new_health = max(enemy.health - damage, 0)
    return enemy.model_copy(update={"health": new_health, "is_alive": new_health > 0})


def take_damage(enemy: EnemyState, raw_damage: int) -> EnemyState:
    """Apply raw damage after the enemy's own defense reduction."""
    return apply_damage(enemy, effective_damage(raw_damage, enemy.defense))


def is_defeated(enemy: EnemyState) -> bool:
    return not enemy.is_alive or enemy.health == 0


def attack_damage(enemy: EnemyState) -> int:
    return enemy.attack


def exp_reward(enemy: EnemyState) -> int:
    return enemy.exp_reward


__all__ = [
    "EnemyTemplate",
    "ENEMY_TEMPLATES",
    "default_behavior",
    "spawn",
    "spawn_boss",
    "base_stats",
    "calculate_move",
    "should_attack",
    "is_low_health",
    "update_behavior",
    "with_behavior",
    "move_to",
    "effective_damage",
    "apply_damage",
    "take_damage",
    "is_defeated",
    "attack_damage",
    "exp_reward",
]
