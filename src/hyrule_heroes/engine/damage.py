"""Damage calculation and attack resolution.

Damage follows a fixed pipeline:

1. base damage from the attack kind
2. multiplier ``1 + (attack + equipment_bonus) // 10``
3. minus half the defender's defense, floored at 1
4. doubled when the attacker's attack stat ends in 7

There is no randomness: the same stats always produce the same damage.
"""

from __future__ import annotations

from hyrule_heroes.core.constants import (
    ATTACK_DIVISOR,
    CRITICAL_MULTIPLIER,
    CRITICAL_RESIDUE,
    MINIMUM_DAMAGE,
)
from hyrule_heroes.core.logging import get_logger
from hyrule_heroes.models import AttackKind, CombatantStats, CombatResult


logger = get_logger(__name__)


BASE_DAMAGE: dict[AttackKind, int] = {
    AttackKind.SWORD_SLASH: 10,
    AttackKind.SPIN_ATTACK: 20,
    AttackKind.BOW_SHOT: 8,
    AttackKind.MAGIC_ATTACK: 15,
    AttackKind.SHIELD_BASH: 5,
}


def base_damage(attack: AttackKind) -> int:
    """Look up the base damage of an attack kind."""
    return BASE_DAMAGE[attack]


def damage_multiplier(attack_stat: int, equipment_bonus: int) -> int:
    """Compute the damage multiplier from attack and equipment.

    Example:
        >>> damage_multiplier(20, 0)
        3
    """
    return 1 + (attack_stat + equipment_bonus) // ATTACK_DIVISOR


def calculate_base_damage(attack: AttackKind, attacker: CombatantStats) -> int:
    """Raw damage before defense: base damage times the attacker's multiplier."""
    return base_damage(attack) * damage_multiplier(attacker.attack, attacker.equipment_bonus)


def defense_reduction(defense: int) -> int:
    return defense // 2


def apply_defense(raw_damage: int, defender_defense: int) -> int:
    """Subtract half the defense from raw damage, never dropping below 1."""
    return max(raw_damage - defense_reduction(defender_defense), MINIMUM_DAMAGE)


def is_critical_hit(attack_stat: int) -> bool:
    """Critical hits land when the attack stat ends in 7."""
    return attack_stat % 10 == CRITICAL_RESIDUE


def apply_critical(damage: int, is_critical: bool) -> int:
    return damage * CRITICAL_MULTIPLIER if is_critical else damage


def final_damage(
    attack: AttackKind,
    attacker: CombatantStats,
    defender: CombatantStats,
) -> int:
    """Calculate final damage with all modifiers.

    Args:
        attack: Kind of attack used.
        attacker: Stats of the attacker.
        defender: Stats of the defender.

    Returns:
        Damage dealt, always at least 1.

    Example:
        >>> hero = CombatantStats(attack=20, health=100, max_health=100)
        >>> target = CombatantStats(defense=10, health=50, max_health=50)
        >>> final_damage(AttackKind.SWORD_SLASH, hero, target)
        25
    """
    raw = calculate_base_damage(attack, attacker)
    after_defense = apply_defense(raw, defender.defense)
    critical = is_critical_hit(attacker.attack)
    damage = apply_critical(after_defense, critical)

    logger.debug(
        "Damage resolved",
        attack=attack,
        raw=raw,
        after_defense=after_defense,
        critical=critical,
        damage=damage,
    )
    return damage


def is_defeated(target_health: int, damage: int) -> bool:
    """Whether the damage is enough to bring the target to zero."""
    return damage >= target_health


def can_use_special(attack: AttackKind, health: int, max_health: int) -> bool:
    """Check whether an attack is allowed at the current health.

    Spin attacks need at least half health and magic needs a quarter.
    Every other attack is always available.
    """
    match attack:
        case AttackKind.SPIN_ATTACK:
            return health >= max_health // 2
        case AttackKind.MAGIC_ATTACK:
            return health >= max_health // 4
        case _:
            return True


def flee_success(player_speed: int, enemy_speed: int) -> bool:
    """Fleeing works only when the hero is strictly faster."""
    return player_speed > enemy_speed


def combat_message(damage: int, is_critical: bool) -> str:
    if is_critical:
        return f"Critical hit! {damage} damage!"
    return f"Hit for {damage} damage!"


def _combat_result(damage: int, critical: bool, defeated: bool, exp: int) -> CombatResult:
    return CombatResult(
        damage_dealt=damage,
        is_critical=critical,
        target_defeated=defeated,
        exp_gained=exp if defeated else 0,
        message=combat_message(damage, critical),
    )


def player_attack(
    attack: AttackKind,
    player: CombatantStats,
    enemy: CombatantStats,
    enemy_exp: int,
) -> CombatResult:
    """Resolve the hero attacking an enemy.

    Args:
        attack: Kind of attack used.
        player: Hero stats, including the equipment bonus.
        enemy: Enemy stats.
        enemy_exp: Experience the enemy is worth.

    Returns:
        CombatResult; experience is granted only when the enemy is defeated.
    """
    damage = final_damage(attack, player, enemy)
    return _combat_result(
        damage,
        is_critical_hit(player.attack),
        is_defeated(enemy.health, damage),
        enemy_exp,
    )


def enemy_attack(enemy: CombatantStats, player: CombatantStats) -> CombatResult:
    """Resolve an enemy attacking the hero. Enemies always sword-slash."""
    damage = final_damage(AttackKind.SWORD_SLASH, enemy, player)
    return _combat_result(
        damage,
        is_critical_hit(enemy.attack),
        is_defeated(player.health, damage),
        0,
    )


__all__ = [
    "BASE_DAMAGE",
    "base_damage",
    "damage_multiplier",
    "calculate_base_damage",
    "defense_reduction",
    "apply_defense",
    "is_critical_hit",
    "apply_critical",
    "final_damage",
    "is_defeated",
    "can_use_special",
    "flee_success",
    "combat_message",
    "player_attack",
    "enemy_attack",
]
