"""Rule engines for Hyrule Heroes.

Every engine is a module of pure functions over the frozen models in
``hyrule_heroes.models``. Engines hold no state of their own; callers keep
the current snapshot and replace it with whatever an engine returns.

Submodules:
    damage: Damage pipeline and attack resolution
    leveling: Experience, level-ups, player health and movement
    enemy_ai: Enemy spawning, movement AI and damage intake
    inventory: Item catalog, inventory counters and item use
    battle: Battle state machine
    world: Game state validation, action dispatch and tile queries

Example:
    >>> from hyrule_heroes.engine import damage, enemy_ai, leveling
    >>> from hyrule_heroes.models import AttackKind, EnemyKind, Position
    >>> slime = enemy_ai.spawn(EnemyKind.SLIME, Position(x=3, y=4))
    >>> hero = leveling.create_player().to_combatant()
    >>> damage.player_attack(AttackKind.SWORD_SLASH, hero, slime.to_combatant(), slime.exp_reward)
"""

from __future__ import annotations

from hyrule_heroes.engine import battle, damage, enemy_ai, inventory, leveling, world


__all__ = [
    "battle",
    "damage",
    "enemy_ai",
    "inventory",
    "leveling",
    "world",
]
