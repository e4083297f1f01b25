"""Pydantic V2 value models for Hyrule Heroes.

All models are frozen; engines return new instances instead of mutating.

Submodules:
    enums: Closed sets (AttackKind, EnemyKind, Behavior, GamePhase, ...)
    stats: Position, CombatantStats, PlayerStats
    enemy: EnemyState
    items: Item, InventoryState, UseResult
    battle: BattleState, CombatResult
    game_state: GameState, ActionResult

Example:
    >>> from hyrule_heroes.models import CombatantStats, Position
    >>> hero = CombatantStats(attack=20, health=100, max_health=100)
    >>> Position(x=1, y=2).offset(1, 0)
    Position(x=2, y=2)
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from hyrule_heroes.models.enums import (
    ArmorKind,
    AttackKind,
    Behavior,
    ConsumableKind,
    Direction,
    EnemyKind,
    GameAction,
    GamePhase,
    ItemCategory,
    TileKind,
    WeaponKind,
)

# =============================================================================
# Value models
# =============================================================================
from hyrule_heroes.models.stats import (
    CombatantStats,
    PlayerStats,
    Position,
    StatValue,
)
from hyrule_heroes.models.enemy import EnemyState
from hyrule_heroes.models.items import InventoryState, Item, UseResult
from hyrule_heroes.models.battle import BattleState, CombatResult
from hyrule_heroes.models.game_state import ActionResult, GameState


__all__ = [
    # Enumerations
    "ArmorKind",
    "AttackKind",
    "Behavior",
    "ConsumableKind",
    "Direction",
    "EnemyKind",
    "GameAction",
    "GamePhase",
    "ItemCategory",
    "TileKind",
    "WeaponKind",
    # Stats
    "StatValue",
    "Position",
    "CombatantStats",
    "PlayerStats",
    # Entities and results
    "EnemyState",
    "Item",
    "InventoryState",
    "UseResult",
    "BattleState",
    "CombatResult",
    "GameState",
    "ActionResult",
]
