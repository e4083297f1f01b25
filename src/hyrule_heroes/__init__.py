"""Hyrule Heroes - a turn-based adventure on pure rule engines.

The rules live in stateless engines that take frozen Pydantic snapshots
and return new ones. Only the command driver keeps mutable state.

Example:
    >>> from hyrule_heroes import EnemyKind, Position, enemy_ai, leveling
    >>>
    >>> hero = leveling.create_player()
    >>> bat = enemy_ai.spawn(EnemyKind.BAT, Position(x=5, y=5))
    >>> enemy_ai.calculate_move(bat, Position(x=5, y=10))
    Position(x=5, y=6)

Modules:
    core: Configuration, logging, constants and base exceptions.
    models: Frozen Pydantic V2 value models and enumerations.
    engine: Damage, leveling, enemy AI, inventory, battle and world rules.
    cli: Text command driver and the ``hyrule-heroes`` entry point.
"""

from __future__ import annotations

# Core
from hyrule_heroes.core.config import Settings, get_settings
from hyrule_heroes.core.exceptions import HyruleHeroesError
from hyrule_heroes.core.logging import configure_logging, get_logger

# Models
from hyrule_heroes.models import (
    AttackKind,
    BattleState,
    Behavior,
    CombatantStats,
    CombatResult,
    EnemyKind,
    EnemyState,
    GameAction,
    GamePhase,
    GameState,
    InventoryState,
    Item,
    PlayerStats,
    Position,
)

# Engines
from hyrule_heroes.engine import battle, damage, enemy_ai, inventory, leveling, world


__version__ = "0.1.0"

__all__ = [
    # Core
    "Settings",
    "get_settings",
    "HyruleHeroesError",
    "configure_logging",
    "get_logger",
    # Models
    "AttackKind",
    "BattleState",
    "Behavior",
    "CombatantStats",
    "CombatResult",
    "EnemyKind",
    "EnemyState",
    "GameAction",
    "GamePhase",
    "GameState",
    "InventoryState",
    "Item",
    "PlayerStats",
    "Position",
    # Engines
    "battle",
    "damage",
    "enemy_ai",
    "inventory",
    "leveling",
    "world",
    "__version__",
]
