"""Enumeration types for Hyrule Heroes.

Every closed set the engines switch on lives here: attack kinds, movement
directions, player actions, game phases, enemy kinds and behaviors, item
categories and tiles.
"""

from __future__ import annotations

from enum import StrEnum


class AttackKind(StrEnum):
    """Attacks available to a combatant."""

    SWORD_SLASH = "sword_slash"
    SPIN_ATTACK = "spin_attack"
    BOW_SHOT = "bow_shot"
    MAGIC_ATTACK = "magic_attack"
    SHIELD_BASH = "shield_bash"


class Direction(StrEnum):
    """Cardinal movement directions. North decreases y."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        """Get the unit step for this direction.

        Returns:
            (dx, dy) offset.
        """
        deltas: dict[Direction, tuple[int, int]] = {
            Direction.NORTH: (0, -1),
            Direction.SOUTH: (0, 1),
            Direction.EAST: (1, 0),
            Direction.WEST: (-1, 0),
        }
        return deltas[self]


class GameAction(StrEnum):
    """Actions the orchestrator accepts."""

    MOVE_NORTH = "move_north"
    MOVE_SOUTH = "move_south"
    MOVE_EAST = "move_east"
    MOVE_WEST = "move_west"
    ATTACK = "attack"
    USE_ITEM = "use_item"
    OPEN_INVENTORY = "open_inventory"
    INTERACT = "interact"
    WAIT = "wait"
    QUIT = "quit"


class GamePhase(StrEnum):
    """Top-level mode of the game."""

    EXPLORATION = "exploration"
    COMBAT = "combat"
    DIALOGUE = "dialogue"
    INVENTORY = "inventory"
    GAME_OVER = "game_over"


class EnemyKind(StrEnum):
    """Enemy species."""

    SLIME = "slime"
    SKELETON = "skeleton"
    BAT = "bat"
    GOBLIN = "goblin"
    DARK_KNIGHT = "dark_knight"
    BOSS = "boss"

    @property
    def display_name(self) -> str:
        """Get the name shown to the player.

        Returns:
            Title-cased name (e.g., 'Dark Knight').
        """
        return self.value.replace("_", " ").title()


class Behavior(StrEnum):
    """Enemy AI modes."""

    WANDER = "wander"
    CHASE = "chase"
    FLEE = "flee"
    GUARD = "guard"
    BOSS_PATTERN = "boss_pattern"


class ItemCategory(StrEnum):
    """Item categories."""

    WEAPON = "weapon"
    ARMOR = "armor"
    CONSUMABLE = "consumable"
    TREASURE = "treasure"


class WeaponKind(StrEnum):
    """Weapons in the catalog."""

    WOODEN_SWORD = "wooden_sword"
    STEEL_SWORD = "steel_sword"
    MASTER_SWORD = "master_sword"
    BOW = "bow"
    FIRE_ROD = "fire_rod"


class ArmorKind(StrEnum):
    """Armors in the catalog."""

    CLOTH_TUNIC = "cloth_tunic"
    LEATHER_ARMOR = "leather_armor"
    CHAIN_MAIL = "chain_mail"
    SHIELD = "shield"
    MAGIC_ROBE = "magic_robe"


class ConsumableKind(StrEnum):
    """Consumables in the catalog."""

    HEALTH_POTION = "health_potion"
    FULL_HEALTH_POTION = "full_health_potion"
    ATTACK_BOOST = "attack_boost"
    DEFENSE_BOOST = "defense_boost"
    ANTIDOTE = "antidote"


class TileKind(StrEnum):
    """Terrain of a world tile."""

    GRASS = "grass"
    WATER = "water"
    FOREST = "forest"
    WALL = "wall"
    DUNGEON_ENTRANCE = "dungeon_entrance"


__all__ = [
    "AttackKind",
    "Direction",
    "GameAction",
    "GamePhase",
    "EnemyKind",
    "Behavior",
    "ItemCategory",
    "WeaponKind",
    "ArmorKind",
    "ConsumableKind",
    "TileKind",
]
