"""The playable overworld: a hand-made 20x15 map with its enemies and pickups.

This map is separate from the engine's 100x100 world grid. Only grass is
walkable here; trees, water, mountains and walls block movement.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from hyrule_heroes.engine.hashing import truncated_div
from hyrule_heroes.models import EnemyKind, Position


MAP_WIDTH = 20
MAP_HEIGHT = 15

PLAYER_START = Position(x=10, y=10)


class Terrain(StrEnum):
    """Overworld terrain."""

    GRASS = "."
    TREE = "T"
    WATER = "~"
    MOUNTAIN = "^"
    WALL = "#"


class PickupKind(StrEnum):
    """Things lying on the ground, keyed by their map symbol."""

    POTION = "*"
    GOLD = "$"
    CHEST = "C"
    SWORD = "+"


@dataclass(frozen=True)
class Pickup:
    """A collectible item placed on the map."""

    kind: PickupKind
    position: Position


TREES = [
    (3, 2), (4, 2), (5, 7), (6, 7), (7, 7), (15, 3), (16, 3), (17, 3),
    (2, 10), (3, 10), (12, 12), (13, 12), (14, 12), (8, 4), (9, 4),
]
WATER = [
    (10, 6), (11, 6), (12, 6), (10, 7), (11, 7), (12, 7), (10, 8), (11, 8), (12, 8),
]
MOUNTAINS = [
    (0, 0), (1, 0), (2, 0), (18, 0), (19, 0), (0, 14), (1, 14), (18, 14), (19, 14),
]
WALLS = [
    (5, 10), (6, 10), (7, 10), (5, 11), (7, 11), (5, 12), (6, 12), (7, 12),
]

ENEMY_SPAWNS: list[tuple[EnemyKind, int, int]] = [
    (EnemyKind.SLIME, 5, 3),
    (EnemyKind.SLIME, 14, 5),
    (EnemyKind.BAT, 8, 9),
    (EnemyKind.SKELETON, 16, 10),
    (EnemyKind.GOBLIN, 3, 12),
    (EnemyKind.DARK_KNIGHT, 17, 13),
    (EnemyKind.BOSS, 10, 2),
]

PICKUP_SPAWNS: list[tuple[PickupKind, int, int]] = [
    (PickupKind.POTION, 2, 5),
    (PickupKind.POTION, 15, 8),
    (PickupKind.GOLD, 8, 3),
    (PickupKind.GOLD, 12, 11),
    (PickupKind.CHEST, 6, 11),
    (PickupKind.SWORD, 18, 7),
]

AREA_NAMES: tuple[str, ...] = (
    "Hyrule Field NW",
    "Hyrule Castle",
    "Kakariko Village",
    "Lost Woods",
    "Lake Hylia",
    "Death Mountain",
    "Zora's Domain",
    "Gerudo Valley",
    "Temple of Time",
)

Grid = list[list[Terrain]]


def generate_terrain() -> Grid:
    """Build the terrain grid, indexed ``grid[y][x]``."""
    grid: Grid = [[Terrain.GRASS] * MAP_WIDTH for _ in range(MAP_HEIGHT)]
    for tiles, terrain in (
        (TREES, Terrain.TREE),
        (WATER, Terrain.WATER),
        (MOUNTAINS, Terrain.MOUNTAIN),
        (WALLS, Terrain.WALL),
    ):
        for x, y in tiles:
            grid[y][x] = terrain
    return grid


def spawn_pickups() -> list[Pickup]:
    return [Pickup(kind, Position(x=x, y=y)) for kind, x, y in PICKUP_SPAWNS]


def in_map(position: Position) -> bool:
    return 0 <= position.x < MAP_WIDTH and 0 <= position.y < MAP_HEIGHT


def is_walkable(grid: Grid, position: Position) -> bool:
    """Only on-map grass can be walked on."""
    if not in_map(position):
        return False
    return grid[position.y][position.x] is Terrain.GRASS


def area_name(position: Position) -> str:
    """Name of the area containing a position (7x5 tile blocks)."""
    index = truncated_div(position.y, 5) * 3 + truncated_div(position.x, 7)
    if 0 <= index < len(AREA_NAMES):
        return AREA_NAMES[index]
    return "Unknown Lands"


__all__ = [
    "MAP_WIDTH",
    "MAP_HEIGHT",
    "PLAYER_START",
    "Terrain",
    "PickupKind",
    "Pickup",
    "ENEMY_SPAWNS",
    "PICKUP_SPAWNS",
    "Grid",
    "generate_terrain",
    "spawn_pickups",
    "in_map",
    "is_walkable",
    "area_name",
]
