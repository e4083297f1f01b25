"""World orchestrator: game state validation, action dispatch and tile queries.

The world is a 100x100 grid. ``process_action`` maps each GameAction to a
phase transition and a message. Movement computes the clamped destination
but does not commit it; the caller owns the position and decides whether
the move is walkable.
"""

from __future__ import annotations

from hyrule_heroes.core.constants import ENCOUNTER_RATE, WORLD_SIZE
from hyrule_heroes.core.logging import get_logger
from hyrule_heroes.engine.hashing import encounter_bucket, truncated_div
from hyrule_heroes.models import ActionResult, GameAction, GamePhase, GameState, TileKind


logger = get_logger(__name__)

AREA_NAMES: tuple[str, ...] = (
    "Hyrule Field NW",
    "Hyrule Castle",
    "Kakariko Village",
    "Death Mountain",
    "Lake Hylia West",
    "Lake Hylia",
    "Zora's Domain",
    "Goron City",
    "Lost Woods West",
    "Lost Woods",
    "Sacred Grove",
    "Temple of Time",
    "Gerudo Desert",
    "Gerudo Fortress",
    "Spirit Temple",
    "Ganon's Tower",
)

AREA_SIZE = 25
DUNGEON_ENTRANCES: frozenset[tuple[int, int]] = frozenset({(75, 75), (25, 25)})
EVENT_TILES: frozenset[tuple[int, int]] = DUNGEON_ENTRANCES | {(50, 50)}

HELP_TEXT = "\n".join(
    [
        "=== LEGEND OF HYRULE: HELP ===",
        "Movement: n/s/e/w - Move in direction",
        "Combat: a - Attack with equipped weapon",
        "Items: u - Use item, i - Open inventory",
        "Other: x - Interact, . - Wait, q - Quit",
    ]
)

_MOVES: dict[GameAction, tuple[int, int, str]] = {
    GameAction.MOVE_NORTH: (0, -1, "north"),
    GameAction.MOVE_SOUTH: (0, 1, "south"),
    GameAction.MOVE_EAST: (1, 0, "east"),
    GameAction.MOVE_WEST: (-1, 0, "west"),
}


# =============================================================================
# State
# =============================================================================


def new_game() -> GameState:
    """Create the opening game state."""
    return GameState()


def is_in_bounds(x: int, y: int) -> bool:
    return 0 <= x < WORLD_SIZE and 0 <= y < WORLD_SIZE


def clamp_coord(value: int) -> int:
    return min(max(value, 0), WORLD_SIZE - 1)


def validate_state(state: GameState) -> bool:
    """Check the health cap and that the hero is on the map."""
    health_valid = state.player.health <= state.player.max_health
    return health_valid and is_in_bounds(state.position.x, state.position.y)


# =============================================================================
# Action dispatch
# =============================================================================


def _success(message: str, phase: GamePhase) -> ActionResult:
    return ActionResult(success=True, message=message, new_phase=phase)


def process_move(state: GameState, dx: int, dy: int, direction: str) -> ActionResult:
    # TODO: commit the clamped target once GameState owns the authoritative position
    target = (clamp_coord(state.position.x + dx), clamp_coord(state.position.y + dy))
    logger.debug("Move requested", direction=direction, target=target)
    return _success(f"You move {direction}.", GamePhase.EXPLORATION)


def process_action(state: GameState, action: GameAction) -> ActionResult:
    """Dispatch a player action to its phase transition.

    Args:
        state: Current game state.
        action: Action chosen by the player.

    Returns:
        ActionResult with the message and next phase. Only Quit ends the game.
    """
    match action:
        case GameAction.MOVE_NORTH | GameAction.MOVE_SOUTH | GameAction.MOVE_EAST | GameAction.MOVE_WEST:
            dx, dy, direction = _MOVES[action]
            result = process_move(state, dx, dy, direction)
        case GameAction.ATTACK:
            result = _success("You swing your sword!", GamePhase.COMBAT)
        case GameAction.USE_ITEM:
            result = _success("You use an item.", GamePhase.EXPLORATION)
        case GameAction.OPEN_INVENTORY:
            result = _success("Opening inventory...", GamePhase.INVENTORY)
        case GameAction.INTERACT:
            result = _success("You interact with the environment.", GamePhase.DIALOGUE)
        case GameAction.WAIT:
            result = _success("You wait...", GamePhase.EXPLORATION)
        case GameAction.QUIT:
            result = ActionResult(
                success=True,
                message="Thanks for playing!",
                new_phase=GamePhase.GAME_OVER,
                game_continues=False,
            )

    logger.debug(
        "Action processed",
        action=action,
        phase=result.new_phase,
        turn=state.turn_number,
    )
    return result


def get_status(state: GameState) -> str:
    """One-line status summary."""
    return (
        f"HP: {state.player.health}/{state.player.max_health} | "
        f"Lvl: {state.player.level} | Area: {state.current_area} | "
        f"Turn: {state.turn_number}"
    )


def check_encounter(state: GameState) -> bool:
    """Whether the hero's tile triggers an encounter.

    Depends only on position, so revisiting a tile gives the same answer.
    """
    return encounter_bucket(state.position.x, state.position.y) < ENCOUNTER_RATE


def get_help() -> str:
    return HELP_TEXT


# =============================================================================
# Tiles
# =============================================================================


def is_wall(x: int, y: int) -> bool:
    return x == 0 or x == WORLD_SIZE - 1 or y == 0 or y == WORLD_SIZE - 1


def is_water(x: int, y: int) -> bool:
    return 20 <= x < 30 and 40 <= y < 60


def is_forest(x: int, y: int) -> bool:
    return 60 <= x < 80 and 10 <= y < 30


def is_dungeon(x: int, y: int) -> bool:
    return (x, y) in DUNGEON_ENTRANCES


def get_tile(x: int, y: int) -> TileKind:
    """Terrain at a coordinate. Walls win over water, forest and dungeons."""
    if is_wall(x, y):
        return TileKind.WALL
    if is_water(x, y):
        return TileKind.WATER
    if is_forest(x, y):
        return TileKind.FOREST
    if is_dungeon(x, y):
        return TileKind.DUNGEON_ENTRANCE
    return TileKind.GRASS


def is_walkable(x: int, y: int) -> bool:
    return get_tile(x, y) not in (TileKind.WALL, TileKind.WATER)


def area_index(x: int, y: int) -> int:
    # Truncating, so the strip just past the origin still maps to area 0
    row = truncated_div(y, AREA_SIZE)
    column = truncated_div(x, AREA_SIZE)
    return min(row * 4 + column, len(AREA_NAMES) - 1)


def get_area_name(x: int, y: int) -> str:
    index = area_index(x, y)
    if index < 0:
        return "Unknown"
    return AREA_NAMES[index]


def has_event(x: int, y: int) -> bool:
    return (x, y) in EVENT_TILES


__all__ = [
    "AREA_NAMES",
    "DUNGEON_ENTRANCES",
    "HELP_TEXT",
    "new_game",
    "is_in_bounds",
    "clamp_coord",
    "validate_state",
    "process_move",
    "process_action",
    "get_status",
    "check_encounter",
    "get_help",
    "is_wall",
    "is_water",
    "is_forest",
    "is_dungeon",
    "get_tile",
    "is_walkable",
    "area_index",
    "get_area_name",
    "has_event",
]
