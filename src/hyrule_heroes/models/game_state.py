"""World-level game state and the orchestrator's action result."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hyrule_heroes.core.constants import START_AREA, START_POSITION
from hyrule_heroes.models.enums import GamePhase
from hyrule_heroes.models.stats import PlayerStats, Position, StatValue


def _start_position() -> Position:
    x, y = START_POSITION
    return Position(x=x, y=y)


class GameState(BaseModel):
    """Snapshot of the whole game as seen by the orchestrator.

    Bounds and health invariants are not enforced at construction;
    ``engine.world.validate_state`` reports whether they hold.

    Attributes:
        phase: Current top-level mode.
        position: Hero position on the world grid.
        player: Hero stat sheet.
        enemies_defeated: Enemies defeated this session.
        boss_defeated: Whether the boss has fallen.
        current_area: Name of the area the hero is in.
        turn_number: Current turn (starts at 1).
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    phase: GamePhase = GamePhase.EXPLORATION
    position: Position = Field(default_factory=_start_position)
    player: PlayerStats = Field(default_factory=PlayerStats)
    enemies_defeated: StatValue = 0
    boss_defeated: bool = False
    current_area: str = START_AREA
    turn_number: StatValue = 1


class ActionResult(BaseModel):
    """Outcome of dispatching a GameAction.

    Attributes:
        success: Whether the action was accepted.
        message: Text for the player.
        new_phase: Phase the game moves to.
        game_continues: False once the player quits.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    success: bool = True
    message: str = ""
    new_phase: GamePhase
    game_continues: bool = True


__all__ = [
    "GameState",
    "ActionResult",
]
