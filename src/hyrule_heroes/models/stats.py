"""Immutable stat models shared by every engine.

Stats are frozen pydantic models. Engines never mutate them; every
transformation returns a new instance built with ``model_copy``.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from hyrule_heroes.core.constants import (
    STARTING_ATTACK,
    STARTING_DEFENSE,
    STARTING_HEALTH,
)


# Type alias for stat values that can never drop below zero
StatValue = Annotated[int, Field(ge=0, description="Non-negative stat value")]


class Position(BaseModel):
    """A coordinate on a grid. y grows southward.

    Example:
        >>> Position(x=5, y=5).manhattan_distance(Position(x=5, y=10))
        5
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    x: int = Field(default=0, description="Column")
    y: int = Field(default=0, description="Row")

    def offset(self, dx: int, dy: int) -> Position:
        """Return the position shifted by (dx, dy)."""
        return Position(x=self.x + dx, y=self.y + dy)

    def manhattan_distance(self, other: Position) -> int:
        """Sum of absolute coordinate differences."""
        return abs(self.x - other.x) + abs(self.y - other.y)


class CombatantStats(BaseModel):
    """Stats of anything that takes part in a damage calculation.

    Attributes:
        attack: Attack power.
        defense: Defense rating; half of it is subtracted from incoming damage.
        health: Current health.
        max_health: Maximum health.
        equipment_bonus: Attack granted by equipment.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    attack: StatValue = 0
    defense: StatValue = 0
    health: StatValue = 0
    max_health: StatValue = 0
    equipment_bonus: StatValue = 0


class PlayerStats(BaseModel):
    """The hero's stat sheet.

    A new sheet starts at level 1 with the starting stats. It lives for the
    whole session and is replaced on every damage, heal or experience gain.

    Attributes:
        health: Current health.
        max_health: Maximum health.
        attack: Attack power without equipment.
        defense: Defense rating.
        experience: Total experience collected.
        level: Current level (starts at 1).
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    health: StatValue = STARTING_HEALTH
    max_health: StatValue = STARTING_HEALTH
    attack: StatValue = STARTING_ATTACK
    defense: StatValue = STARTING_DEFENSE
    experience: StatValue = 0
    level: Annotated[int, Field(ge=1, description="Character level")] = 1

    def to_combatant(self, equipment_bonus: int = 0) -> CombatantStats:
        """Project the sheet onto the stats the damage engine reads.

        Args:
            equipment_bonus: Attack bonus from the equipped weapon.

        Returns:
            CombatantStats for this player.
        """
        return CombatantStats(
            attack=self.attack,
            defense=self.defense,
            health=self.health,
            max_health=self.max_health,
            equipment_bonus=equipment_bonus,
        )


__all__ = [
    "StatValue",
    "Position",
    "CombatantStats",
    "PlayerStats",
]
