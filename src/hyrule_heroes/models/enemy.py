"""Enemy state model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hyrule_heroes.models.enums import Behavior, EnemyKind
from hyrule_heroes.models.stats import CombatantStats, Position, StatValue


class EnemyState(BaseModel):
    """A single enemy on the field.

    Created by ``engine.enemy_ai.spawn`` with the kind's base stats. The
    collection that holds enemies owns their removal once defeated.

    Attributes:
        kind: Enemy species.
        health: Current health.
        max_health: Health at spawn.
        attack: Attack power.
        defense: Defense rating.
        exp_reward: Experience granted when defeated.
        position: Location on the grid.
        current_behavior: Active AI mode.
        is_alive: True while health is above zero.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    kind: EnemyKind
    health: StatValue
    max_health: StatValue
    attack: StatValue
    defense: StatValue
    exp_reward: StatValue
    position: Position = Field(default_factory=Position)
    current_behavior: Behavior
    is_alive: bool = True

    def to_combatant(self) -> CombatantStats:
        """Project the enemy onto the stats the damage engine reads."""
        return CombatantStats(
            attack=self.attack,
            defense=self.defense,
            health=self.health,
            max_health=self.max_health,
        )


__all__ = ["EnemyState"]
