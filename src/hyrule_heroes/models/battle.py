"""Battle models: the per-fight state and the result of a single attack."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from hyrule_heroes.models.stats import StatValue


class BattleState(BaseModel):
    """State of one fight between the hero and an enemy.

    Once ``is_active`` is False the battle is terminal and only its outcome
    may be queried.

    Attributes:
        is_active: Whether the battle is still running.
        turn_count: Turns taken since the battle started.
        player_health: Hero health as last recorded.
        enemy_health: Enemy health as last recorded.
        is_player_turn: Whether the hero acts next.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    is_active: bool = True
    turn_count: StatValue = 0
    player_health: StatValue
    enemy_health: StatValue
    is_player_turn: bool = True


class CombatResult(BaseModel):
    """Outcome of one attack.

    Attributes:
        damage_dealt: Final damage after defense and criticals.
        is_critical: Whether the attack was a critical hit.
        target_defeated: Whether the damage was lethal.
        exp_gained: Experience earned (zero unless the target was defeated).
        message: Text for the player.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    damage_dealt: StatValue
    is_critical: bool = False
    target_defeated: bool = False
    exp_gained: StatValue = 0
    message: str = ""


__all__ = [
    "BattleState",
    "CombatResult",
]
