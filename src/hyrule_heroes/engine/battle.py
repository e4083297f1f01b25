"""Battle state machine.

A battle starts active on the hero's turn at turn 0. ``next_turn`` hands
the turn over, ``update_health`` records both combatants' health, and the
battle is over once it is ended explicitly or either side reaches zero.

``next_turn`` and ``update_health`` do not guard against a finished
battle; callers check ``is_battle_over`` first.
"""

from __future__ import annotations

from hyrule_heroes.core.logging import get_logger
from hyrule_heroes.models import BattleState


logger = get_logger(__name__)


def start_battle(player_health: int, enemy_health: int) -> BattleState:
    logger.info("Battle started", player_health=player_health, enemy_health=enemy_health)
    return BattleState(player_health=player_health, enemy_health=enemy_health)


def next_turn(state: BattleState) -> BattleState:
    """Advance the turn counter and hand the turn to the other side."""
    return state.model_copy(
        update={
            "turn_count": state.turn_count + 1,
            "is_player_turn": not state.is_player_turn,
        }
    )


def update_health(state: BattleState, player_health: int, enemy_health: int) -> BattleState:
    """Overwrite both health values."""
    return state.model_copy(
        update={"player_health": player_health, "enemy_health": enemy_health}
    )


def end_battle(state: BattleState) -> BattleState:
    logger.info(
        "Battle ended",
        turns=state.turn_count,
        player_won=player_won(state),
    )
    return state.model_copy(update={"is_active": False})


def is_battle_over(state: BattleState) -> bool:
    return not state.is_active or state.player_health == 0 or state.enemy_health == 0


def player_won(state: BattleState) -> bool:
    return state.enemy_health == 0 and state.player_health > 0


__all__ = [
    "start_battle",
    "next_turn",
    "update_health",
    "end_battle",
    "is_battle_over",
    "player_won",
]
