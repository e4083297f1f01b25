"""Tests for the frozen value models and enumerations."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hyrule_heroes.models import (
    ActionResult,
    BattleState,
    CombatantStats,
    Direction,
    EnemyKind,
    GamePhase,
    GameState,
    InventoryState,
    PlayerStats,
    Position,
)


class TestPosition:
    """Tests for the Position model."""

    def test_defaults_to_origin(self) -> None:
        """Test a bare Position sits at (0, 0)."""
        assert Position() == Position(x=0, y=0)

    def test_offset_returns_new_position(self) -> None:
        """Test offset leaves the original untouched."""
        start = Position(x=3, y=4)
        moved = start.offset(-1, 2)

        assert moved == Position(x=2, y=6)
        assert start == Position(x=3, y=4)

    def test_negative_coordinates_allowed(self) -> None:
        """Test positions may go negative; bounds are checked elsewhere."""
        assert Position(x=0, y=0).offset(-1, -1) == Position(x=-1, y=-1)

    def test_manhattan_distance(self) -> None:
        """Test the distance is the sum of axis differences."""
        assert Position(x=1, y=1).manhattan_distance(Position(x=4, y=-3)) == 7

    def test_frozen(self) -> None:
        """Test positions cannot be mutated."""
        position = Position(x=1, y=1)
        with pytest.raises(ValidationError):
            position.x = 5  # type: ignore[misc]


class TestPlayerStats:
    """Tests for the hero stat sheet."""

    def test_starting_values(self, hero: PlayerStats) -> None:
        """Test the level 1 defaults."""
        assert hero.health == 100
        assert hero.max_health == 100
        assert hero.attack == 10
        assert hero.defense == 5
        assert hero.experience == 0
        assert hero.level == 1

    def test_level_must_be_positive(self) -> None:
        """Test level zero is rejected."""
        with pytest.raises(ValidationError):
            PlayerStats(level=0)

    def test_negative_health_rejected(self) -> None:
        """Test stats can never be negative."""
        with pytest.raises(ValidationError):
            PlayerStats(health=-1)

    def test_to_combatant(self, hero: PlayerStats) -> None:
        """Test projection onto combat stats carries the equipment bonus."""
        combatant = hero.to_combatant(equipment_bonus=10)

        assert combatant == CombatantStats(
            attack=10, defense=5, health=100, max_health=100, equipment_bonus=10
        )

    def test_strict_rejects_strings(self) -> None:
        """Test strict mode refuses numeric strings."""
        with pytest.raises(ValidationError):
            PlayerStats(attack="10")  # type: ignore[arg-type]


class TestInventoryState:
    """Tests for inventory counters."""

    def test_defaults(self) -> None:
        """Test an empty inventory."""
        inv = InventoryState()

        assert inv.item_count == 0
        assert inv.max_capacity == 20
        assert inv.gold == 0
        assert inv.equipped_weapon == 0
        assert inv.free_slots == 20

    def test_free_slots(self) -> None:
        """Test free slots follow the item count."""
        assert InventoryState(item_count=18, max_capacity=20).free_slots == 2


class TestGameState:
    """Tests for the orchestrator snapshot."""

    def test_defaults(self) -> None:
        """Test the opening state."""
        state = GameState()

        assert state.phase == GamePhase.EXPLORATION
        assert state.position == Position(x=50, y=50)
        assert state.current_area == "Hyrule Field"
        assert state.turn_number == 1
        assert state.enemies_defeated == 0
        assert state.boss_defeated is False

    def test_player_default_is_fresh(self) -> None:
        """Test each state gets its own default hero."""
        assert GameState().player == PlayerStats()


class TestBattleAndActionModels:
    """Tests for battle and action result models."""

    def test_battle_defaults(self) -> None:
        """Test a new battle is active on the hero's turn."""
        battle = BattleState(player_health=100, enemy_health=30)

        assert battle.is_active is True
        assert battle.turn_count == 0
        assert battle.is_player_turn is True

    def test_action_result_requires_phase(self) -> None:
        """Test new_phase has no default."""
        with pytest.raises(ValidationError):
            ActionResult()  # type: ignore[call-arg]


class TestEnums:
    """Tests for enumeration helpers."""

    @pytest.mark.parametrize(
        ("direction", "delta"),
        [
            (Direction.NORTH, (0, -1)),
            (Direction.SOUTH, (0, 1)),
            (Direction.EAST, (1, 0)),
            (Direction.WEST, (-1, 0)),
        ],
    )
    def test_direction_delta(self, direction: Direction, delta: tuple[int, int]) -> None:
        """Test north decreases y."""
        assert direction.delta == delta

    @pytest.mark.parametrize(
        ("kind", "name"),
        [
            (EnemyKind.SLIME, "Slime"),
            (EnemyKind.DARK_KNIGHT, "Dark Knight"),
            (EnemyKind.BOSS, "Boss"),
        ],
    )
    def test_enemy_display_name(self, kind: EnemyKind, name: str) -> None:
        """Test display names are title-cased."""
        assert kind.display_name == name
