"""Tests for the battle state machine."""

from __future__ import annotations

from hyrule_heroes.engine import battle


class TestBattleLifecycle:
    """Tests for starting, advancing and ending battles."""

    def test_start_battle(self) -> None:
        """Test a new battle is active on the hero's turn."""
        state = battle.start_battle(100, 30)

        assert state.is_active is True
        assert state.turn_count == 0
        assert state.is_player_turn is True
        assert state.player_health == 100
        assert state.enemy_health == 30
        assert battle.is_battle_over(state) is False

    def test_next_turn_alternates(self) -> None:
        """Test turns alternate and count up."""
        state = battle.next_turn(battle.start_battle(100, 30))

        assert state.turn_count == 1
        assert state.is_player_turn is False

        state = battle.next_turn(state)

        assert state.turn_count == 2
        assert state.is_player_turn is True

    def test_update_health_overwrites(self) -> None:
        """Test both health values are replaced."""
        state = battle.update_health(battle.start_battle(100, 30), 80, 10)

        assert state.player_health == 80
        assert state.enemy_health == 10

    def test_end_battle(self) -> None:
        """Test ending a battle makes it terminal."""
        state = battle.end_battle(battle.start_battle(100, 30))

        assert state.is_active is False
        assert battle.is_battle_over(state) is True

    def test_original_state_untouched(self) -> None:
        """Test transitions return new snapshots."""
        start = battle.start_battle(100, 30)
        battle.next_turn(start)

        assert start.turn_count == 0


class TestBattleOutcome:
    """Tests for battle outcome queries."""

    def test_enemy_at_zero_ends_battle(self) -> None:
        """Test the battle is over once the enemy falls."""
        state = battle.update_health(battle.start_battle(100, 30), 100, 0)

        assert battle.is_battle_over(state) is True
        assert battle.player_won(state) is True

    def test_hero_at_zero_loses(self) -> None:
        """Test the hero falling ends the battle as a loss."""
        state = battle.update_health(battle.start_battle(100, 30), 0, 30)

        assert battle.is_battle_over(state) is True
        assert battle.player_won(state) is False

    def test_both_at_zero_is_not_a_win(self) -> None:
        """Test a double knockout does not count as a win."""
        state = battle.update_health(battle.start_battle(100, 30), 0, 0)

        assert battle.player_won(state) is False

    def test_ended_early_is_not_a_win(self) -> None:
        """Test ending with the enemy alive is not a win."""
        state = battle.end_battle(battle.start_battle(100, 30))

        assert battle.player_won(state) is False
