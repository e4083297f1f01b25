"""Tests for the world orchestrator."""

from __future__ import annotations

import pytest

from hyrule_heroes.engine import world
from hyrule_heroes.models import GameAction, GamePhase, GameState, PlayerStats, Position, TileKind


class TestGameState:
    """Tests for state creation and validation."""

    def test_new_game(self) -> None:
        """Test the opening state."""
        state = world.new_game()

        assert state.position == Position(x=50, y=50)
        assert state.phase == GamePhase.EXPLORATION
        assert world.validate_state(state) is True

    @pytest.mark.parametrize(
        ("x", "y", "inside"),
        [(0, 0, True), (99, 99, True), (-1, 0, False), (100, 5, False), (5, 100, False)],
    )
    def test_bounds(self, x: int, y: int, inside: bool) -> None:
        """Test the 100x100 bounds."""
        assert world.is_in_bounds(x, y) is inside

    @pytest.mark.parametrize(("value", "clamped"), [(-5, 0), (0, 0), (42, 42), (150, 99)])
    def test_clamp(self, value: int, clamped: int) -> None:
        """Test coordinates are clamped into the grid."""
        assert world.clamp_coord(value) == clamped

    def test_validate_rejects_overhealed(self) -> None:
        """Test health above the maximum is invalid."""
        state = GameState(player=PlayerStats(health=150, max_health=100))

        assert world.validate_state(state) is False

    def test_validate_rejects_out_of_bounds(self) -> None:
        """Test a position off the grid is invalid."""
        assert world.validate_state(GameState(position=Position(x=-1, y=3))) is False


class TestProcessAction:
    """Tests for action dispatch."""

    @pytest.mark.parametrize(
        ("action", "phase", "message"),
        [
            (GameAction.MOVE_NORTH, GamePhase.EXPLORATION, "You move north."),
            (GameAction.MOVE_WEST, GamePhase.EXPLORATION, "You move west."),
            (GameAction.ATTACK, GamePhase.COMBAT, "You swing your sword!"),
            (GameAction.USE_ITEM, GamePhase.EXPLORATION, "You use an item."),
            (GameAction.OPEN_INVENTORY, GamePhase.INVENTORY, "Opening inventory..."),
            (GameAction.INTERACT, GamePhase.DIALOGUE, "You interact with the environment."),
            (GameAction.WAIT, GamePhase.EXPLORATION, "You wait..."),
        ],
    )
    def test_phase_transitions(
        self, action: GameAction, phase: GamePhase, message: str
    ) -> None:
        """Test every non-quit action keeps the game going."""
        result = world.process_action(world.new_game(), action)

        assert result.success is True
        assert result.new_phase == phase
        assert result.message == message
        assert result.game_continues is True

    def test_quit(self) -> None:
        """Test quitting ends the game."""
        result = world.process_action(world.new_game(), GameAction.QUIT)

        assert result.new_phase == GamePhase.GAME_OVER
        assert result.game_continues is False
        assert result.message == "Thanks for playing!"

    def test_move_does_not_commit_position(self) -> None:
        """Test the orchestrator leaves the position to its caller."""
        state = world.new_game()

        world.process_action(state, GameAction.MOVE_EAST)

        assert state.position == Position(x=50, y=50)

    def test_move_at_edge_succeeds(self) -> None:
        """Test moving against the edge still reports success."""
        state = GameState(position=Position(x=0, y=0))

        assert world.process_move(state, -1, 0, "west").success is True


class TestStatusAndHelp:
    """Tests for status text, help and encounters."""

    def test_status_line(self) -> None:
        """Test the one-line status format."""
        assert world.get_status(world.new_game()) == (
            "HP: 100/100 | Lvl: 1 | Area: Hyrule Field | Turn: 1"
        )

    def test_help(self) -> None:
        """Test the help text lists the commands."""
        text = world.get_help()

        assert text.startswith("=== LEGEND OF HYRULE: HELP ===")
        assert "n/s/e/w" in text
        assert "q - Quit" in text

    @pytest.mark.parametrize(
        ("x", "y", "encounter"),
        [(0, 0, True), (1, 0, True), (1, 1, False), (2, 0, False), (0, 1, False), (-1, 0, True)],
    )
    def test_check_encounter(self, x: int, y: int, encounter: bool) -> None:
        """Test encounters depend only on the position hash."""
        state = GameState(position=Position(x=x, y=y))

        assert world.check_encounter(state) is encounter
        assert world.check_encounter(state) is encounter


class TestTiles:
    """Tests for tile queries."""

    @pytest.mark.parametrize(
        ("x", "y", "tile"),
        [
            (0, 50, TileKind.WALL),
            (99, 50, TileKind.WALL),
            (50, 0, TileKind.WALL),
            (25, 50, TileKind.WATER),
            (70, 20, TileKind.FOREST),
            (25, 25, TileKind.DUNGEON_ENTRANCE),
            (75, 75, TileKind.DUNGEON_ENTRANCE),
            (50, 50, TileKind.GRASS),
        ],
    )
    def test_get_tile(self, x: int, y: int, tile: TileKind) -> None:
        """Test terrain lookups."""
        assert world.get_tile(x, y) == tile

    @pytest.mark.parametrize(
        ("x", "y", "walkable"),
        [(0, 5, False), (25, 50, False), (70, 20, True), (25, 25, True), (50, 50, True)],
    )
    def test_walkable(self, x: int, y: int, walkable: bool) -> None:
        """Test walls and water block movement."""
        assert world.is_walkable(x, y) is walkable

    @pytest.mark.parametrize(
        ("x", "y", "name"),
        [
            (0, 0, "Hyrule Field NW"),
            (30, 0, "Hyrule Castle"),
            (50, 50, "Sacred Grove"),
            (99, 99, "Ganon's Tower"),
            (-10, 0, "Hyrule Field NW"),
            (-30, 0, "Unknown"),
        ],
    )
    def test_area_name(self, x: int, y: int, name: str) -> None:
        """Test 25x25 areas, truncating toward zero, with Unknown for negative indices."""
        assert world.get_area_name(x, y) == name

    def test_area_index_capped(self) -> None:
        """Test indices past the table use the last area."""
        assert world.area_index(500, 500) == 15

    def test_events(self) -> None:
        """Test event tiles include dungeons and the field center."""
        assert world.has_event(50, 50) is True
        assert world.has_event(25, 25) is True
        assert world.has_event(10, 10) is False
