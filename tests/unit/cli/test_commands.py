"""Tests for player input parsing."""

from __future__ import annotations

import pytest

from hyrule_heroes.cli.commands import Command, parse_input
from hyrule_heroes.models import GameAction


class TestParseInput:
    """Tests for the command vocabulary."""

    @pytest.mark.parametrize(
        ("text", "command"),
        [
            ("n", Command.MOVE_NORTH),
            ("north", Command.MOVE_NORTH),
            ("s", Command.MOVE_SOUTH),
            ("south", Command.MOVE_SOUTH),
            ("e", Command.MOVE_EAST),
            ("east", Command.MOVE_EAST),
            ("w", Command.MOVE_WEST),
            ("west", Command.MOVE_WEST),
            ("a", Command.ATTACK),
            ("attack", Command.ATTACK),
            ("x", Command.INTERACT),
            ("interact", Command.INTERACT),
            ("u", Command.USE_ITEM),
            ("use", Command.USE_ITEM),
            (".", Command.WAIT),
            ("wait", Command.WAIT),
            ("i", Command.INVENTORY),
            ("inv", Command.INVENTORY),
            ("inventory", Command.INVENTORY),
            ("stat", Command.STATUS),
            ("status", Command.STATUS),
            ("h", Command.HELP),
            ("help", Command.HELP),
            ("?", Command.HELP),
            ("q", Command.QUIT),
            ("quit", Command.QUIT),
            ("exit", Command.QUIT),
        ],
    )
    def test_vocabulary(self, text: str, command: Command) -> None:
        """Test every recognised word."""
        assert parse_input(text) == command

    @pytest.mark.parametrize("text", ["N", "NORTH", "  north\n", "Attack", "\tQ "])
    def test_case_and_whitespace_ignored(self, text: str) -> None:
        """Test input is trimmed and lowercased."""
        assert parse_input(text) != Command.UNKNOWN

    @pytest.mark.parametrize("text", ["", "xyz", "foo bar", "go north", "stats"])
    def test_unknown(self, text: str) -> None:
        """Test unrecognised input."""
        assert parse_input(text) == Command.UNKNOWN


class TestCommandProperties:
    """Tests for command metadata."""

    @pytest.mark.parametrize(
        "command",
        [Command.HELP, Command.STATUS, Command.INVENTORY, Command.QUIT, Command.UNKNOWN],
    )
    def test_free_commands(self, command: Command) -> None:
        """Test display commands and quit do not take a turn."""
        assert command.takes_turn is False

    @pytest.mark.parametrize(
        "command",
        [Command.MOVE_NORTH, Command.ATTACK, Command.USE_ITEM, Command.WAIT, Command.INTERACT],
    )
    def test_turn_commands(self, command: Command) -> None:
        """Test actions advance the world."""
        assert command.takes_turn is True

    def test_game_action_mapping(self) -> None:
        """Test commands map onto orchestrator actions."""
        assert Command.MOVE_WEST.game_action == GameAction.MOVE_WEST
        assert Command.INVENTORY.game_action == GameAction.OPEN_INVENTORY
        assert Command.QUIT.game_action == GameAction.QUIT
        assert Command.HELP.game_action is None
        assert Command.UNKNOWN.game_action is None
