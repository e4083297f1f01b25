"""Text command parsing.

Input is trimmed and lowercased, then matched against the movement,
action and system vocabularies in that order. Anything else is
``Command.UNKNOWN``.
"""

from __future__ import annotations

from enum import StrEnum

from hyrule_heroes.models import GameAction


class Command(StrEnum):
    """Commands understood by the driver."""

    MOVE_NORTH = "move_north"
    MOVE_SOUTH = "move_south"
    MOVE_EAST = "move_east"
    MOVE_WEST = "move_west"
    ATTACK = "attack"
    INTERACT = "interact"
    USE_ITEM = "use_item"
    WAIT = "wait"
    INVENTORY = "inventory"
    STATUS = "status"
    HELP = "help"
    QUIT = "quit"
    UNKNOWN = "unknown"

    @property
    def takes_turn(self) -> bool:
        """Whether the command advances the world by a turn."""
        return self in _TURN_COMMANDS

    @property
    def game_action(self) -> GameAction | None:
        """The orchestrator action this command maps to, if any."""
        return _GAME_ACTIONS.get(self)


_MOVE_WORDS: dict[str, Command] = {
    "n": Command.MOVE_NORTH,
    "north": Command.MOVE_NORTH,
    "s": Command.MOVE_SOUTH,
    "south": Command.MOVE_SOUTH,
    "e": Command.MOVE_EAST,
    "east": Command.MOVE_EAST,
    "w": Command.MOVE_WEST,
    "west": Command.MOVE_WEST,
}

_ACTION_WORDS: dict[str, Command] = {
    "a": Command.ATTACK,
    "attack": Command.ATTACK,
    "x": Command.INTERACT,
    "interact": Command.INTERACT,
    "u": Command.USE_ITEM,
    "use": Command.USE_ITEM,
    ".": Command.WAIT,
    "wait": Command.WAIT,
}

_SYSTEM_WORDS: dict[str, Command] = {
    "i": Command.INVENTORY,
    "inv": Command.INVENTORY,
    "inventory": Command.INVENTORY,
    "stat": Command.STATUS,
    "status": Command.STATUS,
    "h": Command.HELP,
    "help": Command.HELP,
    "?": Command.HELP,
    "q": Command.QUIT,
    "quit": Command.QUIT,
    "exit": Command.QUIT,
}

_GAME_ACTIONS: dict[Command, GameAction] = {
    Command.MOVE_NORTH: GameAction.MOVE_NORTH,
    Command.MOVE_SOUTH: GameAction.MOVE_SOUTH,
    Command.MOVE_EAST: GameAction.MOVE_EAST,
    Command.MOVE_WEST: GameAction.MOVE_WEST,
    Command.ATTACK: GameAction.ATTACK,
    Command.INTERACT: GameAction.INTERACT,
    Command.USE_ITEM: GameAction.USE_ITEM,
    Command.WAIT: GameAction.WAIT,
    Command.INVENTORY: GameAction.OPEN_INVENTORY,
    Command.QUIT: GameAction.QUIT,
}

_TURN_COMMANDS = frozenset(
    {
        Command.MOVE_NORTH,
        Command.MOVE_SOUTH,
        Command.MOVE_EAST,
        Command.MOVE_WEST,
        Command.ATTACK,
        Command.INTERACT,
        Command.USE_ITEM,
        Command.WAIT,
    }
)


def parse_input(text: str) -> Command:
    """Parse a line of player input.

    Example:
        >>> parse_input("  North ")
        <Command.MOVE_NORTH: 'move_north'>
    """
    word = text.strip().lower()
    for vocabulary in (_MOVE_WORDS, _ACTION_WORDS, _SYSTEM_WORDS):
        if word in vocabulary:
            return vocabulary[word]
    return Command.UNKNOWN


__all__ = ["Command", "parse_input"]
