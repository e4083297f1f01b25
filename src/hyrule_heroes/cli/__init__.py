"""Text command driver: parsing, the play session, rendering and the entry point.

Submodules:
    commands: Player input vocabulary
    overworld: The 20x15 playable map, its enemies and pickups
    session: Caller-owned session state and the turn loop rules
    render: Plain-text screens
    app: argparse entry point and game loop
"""

from __future__ import annotations

from hyrule_heroes.cli.commands import Command, parse_input
from hyrule_heroes.cli.session import Session, new_session, process_command


__all__ = [
    "Command",
    "parse_input",
    "Session",
    "new_session",
    "process_command",
]
