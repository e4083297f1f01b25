"""Command-line entry point and game loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from hyrule_heroes.cli import render
from hyrule_heroes.cli.commands import Command, parse_input
from hyrule_heroes.cli.session import Session, new_session, process_command
from hyrule_heroes.core.config import get_settings
from hyrule_heroes.core.exceptions import HyruleHeroesError
from hyrule_heroes.core.logging import bind_context, clear_context, configure_logging, get_logger


logger = get_logger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]

PROMPT = "> "


def _display(session: Session, command: Command) -> str:
    """Screen for a command that does not take a turn."""
    match command:
        case Command.HELP:
            return render.help_screen()
        case Command.STATUS:
            return render.status(session)
        case Command.INVENTORY:
            return render.inventory_screen(session)
        case _:
            return render.unknown_command()


def run_game_loop(
    session: Session,
    read_line: ReadLine = input,
    write: Write = print,
    *,
    show_map: bool = True,
) -> Session:
    """Prompt, parse and apply commands until the game ends.

    End of input is treated as quitting.

    Args:
        session: Session to play; it is updated in place.
        read_line: Prompt-taking input function.
        write: Output function.
        show_map: Draw the map before every prompt.

    Returns:
        The finished session.
    """
    while session.is_running and session.player.health > 0:
        if show_map:
            write(render.game_map(session))
        write(render.hud(session))
        report = render.turn_report(session)
        if report:
            write(report)

        try:
            line = read_line(PROMPT)
        except EOFError:
            line = "quit"

        command = parse_input(line)
        bind_context(turn=session.game.turn_number)
        logger.debug("Command parsed", command=command)

        if command.takes_turn or command is Command.QUIT:
            process_command(session, command)
        else:
            session.message = ""
            session.events.clear()
            write(_display(session, command))

    if session.message and not session.is_running:
        write(session.message)
    clear_context()
    return session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hyrule-heroes",
        description="Turn-based text adventure across the fields of Hyrule",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --no-map
  %(prog)s --log-level DEBUG --json-logs
  %(prog)s --log-level INFO --log-file game.log
        """,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured logging level",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON log lines")
    parser.add_argument("--log-file", help="Append log lines to this file instead of stderr")
    parser.add_argument("--no-map", action="store_true", help="Do not draw the map each turn")
    return parser


def main(
    argv: Sequence[str] | None = None,
    read_line: ReadLine = input,
    write: Write = print,
) -> int:
    """Run the game.

    Returns:
        Process exit code: 0 on a normal finish, 1 on an application error.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        configure_logging(
            level=args.log_level or settings.effective_log_level,
            json_format=args.json_logs or settings.log_json,
            log_file=args.log_file or settings.log_file,
        )
        show_map = settings.game.show_map and not args.no_map

        write(render.title(settings.app_name))
        write(render.help_screen())
        session = run_game_loop(new_session(settings.game), read_line, write, show_map=show_map)
        write(render.game_over(session))
    except HyruleHeroesError as exc:
        logger.error("Game aborted", error=exc.message, details=exc.details)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
