"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Hyrule Heroes test suite.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from hyrule_heroes.models import CombatantStats, EnemyKind, PlayerStats, Position


if TYPE_CHECKING:
    from collections.abc import Generator

    from hyrule_heroes.cli.session import Session
    from hyrule_heroes.models import EnemyState


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from hyrule_heroes.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Keep engine debug events out of test output."""
    from hyrule_heroes.core.logging import configure_logging

    configure_logging(level="WARNING")


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no HYRULE_HEROES_ variables set.

    Returns:
        The temporary working directory.
    """
    import os

    for key in list(os.environ):
        if key.startswith("HYRULE_HEROES_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def hero() -> PlayerStats:
    """A fresh level 1 hero."""
    return PlayerStats()


@pytest.fixture
def attacker() -> CombatantStats:
    """Attacker with 20 attack and no equipment."""
    return CombatantStats(attack=20, health=100, max_health=100)


@pytest.fixture
def defender() -> CombatantStats:
    """Defender with 10 defense."""
    return CombatantStats(defense=10, health=50, max_health=50)


@pytest.fixture
def make_enemy() -> Callable[..., EnemyState]:
    """Factory spawning an enemy of a kind at a position."""
    from hyrule_heroes.engine import enemy_ai

    def _make(kind: EnemyKind = EnemyKind.SLIME, x: int = 0, y: int = 0) -> EnemyState:
        return enemy_ai.spawn(kind, Position(x=x, y=y))

    return _make


# =============================================================================
# Session Fixtures
# =============================================================================


@pytest.fixture
def session(isolated_env: Path) -> Session:
    """A new play session with default settings."""
    from hyrule_heroes.cli.session import new_session
    from hyrule_heroes.core.config import GameSettings

    return new_session(GameSettings())


@pytest.fixture
def scripted_input() -> Callable[[list[str]], Callable[[str], str]]:
    """Build a ``read_line`` replacement that replays lines, then hits EOF."""

    def _build(lines: list[str]) -> Callable[[str], str]:
        feed: Iterator[str] = iter(lines)

        def _read(prompt: str) -> str:
            try:
                return next(feed)
            except StopIteration:
                raise EOFError from None

        return _read

    return _build
