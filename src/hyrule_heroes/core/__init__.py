"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        HyruleHeroesError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        GameEngineError: Game engine errors.
        InvalidGameStateError: Committed state violated its invariants.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from hyrule_heroes.core.config import (
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from hyrule_heroes.core.exceptions import (
    ConfigurationError,
    GameEngineError,
    HyruleHeroesError,
    InvalidGameStateError,
)
from hyrule_heroes.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "HyruleHeroesError",
    "ConfigurationError",
    "GameEngineError",
    "InvalidGameStateError",
    # Configuration
    "Settings",
    "GameSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
