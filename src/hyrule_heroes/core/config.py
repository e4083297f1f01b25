"""Configuration management for Hyrule Heroes.

Settings are loaded with pydantic-settings from environment variables and
an optional ``.env`` file. Only the command driver reads them; the rule
engines take every value as an explicit argument.

Example:
    >>> from hyrule_heroes.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.inventory_capacity
    20

Environment Variables:
    HYRULE_HEROES_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    HYRULE_HEROES_LOG_JSON: Emit JSON log lines instead of console output
    HYRULE_HEROES_LOG_FILE: Append log lines to this file instead of stderr
    HYRULE_HEROES_GAME_STARTING_POTIONS: Potions carried at the start
    HYRULE_HEROES_GAME_INVENTORY_CAPACITY: Inventory slot limit
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hyrule_heroes.core.constants import DEFAULT_INVENTORY_CAPACITY
from hyrule_heroes.core.exceptions import ConfigurationError


class GameSettings(BaseSettings):
    """Configuration for a play session.

    Attributes:
        starting_potions: Health potions carried at the start.
        starting_gold: Gold carried at the start.
        inventory_capacity: Maximum number of inventory slots.
        show_map: Draw the overworld map before every prompt.
    """

    model_config = SettingsConfigDict(
        env_prefix="HYRULE_HEROES_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    starting_potions: int = Field(
        default=1,
        ge=0,
        description="Health potions carried at the start",
    )
    starting_gold: int = Field(
        default=0,
        ge=0,
        description="Gold carried at the start",
    )
    inventory_capacity: int = Field(
        default=DEFAULT_INVENTORY_CAPACITY,
        ge=1,
        le=99,
        description="Maximum inventory slots",
    )
    show_map: bool = Field(
        default=True,
        description="Draw the map before every prompt",
    )

    @model_validator(mode="after")
    def validate_potions_fit(self) -> "GameSettings":
        """Ensure the starting potions fit in the inventory.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If starting_potions exceeds inventory_capacity.
        """
        if self.starting_potions > self.inventory_capacity:
            raise ConfigurationError(
                f"starting_potions ({self.starting_potions}) must not exceed "
                f"inventory_capacity ({self.inventory_capacity})",
                config_key="starting_potions",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name shown in the title banner.
        debug: Enable debug mode.
        log_level: Application logging level.
        log_json: Emit JSON log lines.
        log_file: Optional file that receives log lines.
        game: Play session settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="HYRULE_HEROES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Legend of Hyrule: Hyrule Heroes",
        description="Application name",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )
    log_file: str | None = Field(
        default=None,
        description="Append log lines to this file instead of stderr",
    )

    game: GameSettings = Field(default_factory=GameSettings)

    @property
    def effective_log_level(self) -> str:
        """Logging level after applying debug mode.

        Returns:
            "DEBUG" when debug is enabled, otherwise the configured level.
        """
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
