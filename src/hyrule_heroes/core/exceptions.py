"""Exception hierarchy for Hyrule Heroes.

The rule engines are total and never raise: shortages become no-ops or
``success=False`` results. These exceptions exist for the application
boundary, where configuration is loaded and the command driver commits
session state.

Example:
    >>> from hyrule_heroes.core.exceptions import InvalidGameStateError
    >>> raise InvalidGameStateError("Player left the map", current_state="exploration")
"""

from __future__ import annotations

from typing import Any


class HyruleHeroesError(Exception):
    """Base exception for all Hyrule Heroes errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


class ConfigurationError(HyruleHeroesError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class GameEngineError(HyruleHeroesError):
    """Base exception for game engine errors raised outside the pure engines."""


class InvalidGameStateError(GameEngineError):
    """Raised when a committed game state violates its invariants."""

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid game state error with state context.

        Args:
            message: Human-readable error description.
            current_state: The current invalid state identifier.
            expected_states: List of valid states that were expected.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, details=combined_details)


__all__ = [
    "HyruleHeroesError",
    "ConfigurationError",
    "GameEngineError",
    "InvalidGameStateError",
]
