"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from hyrule_heroes.core.exceptions import (
    ConfigurationError,
    GameEngineError,
    HyruleHeroesError,
    InvalidGameStateError,
)


class TestHyruleHeroesError:
    """Tests for the base HyruleHeroesError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = HyruleHeroesError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = HyruleHeroesError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(HyruleHeroesError("Test", details={"x": 1}))
        assert "HyruleHeroesError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestConfigurationError:
    """Tests for configuration errors."""

    def test_config_key_recorded(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad value", config_key="starting_potions")
        assert exc.details["config_key"] == "starting_potions"

    def test_without_config_key(self) -> None:
        """Test ConfigurationError without a key keeps details empty."""
        assert ConfigurationError("Bad value").details == {}


class TestGameEngineErrors:
    """Tests for game engine exceptions."""

    def test_invalid_state_context(self) -> None:
        """Test InvalidGameStateError with state context."""
        exc = InvalidGameStateError(
            "Hero left the map",
            current_state="exploration",
            expected_states=["exploration", "combat"],
            details={"x": -1},
        )
        assert exc.details["current_state"] == "exploration"
        assert exc.details["expected_states"] == ["exploration", "combat"]
        assert exc.details["x"] == -1


class TestExceptionHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "exc_class",
        [ConfigurationError, GameEngineError, InvalidGameStateError],
    )
    def test_all_inherit_from_base(self, exc_class: type[HyruleHeroesError]) -> None:
        """Test all exceptions inherit from HyruleHeroesError."""
        assert issubclass(exc_class, HyruleHeroesError)

    def test_invalid_state_is_engine_error(self) -> None:
        """Test InvalidGameStateError is caught as a GameEngineError."""
        with pytest.raises(GameEngineError):
            raise InvalidGameStateError("broken")
