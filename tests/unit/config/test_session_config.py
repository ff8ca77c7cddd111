"""Unit tests for SessionConfig.

Tests defaults, validation and environment variable overrides.
"""

from __future__ import annotations

import json

import pytest

from motionboard.config.session_config import (
    DEFAULT_SESSION_CONFIG,
    DEFAULT_TITLE,
    SessionConfig,
)
from motionboard.domain.errors.sort import InvalidSortOrderError, UnsupportedSortPropertyError
from motionboard.domain.models.motion import MotionKind
from motionboard.domain.models.sort_order import (
    DEFAULT_SORT_PRIORITY,
    SortEntry,
    SortKind,
    SortOrderKey,
    SortOrderProperty,
)

_ENV_VARS = (
    "MOTIONBOARD_TITLE",
    "MOTIONBOARD_ENABLE_ROUND_ROBIN",
    "MOTIONBOARD_ENABLE_EXTENSIONS",
    "MOTIONBOARD_SORT_ORDER",
    "MOTIONBOARD_ENVIRONMENT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Environment without any motionboard variables."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSessionConfig:
    """Tests for SessionConfig dataclass."""

    def test_defaults(self) -> None:
        config = SessionConfig()
        assert config.title == DEFAULT_TITLE == "General Assembly"
        assert config.enable_round_robin
        assert config.enable_extensions
        assert config.sort_order == DEFAULT_SORT_PRIORITY
        assert config.environment == "production"
        assert DEFAULT_SESSION_CONFIG == config

    def test_all_kinds_enabled_by_default(self) -> None:
        assert SessionConfig().enabled_kinds == frozenset(MotionKind)

    def test_round_robin_can_be_disabled(self) -> None:
        kinds = SessionConfig(enable_round_robin=False).enabled_kinds
        assert MotionKind.RR not in kinds
        assert MotionKind.MOD in kinds

    def test_blank_title_raises(self) -> None:
        with pytest.raises(ValueError, match="title cannot be empty"):
            SessionConfig(title="  ")

    def test_inconsistent_sort_order_raises(self) -> None:
        bad_order = (
            SortEntry(
                kinds=(SortKind.UNMOD,),
                order=(SortOrderKey(SortOrderProperty.SPEAKING_TIME),),
            ),
        )
        with pytest.raises(UnsupportedSortPropertyError):
            SessionConfig(sort_order=bad_order)

    def test_config_is_frozen(self) -> None:
        config = SessionConfig()
        with pytest.raises(AttributeError):
            config.title = "Security Council"  # type: ignore[misc]


class TestSessionConfigFromEnvironment:
    """Tests for SessionConfig.from_environment."""

    def test_defaults_without_env(self, clean_env: pytest.MonkeyPatch) -> None:
        assert SessionConfig.from_environment() == SessionConfig()

    def test_title(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MOTIONBOARD_TITLE", "  Security Council ")
        assert SessionConfig.from_environment().title == "Security Council"

    def test_blank_title_uses_default(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MOTIONBOARD_TITLE", "   ")
        assert SessionConfig.from_environment().title == DEFAULT_TITLE

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("false", False), ("0", False), ("OFF", False), ("yes", True), ("maybe", True)],
    )
    def test_round_robin_flag(
        self, clean_env: pytest.MonkeyPatch, value: str, expected: bool
    ) -> None:
        clean_env.setenv("MOTIONBOARD_ENABLE_ROUND_ROBIN", value)
        assert SessionConfig.from_environment().enable_round_robin is expected

    def test_extensions_flag(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MOTIONBOARD_ENABLE_EXTENSIONS", "no")
        assert SessionConfig.from_environment().enable_extensions is False

    def test_sort_order(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv(
            "MOTIONBOARD_SORT_ORDER",
            json.dumps([{"kind": ["mod", "rr"], "order": [{"property": "totalTime"}]}]),
        )
        order = SessionConfig.from_environment().sort_order
        assert order == (
            SortEntry(
                kinds=(SortKind.MOD, SortKind.RR),
                order=(SortOrderKey(SortOrderProperty.TOTAL_TIME),),
            ),
        )

    def test_malformed_sort_order_raises(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MOTIONBOARD_SORT_ORDER", '[{"kind": []}]')
        with pytest.raises(InvalidSortOrderError):
            SessionConfig.from_environment()

    def test_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("MOTIONBOARD_ENVIRONMENT", "development")
        assert SessionConfig.from_environment().environment == "development"
