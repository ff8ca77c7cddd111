"""Unit tests for session bootstrap wiring."""

from collections.abc import Iterator

import pytest
import structlog

from motionboard.bootstrap import start_session
from motionboard.config.session_config import SessionConfig
from motionboard.domain.models.motion import UnmoderatedCaucus
from motionboard.domain.models.motion_validation import ValidationErrorCode
from motionboard.infrastructure.adapters.in_memory_delegate_directory import (
    InMemoryDelegateDirectory,
)
from motionboard.infrastructure.observability.session_context import (
    clear_session_id,
    get_session_id,
)

ROUND_ROBIN = {
    "id": "r-1",
    "kind": "rr",
    "delegate": "France",
    "speakingTime": "0:45",
    "topic": "Opening statements",
    "totalSpeakers": "3",
}


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    clear_session_id()
    structlog.reset_defaults()


class TestStartSession:
    """Tests for start_session."""

    def test_opens_a_session(self, directory: InMemoryDelegateDirectory) -> None:
        board = start_session(directory, SessionConfig(), configure_logging=False)
        assert get_session_id() != ""
        assert board.motions() == []

    def test_each_session_gets_a_new_id(self, directory: InMemoryDelegateDirectory) -> None:
        start_session(directory, SessionConfig(), configure_logging=False)
        first = get_session_id()
        start_session(directory, SessionConfig(), configure_logging=False)
        assert get_session_id() != first

    def test_board_follows_config(self, directory: InMemoryDelegateDirectory) -> None:
        config = SessionConfig(enable_round_robin=False, enable_extensions=False)
        board = start_session(directory, config, configure_logging=False)

        outcome = board.submit(ROUND_ROBIN)
        assert outcome.issue is not None
        assert outcome.issue.code is ValidationErrorCode.INVALID_KIND

        motion = board.submit(
            {
                "id": "u-1",
                "kind": "unmod",
                "delegate": "France",
                "totalTime": "5:00",
                "isExtension": True,
            }
        ).unwrap()
        assert isinstance(motion, UnmoderatedCaucus)
        assert not motion.is_extension

    def test_configures_logging(self, directory: InMemoryDelegateDirectory) -> None:
        start_session(directory, SessionConfig(environment="development"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_reads_environment_without_config(
        self, directory: InMemoryDelegateDirectory, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MOTIONBOARD_ENABLE_ROUND_ROBIN", "false")
        monkeypatch.delenv("MOTIONBOARD_SORT_ORDER", raising=False)
        board = start_session(directory, configure_logging=False)
        assert not board.submit(ROUND_ROBIN).ok
