"""Bootstrap wiring for an assembly session."""

from __future__ import annotations

from motionboard.application.services.motion_board_service import MotionBoardService
from motionboard.config.session_config import SessionConfig
from motionboard.domain.ports.delegate_directory import DelegateDirectoryPort
from motionboard.infrastructure.observability import (
    configure_structlog,
    generate_session_id,
    set_session_id,
)


def start_session(
    directory: DelegateDirectoryPort,
    config: SessionConfig | None = None,
    *,
    configure_logging: bool = True,
) -> MotionBoardService:
    """Open a session: configure logging, tag logs, build the motion board.

    Args:
        directory: The session roster.
        config: Session configuration (read from the environment if None).
        configure_logging: Whether to configure structlog.

    Returns:
        A motion board wired to the configuration.
    """
    config = config or SessionConfig.from_environment()
    if configure_logging:
        configure_structlog(environment=config.environment)
    set_session_id(generate_session_id())

    return MotionBoardService(
        directory,
        config.sort_order,
        enabled_kinds=config.enabled_kinds,
        allow_extensions=config.enable_extensions,
    )


__all__ = ["start_session"]
