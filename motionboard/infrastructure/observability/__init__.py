"""Observability: structlog configuration and session log context."""

from motionboard.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)
from motionboard.infrastructure.observability.session_context import (
    clear_session_id,
    generate_session_id,
    get_session_id,
    session_id_processor,
    set_session_id,
)

__all__ = [
    "configure_structlog",
    "get_logger_for_service",
    "clear_session_id",
    "generate_session_id",
    "get_session_id",
    "session_id_processor",
    "set_session_id",
]
