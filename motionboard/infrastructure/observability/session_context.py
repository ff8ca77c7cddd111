"""Assembly session context for log correlation.

Every log line emitted while an assembly session is running carries
its session_id, so the motions, attendance changes and selections of
one committee session can be pulled out of a shared log.

Usage:
    # When the session layer opens a session
    set_session_id(generate_session_id())

    # In structlog configuration
    processors = [..., session_id_processor, ...]
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# Empty string means no session is open
_session_id: ContextVar[str] = ContextVar("session_id", default="")


def generate_session_id() -> str:
    """Generate a new session ID (UUID4 string)."""
    return str(uuid4())


def get_session_id() -> str:
    """Get the current session ID, or "" if no session is open."""
    return _session_id.get()


def set_session_id(session_id: str) -> None:
    """Set the session ID for the current context.

    Args:
        session_id: The session ID to set.
    """
    _session_id.set(session_id)


def clear_session_id() -> None:
    """Forget the current session ID (session reset)."""
    _session_id.set("")


def session_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding session_id to every log entry.

    An explicitly bound session_id is left untouched; nothing is added
    when no session is open.

    Args:
        logger: The logger instance (unused, required by structlog).
        method_name: The logging method name (unused, required by structlog).
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary.
    """
    session_id = get_session_id()
    if session_id:
        event_dict.setdefault("session_id", session_id)
    return event_dict
