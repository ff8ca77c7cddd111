"""Assembly session configuration.

Settings a chair can change for a session, with environment variable
overrides for deployments that ship a fixed setup.

Environment Variables:
- MOTIONBOARD_TITLE: Assembly title (default: "General Assembly")
- MOTIONBOARD_ENABLE_ROUND_ROBIN: Accept round robin motions (default: true)
- MOTIONBOARD_ENABLE_EXTENSIONS: Accept caucus extensions (default: true)
- MOTIONBOARD_SORT_ORDER: Sort order as stored JSON (default: built-in priority)
- MOTIONBOARD_ENVIRONMENT: "production" (JSON logs) or "development" (default: production)

Invalid booleans fall back to their defaults. An invalid sort order
is an error: ordering motions with a broken priority must not start.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from motionboard.domain.models.motion import MotionKind
from motionboard.domain.models.sort_order import (
    DEFAULT_SORT_PRIORITY,
    SortOrder,
    validate_sort_order,
)
from motionboard.infrastructure.adapters.sort_order_codec import load_sort_order

DEFAULT_TITLE = "General Assembly"
DEFAULT_ENVIRONMENT = "production"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or not a recognized boolean.

    Returns:
        Parsed boolean value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class SessionConfig:
    """Configuration for one assembly session.

    Attributes:
        title: Assembly title shown on the dashboard.
        enable_round_robin: Whether round robin motions are accepted.
        enable_extensions: Whether caucuses may be marked as extensions.
        sort_order: Motion priority.
        environment: Logging environment ("production" or "development").
    """

    title: str = DEFAULT_TITLE
    enable_round_robin: bool = True
    enable_extensions: bool = True
    sort_order: SortOrder = DEFAULT_SORT_PRIORITY
    environment: str = DEFAULT_ENVIRONMENT

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.title.strip():
            raise ValueError("title cannot be empty")
        validate_sort_order(self.sort_order)

    @property
    def enabled_kinds(self) -> frozenset[MotionKind]:
        """Motion kinds accepted from the floor."""
        kinds = set(MotionKind)
        if not self.enable_round_robin:
            kinds.discard(MotionKind.RR)
        return frozenset(kinds)

    @classmethod
    def from_environment(cls) -> SessionConfig:
        """Create config from environment variables with defaults.

        Returns:
            SessionConfig with values from environment or defaults.

        Raises:
            InvalidSortOrderError: If MOTIONBOARD_SORT_ORDER is malformed.
            UnsupportedSortPropertyError: If it sorts a kind by a property
                the kind cannot provide.
        """
        raw_order = os.environ.get("MOTIONBOARD_SORT_ORDER")
        sort_order = load_sort_order(raw_order) if raw_order else DEFAULT_SORT_PRIORITY

        return cls(
            title=os.environ.get("MOTIONBOARD_TITLE", "").strip() or DEFAULT_TITLE,
            enable_round_robin=_get_bool_env("MOTIONBOARD_ENABLE_ROUND_ROBIN", True),
            enable_extensions=_get_bool_env("MOTIONBOARD_ENABLE_EXTENSIONS", True),
            sort_order=sort_order,
            environment=os.environ.get("MOTIONBOARD_ENVIRONMENT", "").strip()
            or DEFAULT_ENVIRONMENT,
        )


# Default configuration: every motion kind, built-in priority
DEFAULT_SESSION_CONFIG = SessionConfig()
