"""Configuration module for motionboard.

Available Configurations:
- SessionConfig: Title, enabled motion kinds and sort order of a session
"""

from motionboard.config.session_config import DEFAULT_SESSION_CONFIG, SessionConfig

__all__ = [
    "SessionConfig",
    "DEFAULT_SESSION_CONFIG",
]
