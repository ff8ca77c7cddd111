"""Delegate roster errors."""

from motionboard.domain.exceptions import MotionboardError


class InvalidDelegatePresetError(MotionboardError):
    """Raised when a roster preset cannot be loaded.

    Attributes:
        source: Where the preset came from (file path or preset key).
        reason: Description of the problem.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid delegate preset {source}: {reason}")
