"""Motion collection errors raised by the session layer."""

from motionboard.domain.exceptions import MotionboardError


class MotionNotFoundError(MotionboardError):
    """Raised when an operation names a motion that is not on the board.

    Attributes:
        motion_id: ID of the motion that was not found.
    """

    def __init__(self, motion_id: str) -> None:
        self.motion_id = motion_id
        super().__init__(f"Motion {motion_id} not found")


class DuplicateMotionError(MotionboardError):
    """Raised when a motion is submitted with an ID already on the board.

    Attributes:
        motion_id: The conflicting motion ID.
    """

    def __init__(self, motion_id: str) -> None:
        self.motion_id = motion_id
        super().__init__(f"Motion {motion_id} already exists")
