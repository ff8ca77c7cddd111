"""Application services for motionboard."""

from motionboard.application.services.base import LoggingMixin
from motionboard.application.services.motion_board_service import MotionBoardService

__all__ = ["LoggingMixin", "MotionBoardService"]
