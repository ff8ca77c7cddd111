"""Domain errors for motionboard.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from MotionboardError.
"""

from motionboard.domain.errors.delegate import InvalidDelegatePresetError
from motionboard.domain.errors.motion import DuplicateMotionError, MotionNotFoundError
from motionboard.domain.errors.sort import (
    InvalidSortOrderError,
    SortOrderError,
    UnsupportedSortPropertyError,
)

__all__: list[str] = [
    "InvalidDelegatePresetError",
    "DuplicateMotionError",
    "MotionNotFoundError",
    "SortOrderError",
    "UnsupportedSortPropertyError",
    "InvalidSortOrderError",
]
