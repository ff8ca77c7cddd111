"""Domain models for motionboard.

Contains value objects and domain models that represent
core business concepts. These models are immutable and
contain no infrastructure dependencies.
"""

from motionboard.domain.models.delegate import Delegate, DelegatePresence
from motionboard.domain.models.motion import (
    MOTION_DEFS,
    ModeratedCaucus,
    Motion,
    MotionKind,
    OtherMotion,
    RoundRobin,
    UnmoderatedCaucus,
)
from motionboard.domain.models.motion_validation import (
    MotionValidation,
    ValidationErrorCode,
    ValidationIssue,
)
from motionboard.domain.models.sort_order import (
    DEFAULT_SORT_PRIORITY,
    SortEntry,
    SortKind,
    SortOrder,
    SortOrderKey,
    SortOrderProperty,
)

__all__: list[str] = [
    "Delegate",
    "DelegatePresence",
    "MOTION_DEFS",
    "Motion",
    "MotionKind",
    "ModeratedCaucus",
    "UnmoderatedCaucus",
    "RoundRobin",
    "OtherMotion",
    "MotionValidation",
    "ValidationErrorCode",
    "ValidationIssue",
    "DEFAULT_SORT_PRIORITY",
    "SortEntry",
    "SortKind",
    "SortOrder",
    "SortOrderKey",
    "SortOrderProperty",
]
