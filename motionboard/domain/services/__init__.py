"""Domain services for motionboard.

Pure functions over motions: time string handling, the schema
engine (validation and its inverse) and the ordering engine.
"""

from motionboard.domain.services.motion_schema import (
    RawMotionInput,
    inputify,
    validate_motion,
)
from motionboard.domain.services.motion_sort import (
    compare_motions,
    next_motion,
    sort_motions,
)
from motionboard.domain.services.time_format import parse_time, sanitize_time, stringify_time

__all__: list[str] = [
    "RawMotionInput",
    "inputify",
    "validate_motion",
    "compare_motions",
    "next_motion",
    "sort_motions",
    "parse_time",
    "sanitize_time",
    "stringify_time",
]
