"""Motion validation outcome models.

Validation failures are data, not exceptions: the form that submitted
the motion renders exactly one inline message next to one field.

Usage:
    outcome = validate_motion(raw, directory)
    if outcome.ok:
        board.append(outcome.motion)
    else:
        show_error(outcome.issue.field, outcome.issue.message)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from motionboard.domain.models.motion import Motion


class ValidationErrorCode(StrEnum):
    """Reason codes for motion validation failure.

    Codes are for programmatic handling only; users see the message.
    """

    INVALID_KIND = "invalid_kind"
    UNKNOWN_DELEGATE = "unknown_delegate"
    DELEGATE_NOT_PRESENT = "delegate_not_present"
    INVALID_TIME_FORMAT = "invalid_time_format"
    REQUIRED_FIELD = "required_field"
    INDIVISIBLE_SPEAKING_TIME = "indivisible_speaking_time"
    INVALID_NUMBER = "invalid_number"


@dataclass(frozen=True)
class ValidationIssue:
    """The first problem found with a motion submission.

    Attributes:
        code: Machine-readable reason.
        field: Path of the offending form field, e.g. ("speakingTime",).
        message: Human-readable message using field labels.
    """

    code: ValidationErrorCode
    field: tuple[str, ...]
    message: str

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("message cannot be empty")


@dataclass(frozen=True)
class MotionValidation:
    """Result of validating a motion submission.

    Exactly one of motion or issue is set. No partial motion is ever
    returned alongside an issue.
    """

    motion: Motion | None = None
    issue: ValidationIssue | None = None

    def __post_init__(self) -> None:
        if (self.motion is None) == (self.issue is None):
            raise ValueError("exactly one of motion or issue must be set")

    @classmethod
    def success(cls, motion: Motion) -> MotionValidation:
        return cls(motion=motion)

    @classmethod
    def failure(
        cls, code: ValidationErrorCode, field: str, message: str
    ) -> MotionValidation:
        return cls(issue=ValidationIssue(code=code, field=(field,), message=message))

    @property
    def ok(self) -> bool:
        return self.motion is not None

    def unwrap(self) -> Motion:
        """Return the motion.

        Raises:
            ValueError: If validation failed.
        """
        if self.motion is None:
            assert self.issue is not None
            raise ValueError(f"Motion is invalid: {self.issue.message}")
        return self.motion
