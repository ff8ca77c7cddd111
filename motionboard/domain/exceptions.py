"""Base exception classes for the motionboard domain layer."""


class MotionboardError(Exception):
    """Base exception for all domain errors.

    All raised domain-specific exceptions MUST inherit from this class.
    Motion validation failures are not exceptions: they are returned
    as ValidationIssue values so a form can render them inline.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
