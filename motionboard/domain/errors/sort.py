"""Motion ordering configuration errors.

These are programmer/configuration errors, not user input errors:
a sort order that asks a motion kind for a property it cannot
provide must fail loudly instead of comparing as equal.
"""

from motionboard.domain.exceptions import MotionboardError


class SortOrderError(MotionboardError):
    """Base class for sort order errors."""

    pass


class UnsupportedSortPropertyError(SortOrderError):
    """Raised when a sort property is not available for a motion kind.

    Example: sorting unmoderated caucuses by speaking time.

    Attributes:
        property_name: The requested sort property (e.g. "speakingTime").
        kind: The sort kind that cannot provide it (e.g. "unmod").
    """

    def __init__(self, property_name: str, kind: str) -> None:
        """Initialize the error.

        Args:
            property_name: The requested sort property.
            kind: The motion or sort kind lacking the property.
        """
        self.property_name = property_name
        self.kind = kind

        message = f"Motion of kind {kind!r} cannot be sorted by {property_name!r}"
        super().__init__(message)


class InvalidSortOrderError(SortOrderError):
    """Raised when persisted sort order data does not have the expected shape.

    Attributes:
        reason: Description of what was wrong with the data.
    """

    def __init__(self, reason: str) -> None:
        """Initialize the error.

        Args:
            reason: Description of what was wrong with the data.
        """
        self.reason = reason
        super().__init__(f"Invalid sort order: {reason}")
