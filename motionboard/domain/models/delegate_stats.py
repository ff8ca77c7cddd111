"""Per-delegate motion statistics for a session."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class DelegateMotionStats:
    """How often a delegate raised motions and had them chosen.

    Attributes:
        motions_proposed: Valid motions submitted by the delegate.
        motions_accepted: Of those, how many were selected.
    """

    motions_proposed: int = 0
    motions_accepted: int = 0

    def __post_init__(self) -> None:
        if self.motions_proposed < 0 or self.motions_accepted < 0:
            raise ValueError("motion counts must be non-negative")

    def with_proposed(self) -> DelegateMotionStats:
        return replace(self, motions_proposed=self.motions_proposed + 1)

    def with_accepted(self) -> DelegateMotionStats:
        return replace(self, motions_accepted=self.motions_accepted + 1)
