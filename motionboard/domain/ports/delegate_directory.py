"""DelegateDirectoryPort - read access to the assembly roster.

The schema engine resolves the free-text delegate name of a motion
through this port. Implementations hand out a consistent snapshot;
the engine reads it once per validation and never writes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from motionboard.domain.models.delegate import Delegate


@runtime_checkable
class DelegateDirectoryPort(Protocol):
    """Port for delegate lookups."""

    def find_by_name(self, name: str) -> Delegate | None:
        """Find a delegate by canonical name or alias (case-insensitive).

        Args:
            name: Free-text name as typed on a form.

        Returns:
            The first matching delegate in roster order, or None.
        """
        ...

    def find_by_id(self, delegate_id: str) -> Delegate | None:
        """Find a delegate by identifier.

        Returns:
            The delegate, or None if the ID is not on the roster.
        """
        ...

    def is_present(self, delegate: Delegate) -> bool:
        """Whether the delegate is currently present."""
        ...

    def delegates(self) -> Sequence[Delegate]:
        """All delegates in roster order."""
        ...
