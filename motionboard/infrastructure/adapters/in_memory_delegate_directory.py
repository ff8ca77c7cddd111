"""InMemoryDelegateDirectory - roster adapter for DelegateDirectoryPort.

Holds the delegates of one assembly session in roster order. The
roster is populated once at session start (from a preset or by hand),
updated by attendance actions and reset between sessions.

Delegates are immutable; attendance updates replace the entry. Lists
derived from the roster (present delegates) are recomputed on each
call, so the session layer re-queries after every change instead of
subscribing to one.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import structlog

from motionboard.domain.models.delegate import Delegate, DelegatePresence

logger = structlog.get_logger()


class InMemoryDelegateDirectory:
    """In-memory implementation of DelegateDirectoryPort."""

    def __init__(self, delegates: Iterable[Delegate] = ()) -> None:
        """Initialize the directory.

        Args:
            delegates: Initial roster, in order.

        Raises:
            ValueError: If two delegates share an ID.
        """
        self._delegates: list[Delegate] = []
        for delegate in delegates:
            self.add(delegate)

    @classmethod
    def from_preset(
        cls,
        preset: Mapping[str, Mapping[str, Any]],
        presence: DelegatePresence = DelegatePresence.NOT_PRESENT,
    ) -> InMemoryDelegateDirectory:
        """Build a roster from preset attributes.

        Args:
            preset: Mapping of delegate key to {"name", "aliases", "flagURL"}.
                The key becomes the delegate ID; order is preserved.
            presence: Initial attendance for everyone.

        Returns:
            The populated directory.
        """
        directory = cls(
            Delegate(
                id=key,
                name=attrs["name"],
                aliases=tuple(attrs.get("aliases", ())),
                presence=presence,
                flag_url=attrs.get("flagURL"),
                order=position,
            )
            for position, (key, attrs) in enumerate(preset.items())
        )
        logger.info("delegate_directory_loaded", delegate_count=len(directory))
        return directory

    def __len__(self) -> int:
        return len(self._delegates)

    # =========================================================================
    # DelegateDirectoryPort
    # =========================================================================

    def find_by_name(self, name: str) -> Delegate | None:
        for delegate in self._delegates:
            if delegate.name_equals(name):
                return delegate
        return None

    def find_by_id(self, delegate_id: str) -> Delegate | None:
        for delegate in self._delegates:
            if delegate.id == delegate_id:
                return delegate
        return None

    def is_present(self, delegate: Delegate) -> bool:
        current = self.find_by_id(delegate.id)
        return current is not None and current.is_present()

    def delegates(self) -> Sequence[Delegate]:
        return tuple(self._delegates)

    # =========================================================================
    # Roster management
    # =========================================================================

    def add(self, delegate: Delegate) -> None:
        """Append a delegate to the roster.

        Raises:
            ValueError: If the ID is already on the roster.
        """
        if self.find_by_id(delegate.id) is not None:
            raise ValueError(f"Delegate {delegate.id} is already on the roster")
        self._delegates.append(delegate)

    def remove(self, delegate_id: str) -> None:
        """Remove a delegate from the roster.

        Raises:
            KeyError: If the ID is not on the roster.
        """
        index = self._index_of(delegate_id)
        del self._delegates[index]

    def set_presence(self, delegate_id: str, presence: DelegatePresence) -> Delegate:
        """Record an attendance change.

        Returns:
            The updated delegate.

        Raises:
            KeyError: If the ID is not on the roster.
        """
        index = self._index_of(delegate_id)
        updated = self._delegates[index].with_presence(DelegatePresence(presence))
        self._delegates[index] = updated
        logger.debug(
            "delegate_presence_changed",
            delegate_id=delegate_id,
            presence=updated.presence.value,
        )
        return updated

    def reset_presence(self) -> None:
        """Mark everyone not present (between sessions)."""
        self._delegates = [
            d.with_presence(DelegatePresence.NOT_PRESENT) for d in self._delegates
        ]

    def present_delegates(self) -> list[Delegate]:
        """Delegates currently present, in roster order."""
        return [d for d in self._delegates if d.is_present()]

    def _index_of(self, delegate_id: str) -> int:
        for index, delegate in enumerate(self._delegates):
            if delegate.id == delegate_id:
                return index
        raise KeyError(delegate_id)
