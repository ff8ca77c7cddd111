"""Delegate domain model.

A delegate is one participant on the assembly roster. The roster
itself (the delegate directory) is owned by the session layer; the
motion engines only read snapshots of it.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field, replace
from enum import StrEnum


class DelegatePresence(StrEnum):
    """Attendance status from roll call."""

    NOT_PRESENT = "NP"
    PRESENT = "P"
    PRESENT_AND_VOTING = "PV"


def fold_name(name: str) -> str:
    """Fold a name for case- and accent-insensitive comparison.

    "Côte d'Ivoire", "COTE D'IVOIRE" and "cote d'ivoire" fold equal.
    """
    decomposed = unicodedata.normalize("NFKD", name.strip())
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


@dataclass(frozen=True)
class Delegate:
    """A roster entry.

    Attributes:
        id: Unique identifier (motions reference delegates by this).
        name: Canonical display name.
        aliases: Other accepted names, used for lookup only.
        presence: Current attendance status.
        flag_url: Optional flag image reference (resolved elsewhere).
        order: Position on the roster.
    """

    id: str
    name: str
    aliases: tuple[str, ...] = ()
    presence: DelegatePresence = DelegatePresence.NOT_PRESENT
    flag_url: str | None = None
    order: int = 0
    _folded: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("id cannot be empty")
        if not self.name.strip():
            raise ValueError("name cannot be empty")
        object.__setattr__(self, "aliases", tuple(self.aliases))
        object.__setattr__(
            self,
            "_folded",
            frozenset(fold_name(n) for n in (self.name, *self.aliases)),
        )

    def is_present(self) -> bool:
        """Whether the delegate is present (voting or not)."""
        return self.presence != DelegatePresence.NOT_PRESENT

    def name_equals(self, name: str) -> bool:
        """Whether this delegate may be referred to by the given name.

        Matches the canonical name or any alias, ignoring case and accents.
        """
        return fold_name(name) in self._folded

    def with_presence(self, presence: DelegatePresence) -> Delegate:
        """Copy of this delegate with a new attendance status."""
        return replace(self, presence=presence)
