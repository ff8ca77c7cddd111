"""Motion sort order models.

A sort order is a priority list of entries. Each entry groups one or
more sort kinds into a bucket and says how to break ties inside it:

    (
        SortEntry(kinds=(SortKind.EXT,)),
        SortEntry(
            kinds=(SortKind.MOD, SortKind.RR),
            order=(SortOrderKey(SortOrderProperty.TOTAL_TIME),),
        ),
    )

Extensions go first; then moderated caucuses and round robins
together, longest first; then (implicitly) the order received. Kinds
not listed go after every bucket.

Tie-break keys are descending unless marked ascending, so bigger
motions surface first.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from motionboard.domain.errors.sort import UnsupportedSortPropertyError
from motionboard.domain.models.motion import MotionKind, motion_field_names


class SortKind(StrEnum):
    """Motion kinds for ordering, plus the synthetic extension kind.

    Any motion flagged as an extension sorts as EXT regardless of its
    base kind.
    """

    MOD = "mod"
    UNMOD = "unmod"
    RR = "rr"
    OTHER = "other"
    EXT = "ext"


class SortOrderProperty(StrEnum):
    """Properties that can break ties inside a bucket."""

    TOTAL_TIME = "totalTime"
    SPEAKING_TIME = "speakingTime"
    TOPIC = "topic"
    DELEGATE = "delegate"
    N_SPEAKERS = "nSpeakers"


SORT_KIND_NAMES: dict[SortKind, str] = {
    SortKind.MOD: "Moderated Caucus",
    SortKind.UNMOD: "Unmoderated Caucus",
    SortKind.RR: "Round Robin",
    SortKind.OTHER: "Other",
    SortKind.EXT: "Extension",
}

SORT_PROPERTY_NAMES: dict[SortOrderProperty, str] = {
    SortOrderProperty.TOTAL_TIME: "total time",
    SortOrderProperty.SPEAKING_TIME: "speaking time",
    SortOrderProperty.TOPIC: "topic",
    SortOrderProperty.DELEGATE: "delegate key",
    SortOrderProperty.N_SPEAKERS: "number of speakers",
}

# Stored attributes a property reads
SORT_PROPERTY_REQUIRES: dict[SortOrderProperty, tuple[str, ...]] = {
    SortOrderProperty.TOTAL_TIME: ("total_time",),
    SortOrderProperty.SPEAKING_TIME: ("speaking_time",),
    SortOrderProperty.TOPIC: ("topic",),
    SortOrderProperty.DELEGATE: ("delegate",),
    SortOrderProperty.N_SPEAKERS: ("total_time", "speaking_time"),
}

# Properties a round robin derives from total_speakers instead
_ROUND_ROBIN_DERIVED: frozenset[SortOrderProperty] = frozenset(
    {SortOrderProperty.TOTAL_TIME, SortOrderProperty.N_SPEAKERS}
)

# Base kinds a motion flagged as an extension can have
EXTENSION_BASE_KINDS: tuple[MotionKind, ...] = (MotionKind.MOD, MotionKind.UNMOD)


@dataclass(frozen=True)
class SortOrderKey:
    """One tie-break property and its direction."""

    property: SortOrderProperty
    ascending: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "property", SortOrderProperty(self.property))


@dataclass(frozen=True)
class SortEntry:
    """One priority bucket.

    Attributes:
        kinds: Sort kinds that fall into this bucket.
        order: Tie-break keys, applied in sequence.
    """

    kinds: tuple[SortKind, ...]
    order: tuple[SortOrderKey, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "kinds", tuple(SortKind(k) for k in self.kinds))
        object.__setattr__(self, "order", tuple(self.order))


SortOrder: TypeAlias = tuple[SortEntry, ...]

DEFAULT_SORT_PRIORITY: SortOrder = (
    SortEntry(kinds=(SortKind.EXT,)),
    SortEntry(
        kinds=(SortKind.RR,),
        order=(SortOrderKey(SortOrderProperty.SPEAKING_TIME),),
    ),
    SortEntry(
        kinds=(SortKind.UNMOD,),
        order=(SortOrderKey(SortOrderProperty.TOTAL_TIME),),
    ),
    SortEntry(
        kinds=(SortKind.MOD,),
        order=(
            SortOrderKey(SortOrderProperty.N_SPEAKERS),
            SortOrderKey(SortOrderProperty.TOTAL_TIME),
        ),
    ),
)


def motion_kind_supports(kind: MotionKind, prop: SortOrderProperty) -> bool:
    """Whether every motion of this kind can provide the property."""
    if kind is MotionKind.RR and prop in _ROUND_ROBIN_DERIVED:
        return True
    available = motion_field_names(kind)
    return all(attr in available for attr in SORT_PROPERTY_REQUIRES[prop])


def sort_kind_supports(kind: SortKind, prop: SortOrderProperty) -> bool:
    """Whether every motion sorting as this kind can provide the property.

    An extension may be a moderated or an unmoderated caucus, so EXT
    only supports what both provide.
    """
    if kind is SortKind.EXT:
        return all(motion_kind_supports(k, prop) for k in EXTENSION_BASE_KINDS)
    return motion_kind_supports(MotionKind(kind.value), prop)


def validate_sort_order(order: SortOrder) -> None:
    """Check every tie-break key against the kinds of its bucket.

    Raises:
        UnsupportedSortPropertyError: On the first entry asking a kind
            for a property it cannot provide.
    """
    for entry in order:
        for key in entry.order:
            for kind in entry.kinds:
                if not sort_kind_supports(kind, key.property):
                    raise UnsupportedSortPropertyError(key.property.value, kind.value)


def describe_sort_order(order: SortOrder) -> list[str]:
    """Human-readable summary of a sort order, one line per bucket."""
    lines = []
    for position, entry in enumerate(order, start=1):
        kinds = ", ".join(SORT_KIND_NAMES[k] for k in entry.kinds)
        if entry.order:
            keys = ", then ".join(
                f"{SORT_PROPERTY_NAMES[key.property]} "
                f"({'ascending' if key.ascending else 'descending'})"
                for key in entry.order
            )
            lines.append(f"{position}. {kinds}: by {keys}")
        else:
            lines.append(f"{position}. {kinds}")
    return lines
