"""Motion ordering engine.

compare_motions builds a comparator from a sort order. Motions are
first ordered by the position of the first bucket (SortEntry) whose
kinds contain the motion's sort kind; motions matching no bucket go
last. Inside a bucket, the entry's keys break ties in sequence. If
every key ties, the motions compare equal and the caller's stable
sort keeps their received order.

The engine is pure: the sort order is always passed in, never read
from settings.

Usage:
    ordered = sort_motions(motions, settings.sort_order)
    upcoming = next_motion(motions, settings.sort_order)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key
from typing import Any, TypeAlias

from motionboard.domain.errors.sort import UnsupportedSortPropertyError
from motionboard.domain.models.motion import (
    Motion,
    RoundRobin,
    is_extension,
    n_speakers,
    total_time,
)
from motionboard.domain.models.sort_order import (
    SORT_PROPERTY_REQUIRES,
    SortKind,
    SortOrder,
    SortOrderProperty,
    validate_sort_order,
)

Comparator: TypeAlias = Callable[[Motion, Motion], int]


def compare(a: Any, b: Any, reverse: bool = False) -> int:
    """Three-way comparison by < and >, optionally reversed."""
    result = -1 if a < b else 1 if a > b else 0
    return -result if reverse else result


def get_sort_kind(motion: Motion) -> SortKind:
    """Sort kind of a motion: EXT for any extension, else its own kind."""
    if is_extension(motion):
        return SortKind.EXT
    return SortKind(motion.kind.value)


def get_sort_index(motion: Motion, order: SortOrder) -> int:
    """Position of the motion's bucket, or len(order) if it has none."""
    kind = get_sort_kind(motion)
    for index, entry in enumerate(order):
        if kind in entry.kinds:
            return index
    return len(order)


def _has_attributes(motion: Motion, prop: SortOrderProperty) -> bool:
    return all(hasattr(motion, attr) for attr in SORT_PROPERTY_REQUIRES[prop])


def get_sort_property(motion: Motion, prop: SortOrderProperty) -> int | float | str:
    """Value of a sort property for one motion.

    nSpeakers is derived: total_speakers for a round robin,
    total_time / speaking_time for a moderated caucus. A round robin's
    totalTime is total_speakers * speaking_time.

    Raises:
        UnsupportedSortPropertyError: If the motion's kind cannot
            provide the property.
    """
    if prop is SortOrderProperty.N_SPEAKERS:
        speakers = n_speakers(motion)
        if speakers is not None:
            return speakers
    elif prop is SortOrderProperty.TOTAL_TIME and isinstance(motion, RoundRobin):
        return total_time(motion)
    elif _has_attributes(motion, prop):
        return getattr(motion, SORT_PROPERTY_REQUIRES[prop][0])

    raise UnsupportedSortPropertyError(prop.value, motion.kind.value)


def compare_motions(order: SortOrder) -> Comparator:
    """Create a comparator for motions under the given sort order.

    The order is checked against kind/property compatibility first.

    Args:
        order: The sort order to use.

    Returns:
        A comparator returning -1, 0 or 1.

    Raises:
        UnsupportedSortPropertyError: If the sort order asks a kind for
            a property it cannot provide.
    """
    validate_sort_order(order)

    def comparator(a: Motion, b: Motion) -> int:
        ai = get_sort_index(a, order)
        bi = get_sort_index(b, order)

        k = compare(ai, bi)
        if k:
            return k
        if ai >= len(order):
            return 0

        for key in order[ai].order:
            av = get_sort_property(a, key.property)
            bv = get_sort_property(b, key.property)

            k = compare(av, bv, reverse=not key.ascending)
            if k:
                return k

        return 0

    return comparator


def sort_motions(motions: Iterable[Motion], order: SortOrder) -> list[Motion]:
    """Sort motions by priority. Equal motions keep their input order."""
    return sorted(motions, key=cmp_to_key(compare_motions(order)))


def next_motion(motions: Iterable[Motion], order: SortOrder) -> Motion | None:
    """The highest-priority motion, or None if there are none.

    Among equal motions the earliest received wins.
    """
    comparator = compare_motions(order)
    best: Motion | None = None
    for motion in motions:
        if best is None or comparator(motion, best) < 0:
            best = motion
    return best
