"""Motion Board Service - the points & motions board of one session.

Collects motions raised from the floor, keeps them in received order,
and presents them by priority so the chair can pick the next one.

Key responsibilities:
1. Validate submissions against the delegate roster (schema engine)
2. Keep the pending motions, allowing edits and withdrawals
3. Order them by the configured sort order (ordering engine)
4. Record the selected motion and per-delegate motion statistics

Storage and rendering belong to the callers: the board is in-memory
and is handed the roster and the sort order explicitly.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any
from uuid import uuid4

from motionboard.application.services.base import LoggingMixin
from motionboard.domain.errors.motion import DuplicateMotionError, MotionNotFoundError
from motionboard.domain.models.delegate import Delegate
from motionboard.domain.models.delegate_stats import DelegateMotionStats
from motionboard.domain.models.motion import Motion, MotionKind
from motionboard.domain.models.motion_validation import MotionValidation
from motionboard.domain.models.sort_order import DEFAULT_SORT_PRIORITY, SortOrder
from motionboard.domain.ports.delegate_directory import DelegateDirectoryPort
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


class MotionBoardService(LoggingMixin):
    """Manages the pending motions of an assembly session."""

    def __init__(
        self,
        directory: DelegateDirectoryPort,
        sort_order: SortOrder = DEFAULT_SORT_PRIORITY,
        *,
        enabled_kinds: Collection[MotionKind] | None = None,
        allow_extensions: bool = True,
    ) -> None:
        """Initialize the board.

        Args:
            directory: The session roster.
            sort_order: Priority used for ordering and selection.
            enabled_kinds: Motion kinds accepted from the floor (all if None).
            allow_extensions: Whether caucuses may be flagged as extensions.

        Raises:
            UnsupportedSortPropertyError: If the sort order is inconsistent.
        """
        compare_motions(sort_order)

        self._directory = directory
        self._sort_order = sort_order
        self._enabled_kinds = (
            frozenset(MotionKind(k) for k in enabled_kinds)
            if enabled_kinds is not None
            else None
        )
        self._allow_extensions = allow_extensions

        self._motions: list[Motion] = []
        self._selected: Motion | None = None
        self._stats: dict[str, DelegateMotionStats] = {}

        self._init_logger(component="motions")

    # =========================================================================
    # Board Operations
    # =========================================================================

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    @property
    def selected(self) -> Motion | None:
        """The motion currently on the floor, if any."""
        return self._selected

    def _validate(self, raw: Mapping[str, Any]) -> MotionValidation:
        return validate_motion(
            raw,
            self._directory,
            enabled_kinds=self._enabled_kinds,
            allow_extensions=self._allow_extensions,
        )

    def _index_of(self, motion_id: str) -> int:
        for index, motion in enumerate(self._motions):
            if motion.id == motion_id:
                return index
        raise MotionNotFoundError(motion_id)

    def submit(self, raw: Mapping[str, Any]) -> MotionValidation:
        """Validate form input and add the motion to the board.

        A missing or blank id is replaced by a fresh one.

        Args:
            raw: Form input (see RawMotionInput).

        Returns:
            The validation outcome; the board is unchanged on failure.

        Raises:
            DuplicateMotionError: If the id is already on the board.
        """
        data = dict(raw)
        if not str(data.get("id") or "").strip():
            data["id"] = uuid4().hex

        log = self._log_operation("submit", motion_id=data["id"])
        outcome = self._validate(data)
        if not outcome.ok:
            assert outcome.issue is not None
            log.info(
                "motion_rejected",
                code=outcome.issue.code.value,
                field=".".join(outcome.issue.field),
            )
            return outcome

        motion = outcome.unwrap()
        if any(m.id == motion.id for m in self._motions):
            raise DuplicateMotionError(motion.id)

        self._motions.append(motion)
        self._record(motion.delegate, proposed=True)
        log.info(
            "motion_submitted",
            kind=motion.kind.value,
            delegate_id=motion.delegate,
            pending=len(self._motions),
        )
        return outcome

    def edit(self, motion_id: str, raw: Mapping[str, Any]) -> MotionValidation:
        """Replace a pending motion with re-validated form input.

        The motion keeps its id and its place in received order.

        Raises:
            MotionNotFoundError: If the motion is not on the board.
        """
        index = self._index_of(motion_id)
        log = self._log_operation("edit", motion_id=motion_id)

        outcome = self._validate({**raw, "id": motion_id})
        if not outcome.ok:
            assert outcome.issue is not None
            log.info(
                "motion_edit_rejected",
                code=outcome.issue.code.value,
                field=".".join(outcome.issue.field),
            )
            return outcome

        self._motions[index] = outcome.unwrap()
        if self._selected is not None and self._selected.id == motion_id:
            self._selected = self._motions[index]
        log.info("motion_edited", kind=self._motions[index].kind.value)
        return outcome

    def edit_form(self, motion_id: str) -> RawMotionInput:
        """Form input for editing a pending motion.

        Raises:
            MotionNotFoundError: If the motion is not on the board.
        """
        return inputify(self._motions[self._index_of(motion_id)], self._directory)

    def withdraw(self, motion_id: str) -> Motion:
        """Remove a motion from the board.

        Raises:
            MotionNotFoundError: If the motion is not on the board.
        """
        motion = self._motions.pop(self._index_of(motion_id))
        self._log_operation("withdraw", motion_id=motion_id).info(
            "motion_withdrawn", pending=len(self._motions)
        )
        return motion

    def motions(self) -> list[Motion]:
        """Pending motions in received order."""
        return list(self._motions)

    def ordered(self) -> list[Motion]:
        """Pending motions by priority (ties keep received order)."""
        return sort_motions(self._motions, self._sort_order)

    def next_motion(self) -> Motion | None:
        """The highest-priority pending motion, or None."""
        return next_motion(self._motions, self._sort_order)

    def select(self, motion_id: str | None = None) -> Motion:
        """Put a motion on the floor.

        Counts as an acceptance for the proposing delegate unless the
        motion is already on the floor.

        Args:
            motion_id: Motion to select; the highest-priority one if None.

        Returns:
            The selected motion.

        Raises:
            MotionNotFoundError: If the motion is not on the board, or
                no id was given and the board is empty.
        """
        if motion_id is None:
            motion = self.next_motion()
            if motion is None:
                raise MotionNotFoundError("<next>")
        else:
            motion = self._motions[self._index_of(motion_id)]

        if self._selected is None or self._selected.id != motion.id:
            self._record(motion.delegate, accepted=True)
        self._selected = motion
        self._log_operation("select", motion_id=motion.id).info(
            "motion_selected", kind=motion.kind.value, delegate_id=motion.delegate
        )
        return motion

    def clear_selection(self) -> None:
        self._selected = None

    def update_sort_order(self, sort_order: SortOrder) -> None:
        """Apply a sort order changed in settings.

        Raises:
            UnsupportedSortPropertyError: If the sort order is inconsistent.
        """
        compare_motions(sort_order)
        self._sort_order = sort_order
        self._log_operation("update_sort_order").info(
            "sort_order_updated", buckets=len(sort_order)
        )

    # =========================================================================
    # Delegates & Statistics
    # =========================================================================

    def _record(self, delegate_id: str, proposed: bool = False, accepted: bool = False) -> None:
        stats = self._stats.get(delegate_id, DelegateMotionStats())
        if proposed:
            stats = stats.with_proposed()
        if accepted:
            stats = stats.with_accepted()
        self._stats[delegate_id] = stats

    def stats_for(self, delegate_id: str) -> DelegateMotionStats:
        """Motion statistics of one delegate (zeros if none yet)."""
        return self._stats.get(delegate_id, DelegateMotionStats())

    def present_delegates(self) -> list[Delegate]:
        """Delegates who may currently raise motions, in roster order.

        Recomputed from the roster on every call; the session layer
        calls this again after attendance changes.
        """
        return [d for d in self._directory.delegates() if self._directory.is_present(d)]

    def reset(self) -> None:
        """Clear motions, selection and statistics (between sessions)."""
        self._motions.clear()
        self._selected = None
        self._stats.clear()
        self._log_operation("reset").info("motion_board_reset")
