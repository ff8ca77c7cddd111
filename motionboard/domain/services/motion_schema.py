"""Motion schema engine.

Turns raw, string-typed form input into a validated Motion, and a
Motion back into form input for edit flows.

Validation is fail-fast and deterministic: the first problem wins,
checked in this order:

    id -> delegate -> kind -> kind fields (table order) -> divisibility

Failures come back as a MotionValidation carrying one ValidationIssue
(field path + human message). Nothing is raised across this API for
bad input, and no partial motion is ever returned.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any, TypedDict

import structlog

from motionboard.domain.models.motion import (
    MOTION_DEFS,
    SPEAKING_TIME_FIELD,
    FieldDefinition,
    InputKind,
    ModeratedCaucus,
    Motion,
    MotionKind,
)
from motionboard.domain.models.motion_validation import (
    MotionValidation,
    ValidationErrorCode,
)
from motionboard.domain.ports.delegate_directory import DelegateDirectoryPort
from motionboard.domain.services.time_format import (
    MAX_SAFE_INTEGER,
    parse_time,
    parse_whole_number,
    stringify_time,
)

logger = structlog.get_logger()

_TRUE_STRINGS = frozenset({"true", "on", "1", "yes"})


class RawMotionInput(TypedDict, total=False):
    """Form input for a motion. Keys of other kinds may be present."""

    id: str
    kind: str
    delegate: str
    totalTime: str
    speakingTime: str
    topic: str
    isExtension: bool | str
    totalSpeakers: str


class _Rejected(Exception):
    """Carries the first validation failure out of the field helpers."""

    def __init__(self, code: ValidationErrorCode, field: str, message: str) -> None:
        super().__init__(message)
        self.outcome = MotionValidation.failure(code, field, message)


def _required_string(raw: Mapping[str, Any], key: str, label: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str) or not value.strip():
        raise _Rejected(
            ValidationErrorCode.REQUIRED_FIELD, key, f"{label} is a required field"
        )
    return value.strip()


def _time_field(raw: Mapping[str, Any], field_def: FieldDefinition) -> int:
    value = raw.get(field_def.key)
    if isinstance(value, int) and not isinstance(value, bool):
        seconds: int | None = value
    else:
        text = _required_string(raw, field_def.key, field_def.label)
        seconds = parse_time(text)

    if seconds is None or seconds <= 0 or seconds > MAX_SAFE_INTEGER:
        raise _Rejected(
            ValidationErrorCode.INVALID_TIME_FORMAT,
            field_def.key,
            f"{field_def.label} is not a valid time string (mm:ss)",
        )
    return seconds


def _count_field(raw: Mapping[str, Any], field_def: FieldDefinition) -> int:
    value = raw.get(field_def.key)
    if isinstance(value, int) and not isinstance(value, bool):
        count: int | None = value
    else:
        text = _required_string(raw, field_def.key, field_def.label)
        count = parse_whole_number(text)

    if count is None or count <= 0 or count > MAX_SAFE_INTEGER:
        raise _Rejected(
            ValidationErrorCode.INVALID_NUMBER,
            field_def.key,
            f"{field_def.label} must be a positive whole number",
        )
    return count


def _flag_field(raw: Mapping[str, Any], field_def: FieldDefinition) -> bool:
    value = raw.get(field_def.key, False)
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _read_field(
    raw: Mapping[str, Any], field_def: FieldDefinition, allow_extensions: bool
) -> Any:
    match field_def.input_kind:
        case InputKind.TOTAL_TIME | InputKind.SPEAKING_TIME:
            return _time_field(raw, field_def)
        case InputKind.TOPIC:
            return _required_string(raw, field_def.key, field_def.label)
        case InputKind.EXTENSION:
            return _flag_field(raw, field_def) if allow_extensions else False
        case InputKind.COUNT:
            return _count_field(raw, field_def)
    raise AssertionError(f"unhandled input kind {field_def.input_kind!r}")


def _validate(
    raw: Mapping[str, Any],
    directory: DelegateDirectoryPort,
    enabled_kinds: Collection[MotionKind] | None,
    allow_extensions: bool,
) -> Motion:
    motion_id = _required_string(raw, "id", "ID")

    name = _required_string(raw, "delegate", "Delegate name")
    delegate = directory.find_by_name(name)
    if delegate is None:
        raise _Rejected(
            ValidationErrorCode.UNKNOWN_DELEGATE, "delegate", f"{name} is not a delegate"
        )
    if not directory.is_present(delegate):
        raise _Rejected(
            ValidationErrorCode.DELEGATE_NOT_PRESENT,
            "delegate",
            f"{delegate.name} is not a present delegate",
        )

    raw_kind = raw.get("kind")
    try:
        kind = MotionKind(raw_kind)
    except ValueError:
        raise _Rejected(
            ValidationErrorCode.INVALID_KIND,
            "kind",
            f"{raw_kind!r} is not a valid motion kind",
        ) from None
    definition = MOTION_DEFS[kind]
    if enabled_kinds is not None and kind not in enabled_kinds:
        raise _Rejected(
            ValidationErrorCode.INVALID_KIND,
            "kind",
            f"{definition.label} motions are not enabled",
        )

    values = {
        field_def.attribute: _read_field(raw, field_def, allow_extensions)
        for field_def in definition.fields
    }
    motion = definition.model(id=motion_id, delegate=delegate.id, **values)

    if isinstance(motion, ModeratedCaucus) and motion.total_time % motion.speaking_time:
        raise _Rejected(
            ValidationErrorCode.INDIVISIBLE_SPEAKING_TIME,
            SPEAKING_TIME_FIELD.key,
            "Total time cannot be evenly divided among speakers",
        )
    return motion


def validate_motion(
    raw: Mapping[str, Any],
    directory: DelegateDirectoryPort,
    *,
    enabled_kinds: Collection[MotionKind] | None = None,
    allow_extensions: bool = True,
) -> MotionValidation:
    """Validate form input into a Motion.

    Args:
        raw: Form input (see RawMotionInput). Keys that do not belong
            to the submitted kind are ignored.
        directory: Snapshot of the delegate roster.
        enabled_kinds: If given, kinds outside it are rejected as invalid.
        allow_extensions: If False, isExtension is not read and every
            caucus is a regular one.

    Returns:
        MotionValidation with either the motion or the first issue found.
    """
    try:
        motion = _validate(raw, directory, enabled_kinds, allow_extensions)
    except _Rejected as rejected:
        issue = rejected.outcome.issue
        assert issue is not None
        logger.debug(
            "motion_validation_failed",
            code=issue.code.value,
            field=".".join(issue.field),
        )
        return rejected.outcome
    return MotionValidation.success(motion)


def inputify(
    motion: Motion, directory: DelegateDirectoryPort | None = None
) -> RawMotionInput:
    """Map a motion back into form input.

    Times become colon strings (ceil-rounded), counts become decimal
    strings and the delegate becomes its canonical name ("" when no
    directory is given or the delegate is not on it).

    Args:
        motion: The motion to edit.
        directory: Roster used to resolve the delegate name.

    Returns:
        Form input that validates back to an equal motion.
    """
    delegate = directory.find_by_id(motion.delegate) if directory is not None else None
    result: dict[str, Any] = {
        "id": motion.id,
        "kind": motion.kind.value,
        "delegate": delegate.name if delegate is not None else "",
    }
    for field_def in MOTION_DEFS[motion.kind].fields:
        value = getattr(motion, field_def.attribute)
        match field_def.input_kind:
            case InputKind.TOTAL_TIME | InputKind.SPEAKING_TIME:
                result[field_def.key] = stringify_time(value) or ""
            case InputKind.EXTENSION:
                result[field_def.key] = bool(value)
            case _:
                result[field_def.key] = str(value)
    return RawMotionInput(**result)  # type: ignore[typeddict-item]
