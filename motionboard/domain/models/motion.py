"""Motion domain models.

A motion is a procedural request raised by a delegate. Each kind
carries exactly its own fields:

    mod    total_time, speaking_time, topic, is_extension
    unmod  total_time, is_extension
    rr     speaking_time, topic, total_speakers
    other  total_time, topic

Times are whole seconds. MOTION_DEFS describes the same table for
form handling (field key, input kind, label) and must stay in
lock-step with the dataclasses below; tests/unit/domain/test_motion.py
checks this.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Any, ClassVar, TypeAlias


class MotionKind(StrEnum):
    """Kinds of motion a delegate can raise."""

    MOD = "mod"  # Moderated caucus
    UNMOD = "unmod"  # Unmoderated caucus
    RR = "rr"  # Round robin
    OTHER = "other"


class InputKind(StrEnum):
    """How a motion field is entered on the form."""

    TOTAL_TIME = "totalTime"
    SPEAKING_TIME = "speakingTime"
    TOPIC = "topic"
    EXTENSION = "extension"
    COUNT = "count"


@dataclass(frozen=True)
class ModeratedCaucus:
    """Moderated caucus: total time divided into equal speaking turns."""

    kind: ClassVar[MotionKind] = MotionKind.MOD

    id: str
    delegate: str
    total_time: int
    speaking_time: int
    topic: str
    is_extension: bool = False


@dataclass(frozen=True)
class UnmoderatedCaucus:
    """Unmoderated caucus: unstructured debate for a total time."""

    kind: ClassVar[MotionKind] = MotionKind.UNMOD

    id: str
    delegate: str
    total_time: int
    is_extension: bool = False


@dataclass(frozen=True)
class RoundRobin:
    """Round robin: a fixed number of speakers with a fixed speaking time."""

    kind: ClassVar[MotionKind] = MotionKind.RR

    id: str
    delegate: str
    speaking_time: int
    topic: str
    total_speakers: int


@dataclass(frozen=True)
class OtherMotion:
    kind: ClassVar[MotionKind] = MotionKind.OTHER

    id: str
    delegate: str
    total_time: int
    topic: str


Motion: TypeAlias = ModeratedCaucus | UnmoderatedCaucus | RoundRobin | OtherMotion

MOTION_BASE_FIELDS: tuple[str, ...] = ("id", "delegate")


@dataclass(frozen=True)
class FieldDefinition:
    """One kind-specific motion field.

    Attributes:
        key: Form/storage key (camelCase, e.g. "totalTime").
        attribute: Dataclass attribute (e.g. "total_time").
        input_kind: How the field is entered.
        label: Human label used in validation messages.
    """

    key: str
    attribute: str
    input_kind: InputKind
    label: str


@dataclass(frozen=True)
class MotionDefinition:
    """Label and ordered field table of one motion kind."""

    kind: MotionKind
    label: str
    model: type
    fields: tuple[FieldDefinition, ...]

    def field(self, key: str) -> FieldDefinition | None:
        for definition in self.fields:
            if definition.key == key:
                return definition
        return None


TOTAL_TIME_FIELD = FieldDefinition("totalTime", "total_time", InputKind.TOTAL_TIME, "Total time")
SPEAKING_TIME_FIELD = FieldDefinition(
    "speakingTime", "speaking_time", InputKind.SPEAKING_TIME, "Speaking time"
)
TOPIC_FIELD = FieldDefinition("topic", "topic", InputKind.TOPIC, "Topic")
EXTENSION_FIELD = FieldDefinition("isExtension", "is_extension", InputKind.EXTENSION, "Extension")
TOTAL_SPEAKERS_FIELD = FieldDefinition(
    "totalSpeakers", "total_speakers", InputKind.COUNT, "Total speakers"
)

MOTION_DEFS: dict[MotionKind, MotionDefinition] = {
    MotionKind.MOD: MotionDefinition(
        kind=MotionKind.MOD,
        label="Moderated Caucus",
        model=ModeratedCaucus,
        fields=(TOTAL_TIME_FIELD, SPEAKING_TIME_FIELD, TOPIC_FIELD, EXTENSION_FIELD),
    ),
    MotionKind.UNMOD: MotionDefinition(
        kind=MotionKind.UNMOD,
        label="Unmoderated Caucus",
        model=UnmoderatedCaucus,
        fields=(TOTAL_TIME_FIELD, EXTENSION_FIELD),
    ),
    MotionKind.RR: MotionDefinition(
        kind=MotionKind.RR,
        label="Round Robin",
        model=RoundRobin,
        fields=(SPEAKING_TIME_FIELD, TOPIC_FIELD, TOTAL_SPEAKERS_FIELD),
    ),
    MotionKind.OTHER: MotionDefinition(
        kind=MotionKind.OTHER,
        label="Other",
        model=OtherMotion,
        fields=(TOTAL_TIME_FIELD, TOPIC_FIELD),
    ),
}


def motion_definition(kind: MotionKind | str) -> MotionDefinition:
    """Get the definition for a motion kind.

    Raises:
        ValueError: If kind is not a motion kind.
    """
    return MOTION_DEFS[MotionKind(kind)]


def motion_field_names(kind: MotionKind | str) -> frozenset[str]:
    """Attribute names a motion of this kind carries, base fields included."""
    definition = motion_definition(kind)
    return frozenset(MOTION_BASE_FIELDS) | {f.attribute for f in definition.fields}


def is_extension(motion: Motion) -> bool:
    """Whether the motion continues a previous one (only caucuses can)."""
    return bool(getattr(motion, "is_extension", False))


def n_speakers(motion: Motion) -> float | None:
    """Number of speakers, derived; never stored except on round robins.

    Returns:
        total_speakers for a round robin, total_time / speaking_time for
        a moderated caucus, None for kinds without speakers.
    """
    if isinstance(motion, RoundRobin):
        return motion.total_speakers
    if isinstance(motion, ModeratedCaucus):
        return motion.total_time / motion.speaking_time
    return None


def total_time(motion: Motion) -> int:
    """Total duration of the motion in seconds.

    A round robin has no stored total time; it lasts
    total_speakers * speaking_time.
    """
    if isinstance(motion, RoundRobin):
        return motion.total_speakers * motion.speaking_time
    return motion.total_time


def to_record(motion: Motion) -> dict[str, Any]:
    """Serialize a motion into its camelCase storage shape."""
    definition = MOTION_DEFS[motion.kind]
    record: dict[str, Any] = {
        "id": motion.id,
        "kind": motion.kind.value,
        "delegate": motion.delegate,
    }
    for field_def in definition.fields:
        record[field_def.key] = getattr(motion, field_def.attribute)
    return record


def from_record(record: dict[str, Any]) -> Motion:
    """Rebuild a motion from its storage shape.

    Unlike validate_motion this trusts the record (it was produced by
    to_record); keys of other kinds are ignored.

    Raises:
        ValueError: If the kind is unknown.
        KeyError: If a field of the kind is missing (isExtension defaults to False).
    """
    definition = motion_definition(record["kind"])
    values: dict[str, Any] = {"id": record["id"], "delegate": record["delegate"]}
    for field_def in definition.fields:
        if field_def.input_kind is InputKind.EXTENSION:
            values[field_def.attribute] = bool(record.get(field_def.key, False))
        else:
            values[field_def.attribute] = record[field_def.key]
    return definition.model(**values)


def dataclass_field_names(model: type) -> frozenset[str]:
    """Instance field names of a motion dataclass (ClassVar kind excluded)."""
    return frozenset(f.name for f in fields(model))
