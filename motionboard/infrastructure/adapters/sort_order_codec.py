"""Sort order persistence codec.

The sort order is user-editable and stored by the settings layer in
this literal shape, which must round-trip unchanged:

    [
        {"kind": ["ext"], "order": []},
        {"kind": ["rr"], "order": [{"property": "speakingTime", "ascending": false}]}
    ]

Pydantic validates the shape on the way in; a single kind string
("kind": "unmod", as older settings stored it) is accepted and
widened to a list.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from motionboard.domain.errors.sort import InvalidSortOrderError
from motionboard.domain.models.sort_order import (
    SortEntry,
    SortKind,
    SortOrder,
    SortOrderKey,
    SortOrderProperty,
    validate_sort_order,
)


class SortOrderKeyRecord(BaseModel):
    """Stored tie-break key."""

    model_config = ConfigDict(extra="forbid")

    property: SortOrderProperty = Field(..., description="Tie-break property")
    ascending: bool = Field(default=False, description="Ascending instead of descending")


class SortEntryRecord(BaseModel):
    """Stored priority bucket."""

    model_config = ConfigDict(extra="forbid")

    kind: list[SortKind] = Field(..., min_length=1, description="Kinds in this bucket")
    order: list[SortOrderKeyRecord] = Field(default_factory=list)

    @field_validator("kind", mode="before")
    @classmethod
    def _widen_single_kind(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value


_SORT_ORDER_ADAPTER: TypeAdapter[list[SortEntryRecord]] = TypeAdapter(list[SortEntryRecord])


def _to_domain(records: list[SortEntryRecord]) -> SortOrder:
    return tuple(
        SortEntry(
            kinds=tuple(record.kind),
            order=tuple(
                SortOrderKey(key.property, key.ascending) for key in record.order
            ),
        )
        for record in records
    )


def load_sort_order(data: str | bytes | list[Any]) -> SortOrder:
    """Decode a stored sort order.

    Args:
        data: JSON text or already-parsed JSON data.

    Returns:
        The sort order, checked against kind/property compatibility.

    Raises:
        InvalidSortOrderError: If the data does not have the stored shape.
        UnsupportedSortPropertyError: If an entry sorts a kind by a
            property it cannot provide.
    """
    try:
        if isinstance(data, (str, bytes)):
            records = _SORT_ORDER_ADAPTER.validate_json(data)
        else:
            records = _SORT_ORDER_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise InvalidSortOrderError(
            f"{e.error_count()} problem(s): {e.errors()[0]['msg']}"
        ) from e

    order = _to_domain(records)
    validate_sort_order(order)
    return order


def _to_records(order: SortOrder) -> list[SortEntryRecord]:
    return [
        SortEntryRecord(
            kind=list(entry.kinds),
            order=[
                SortOrderKeyRecord(property=key.property, ascending=key.ascending)
                for key in entry.order
            ],
        )
        for entry in order
    ]


def dump_sort_order(order: SortOrder) -> list[dict[str, Any]]:
    """Encode a sort order into its stored shape."""
    return [record.model_dump(mode="json") for record in _to_records(order)]


def dumps_sort_order(order: SortOrder) -> str:
    """Encode a sort order as JSON text."""
    return _SORT_ORDER_ADAPTER.dump_json(_to_records(order)).decode()
