"""Delegate roster presets.

A preset is a JSON object mapping delegate keys to their attributes,
e.g. a United Nations roster:

    {
        "us": {"name": "United States", "aliases": ["USA", "US"], "flagURL": "us"},
        "fr": {"name": "France", "aliases": []}
    }

Presets are validated with pydantic before a roster is built from them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from motionboard.domain.errors.delegate import InvalidDelegatePresetError
from motionboard.domain.models.delegate import DelegatePresence
from motionboard.infrastructure.adapters.in_memory_delegate_directory import (
    InMemoryDelegateDirectory,
)

logger = structlog.get_logger()


class DelegateAttrsRecord(BaseModel):
    """Attributes of one delegate in a preset."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Official name of the delegation")
    aliases: list[str] = Field(
        default_factory=list, description="Other names accepted on motion forms"
    )
    flag_url: str | None = Field(default=None, alias="flagURL")


_PRESET_ADAPTER: TypeAdapter[dict[str, DelegateAttrsRecord]] = TypeAdapter(
    dict[str, DelegateAttrsRecord]
)


def parse_delegate_preset(
    data: str | bytes | dict[str, Any], source: str = "<memory>"
) -> dict[str, dict[str, Any]]:
    """Validate preset data.

    Args:
        data: JSON text or parsed JSON object.
        source: Name used in error messages.

    Returns:
        Mapping of delegate key to {"name", "aliases", "flagURL"}.

    Raises:
        InvalidDelegatePresetError: If the data is not a valid preset.
    """
    try:
        if isinstance(data, (str, bytes)):
            records = _PRESET_ADAPTER.validate_json(data)
        else:
            records = _PRESET_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise InvalidDelegatePresetError(source, e.errors()[0]["msg"]) from e

    return {key: record.model_dump(by_alias=True) for key, record in records.items()}


def load_delegate_preset(path: Path | str) -> dict[str, dict[str, Any]]:
    """Read and validate a preset file.

    Raises:
        InvalidDelegatePresetError: If the file is missing or invalid.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidDelegatePresetError(str(path), str(e)) from e

    preset = parse_delegate_preset(text, source=str(path))
    logger.info("delegate_preset_loaded", path=str(path), delegate_count=len(preset))
    return preset


def directory_from_preset_file(
    path: Path | str,
    presence: DelegatePresence = DelegatePresence.NOT_PRESENT,
) -> InMemoryDelegateDirectory:
    """Build a session roster from a preset file."""
    return InMemoryDelegateDirectory.from_preset(load_delegate_preset(path), presence)
