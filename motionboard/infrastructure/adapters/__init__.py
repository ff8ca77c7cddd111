"""Adapters implementing domain ports and persisted-shape codecs."""

from motionboard.infrastructure.adapters.delegate_preset_loader import (
    directory_from_preset_file,
    load_delegate_preset,
    parse_delegate_preset,
)
from motionboard.infrastructure.adapters.in_memory_delegate_directory import (
    InMemoryDelegateDirectory,
)
from motionboard.infrastructure.adapters.sort_order_codec import (
    dump_sort_order,
    dumps_sort_order,
    load_sort_order,
)

__all__ = [
    "InMemoryDelegateDirectory",
    "directory_from_preset_file",
    "load_delegate_preset",
    "parse_delegate_preset",
    "dump_sort_order",
    "dumps_sort_order",
    "load_sort_order",
]
