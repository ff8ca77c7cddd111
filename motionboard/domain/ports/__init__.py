"""
Ports (interfaces) for motionboard.

Ports define abstract interfaces that infrastructure adapters implement.
This allows the domain to remain pure and testable without depending
on concrete implementations.
"""

from motionboard.domain.ports.delegate_directory import DelegateDirectoryPort

__all__: list[str] = ["DelegateDirectoryPort"]
