"""Adapters — package-manager backends and the process runner beneath them.

Public re-exports for convenient access.
"""

from adaptive.adapters.base import Backend
from adaptive.adapters.mock import MockBackend, MockRunner
from adaptive.adapters.registry import BackendRegistry
from adaptive.adapters.shell.command import CommandResult, CommandRunner

__all__ = [
    "Backend",
    "BackendRegistry",
    "CommandResult",
    "CommandRunner",
    "MockBackend",
    "MockRunner",
]
