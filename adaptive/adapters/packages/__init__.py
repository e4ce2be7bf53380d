"""
Package-manager backends, one class per manager.

``default_registry`` wires every known manager to a shared
CommandRunner; the per-OS priority chains pick from it by id.
"""

from __future__ import annotations

from adaptive.adapters.packages.alpine import ApkBackend
from adaptive.adapters.packages.arch import PacmanBackend, ParuBackend, YayBackend
from adaptive.adapters.packages.base import PackageManagerBackend
from adaptive.adapters.packages.debian import AptBackend, NalaBackend
from adaptive.adapters.packages.fedora import DnfBackend, YumBackend
from adaptive.adapters.packages.macos import BrewBackend, FinkBackend, PortBackend
from adaptive.adapters.packages.universal import CargoBackend, NixBackend, SnapBackend
from adaptive.adapters.packages.windows import ChocoBackend, ScoopBackend, WingetBackend
from adaptive.adapters.registry import BackendRegistry
from adaptive.adapters.shell.command import CommandRunner

BACKEND_TYPES: tuple[type[PackageManagerBackend], ...] = (
    NalaBackend,
    AptBackend,
    SnapBackend,
    NixBackend,
    CargoBackend,
    ApkBackend,
    DnfBackend,
    YumBackend,
    PacmanBackend,
    YayBackend,
    ParuBackend,
    BrewBackend,
    PortBackend,
    FinkBackend,
    WingetBackend,
    ChocoBackend,
    ScoopBackend,
)


def default_registry(runner: CommandRunner | None = None) -> BackendRegistry:
    """Build a registry holding one instance of every known backend."""
    runner = runner or CommandRunner()
    return BackendRegistry(backend_type(runner) for backend_type in BACKEND_TYPES)


__all__ = [
    "BACKEND_TYPES",
    "ApkBackend",
    "AptBackend",
    "BrewBackend",
    "CargoBackend",
    "ChocoBackend",
    "DnfBackend",
    "FinkBackend",
    "NalaBackend",
    "NixBackend",
    "PackageManagerBackend",
    "PacmanBackend",
    "ParuBackend",
    "PortBackend",
    "ScoopBackend",
    "SnapBackend",
    "WingetBackend",
    "YayBackend",
    "YumBackend",
    "default_registry",
]
