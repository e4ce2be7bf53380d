"""
Arch-family backends — pacman for the official repos, yay and paru for the AUR.

The AUR helpers elevate on their own and refuse to run as root, so
only pacman is privileged.
"""

from __future__ import annotations

from adaptive.adapters.packages.base import PackageManagerBackend
from adaptive.adapters.shell.command import CommandResult


class _PacmanStyleBackend(PackageManagerBackend):
    def search_command(self, package: str) -> list[str]:
        return [self.executable, "-Si", package]

    def install_command(self, package: str) -> list[str]:
        return [self.executable, "-S", "--noconfirm", package]

    def matches(self, package: str, result: CommandResult) -> bool:
        return result.ok


class PacmanBackend(_PacmanStyleBackend):
    id = "pacman"
    executable = "pacman"
    privileged = True


class YayBackend(_PacmanStyleBackend):
    id = "yay"
    executable = "yay"


class ParuBackend(_PacmanStyleBackend):
    id = "paru"
    executable = "paru"
