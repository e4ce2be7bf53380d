"""
Fedora/RHEL backends — dnf and yum.
"""

from __future__ import annotations

from adaptive.adapters.packages.base import PackageManagerBackend
from adaptive.adapters.shell.command import CommandResult


class _RpmBackend(PackageManagerBackend):
    privileged = True

    def search_command(self, package: str) -> list[str]:
        return [self.executable, "info", package]

    def install_command(self, package: str) -> list[str]:
        return [self.executable, "install", "-y", package]

    def matches(self, package: str, result: CommandResult) -> bool:
        return result.ok


class DnfBackend(_RpmBackend):
    id = "dnf"
    executable = "dnf"


class YumBackend(_RpmBackend):
    id = "yum"
    executable = "yum"
