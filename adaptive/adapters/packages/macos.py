"""
macOS backends — Homebrew, MacPorts, and Fink.
"""

from __future__ import annotations

from adaptive.adapters.packages.base import PackageManagerBackend, first_tokens
from adaptive.adapters.shell.command import CommandResult


class BrewBackend(PackageManagerBackend):
    id = "brew"
    executable = "brew"

    def search_command(self, package: str) -> list[str]:
        return ["brew", "info", package]

    def install_command(self, package: str) -> list[str]:
        return ["brew", "install", package]

    def matches(self, package: str, result: CommandResult) -> bool:
        return result.ok


class PortBackend(PackageManagerBackend):
    id = "port"
    executable = "port"
    privileged = True

    def search_command(self, package: str) -> list[str]:
        return ["port", "search", "--exact", package]

    def install_command(self, package: str) -> list[str]:
        return ["port", "install", package]

    def matches(self, package: str, result: CommandResult) -> bool:
        return result.ok and package in first_tokens(result.stdout)


class FinkBackend(PackageManagerBackend):
    """Fink prints an install-state column before the name, so match any column."""

    id = "fink"
    executable = "fink"

    def search_command(self, package: str) -> list[str]:
        return ["fink", "list", package]

    def install_command(self, package: str) -> list[str]:
        return ["fink", "install", package]

    def matches(self, package: str, result: CommandResult) -> bool:
        return result.ok and any(package in line.split() for line in result.stdout.splitlines())
