"""
Windows backends — winget, Chocolatey, and Scoop.

Package ids on Windows are case-insensitive, so matching is too.
"""

from __future__ import annotations

from adaptive.adapters.packages.base import PackageManagerBackend, first_tokens
from adaptive.adapters.shell.command import CommandResult

_WINGET_AGREEMENTS = ["--accept-source-agreements", "--disable-interactivity"]


class WingetBackend(PackageManagerBackend):
    id = "winget"
    executable = "winget"

    def search_command(self, package: str) -> list[str]:
        return ["winget", "search", "--exact", "--id", package] + _WINGET_AGREEMENTS

    def install_command(self, package: str) -> list[str]:
        return [
            "winget", "install", "--exact", "--id", package, "--silent",
            "--accept-package-agreements",
        ] + _WINGET_AGREEMENTS

    def matches(self, package: str, result: CommandResult) -> bool:
        # winget exits 0 with a "No package found" banner on some versions
        if not result.ok:
            return False
        wanted = package.lower()
        return any(
            wanted in (token.lower() for token in line.split())
            for line in result.stdout.splitlines()
        )


class ChocoBackend(PackageManagerBackend):
    id = "choco"
    executable = "choco"

    def search_command(self, package: str) -> list[str]:
        return ["choco", "search", package, "--exact", "--limit-output"]

    def install_command(self, package: str) -> list[str]:
        return ["choco", "install", package, "-y"]

    def matches(self, package: str, result: CommandResult) -> bool:
        # --limit-output prints "<id>|<version>"
        if not result.ok:
            return False
        return package.lower() in (t.lower() for t in first_tokens(result.stdout, "|"))


class ScoopBackend(PackageManagerBackend):
    id = "scoop"
    executable = "scoop"

    def search_command(self, package: str) -> list[str]:
        return ["scoop", "search", package]

    def install_command(self, package: str) -> list[str]:
        return ["scoop", "install", package]

    def matches(self, package: str, result: CommandResult) -> bool:
        if not result.ok:
            return False
        return package.lower() in (t.lower() for t in first_tokens(result.stdout))
