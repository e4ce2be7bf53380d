"""
Package-manager backend — a Backend driven by two CLI commands.

Each concrete manager declares its executable, how to search its index,
how to install, and whether install needs root. The search output is
interpreted by ``matches``; the default accepts any successful,
non-empty answer.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar

from adaptive.adapters.base import Backend
from adaptive.adapters.shell.command import CommandResult, CommandRunner


class PackageManagerBackend(Backend):
    """Backend for a package manager reachable as a command-line tool."""

    id: ClassVar[str]
    executable: ClassVar[str]
    privileged: ClassVar[bool] = False

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    @property
    def name(self) -> str:
        return self.id

    def is_available(self) -> bool:
        return self.runner.has_command(self.executable)

    @abstractmethod
    def search_command(self, package: str) -> list[str]:
        """Command that asks the manager's index about ``package``."""

    @abstractmethod
    def install_command(self, package: str) -> list[str]:
        """Command that installs ``package``."""

    def matches(self, package: str, result: CommandResult) -> bool:
        """Interpret a search result. Default: exit 0 with some output."""
        return result.ok and bool(result.stdout.strip())

    def exists(self, package: str) -> bool:
        return self.matches(package, self.runner.run(self.search_command(package)))

    def install(self, package: str) -> CommandResult:
        return self.runner.run(
            self.install_command(package),
            sudo=self.privileged,
            capture=False,
        )


def first_tokens(output: str, separators: str = "") -> list[str]:
    """First column of every non-blank output line.

    Args:
        output: Raw command output.
        separators: Extra characters treated as column separators
            (e.g. ``"|"`` for chocolatey's ``--limit-output``).
    """
    tokens = []
    for line in output.splitlines():
        for sep in separators:
            line = line.replace(sep, " ")
        parts = line.split()
        if parts:
            tokens.append(parts[0])
    return tokens
