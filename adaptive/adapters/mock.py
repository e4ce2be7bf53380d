"""
Test doubles — a scripted backend and a scripted command runner.

MockBackend simulates a whole package manager (availability, index
contents, install failures) and records every probe in a call log that
can be shared between backends to assert cross-backend ordering.
MockRunner simulates the host underneath real backends, replaying
canned results per command.
"""

from __future__ import annotations

from collections.abc import Iterable

from adaptive.adapters.base import Backend
from adaptive.adapters.shell.command import CommandResult, CommandRunner


class MockBackend(Backend):
    """Universal mock backend for testing.

    Call log entries look like ``"apt:available"``, ``"apt:search:jq"``
    and ``"apt:install:jq"``.
    """

    def __init__(
        self,
        backend_name: str = "mock",
        available: bool = True,
        packages: Iterable[str] = (),
        failing: Iterable[str] = (),
        call_log: list[str] | None = None,
    ):
        self._name = backend_name
        self._available = available
        self._packages = set(packages)
        self._failing = set(failing)
        self._call_log = call_log if call_log is not None else []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_log(self) -> list[str]:
        """Every probe, search, and install this mock has received."""
        return self._call_log

    @property
    def installed(self) -> list[str]:
        """Packages this backend successfully installed, in order."""
        prefix = f"{self._name}:install:"
        return [
            entry[len(prefix):]
            for entry in self._call_log
            if entry.startswith(prefix) and entry[len(prefix):] not in self._failing
        ]

    def add_package(self, package: str, failing: bool = False) -> None:
        """Make ``package`` appear in this backend's index."""
        self._packages.add(package)
        if failing:
            self._failing.add(package)

    def is_available(self) -> bool:
        self._call_log.append(f"{self._name}:available")
        return self._available

    def exists(self, package: str) -> bool:
        self._call_log.append(f"{self._name}:search:{package}")
        return package in self._packages

    def install(self, package: str) -> CommandResult:
        self._call_log.append(f"{self._name}:install:{package}")
        if package in self._failing:
            return CommandResult(returncode=1, stderr=f"mock install of {package} failed")
        return CommandResult(returncode=0, stdout=f"[mock] installed {package}")

    def reset(self) -> None:
        """Clear the call log (shared logs are cleared for everyone)."""
        self._call_log.clear()


class MockRunner(CommandRunner):
    """Command runner that never spawns processes.

    Commands not given a response fail with exit code 1 and no output,
    which every backend reads as "not in the index".
    """

    def __init__(self, available: Iterable[str] = ()):
        super().__init__(sudo="never")
        self.available = set(available)
        self.calls: list[tuple[list[str], bool]] = []
        self._responses: dict[tuple[str, ...], CommandResult] = {}

    def has_command(self, name: str) -> bool:
        return name in self.available

    def respond(self, cmd: list[str], stdout: str = "", returncode: int = 0, stderr: str = "") -> None:
        """Set the canned result for an exact command."""
        self._responses[tuple(cmd)] = CommandResult(
            returncode=returncode, stdout=stdout, stderr=stderr,
        )

    def run(
        self,
        cmd: list[str],
        *,
        sudo: bool = False,
        capture: bool = True,
    ) -> CommandResult:
        self.calls.append((list(cmd), sudo))
        return self._responses.get(tuple(cmd), CommandResult(returncode=1))

    @property
    def commands(self) -> list[list[str]]:
        """Argument vectors of every command run, in order."""
        return [cmd for cmd, _ in self.calls]
