"""
Command runner — the single place where package-manager processes run.

Every backend probe and install goes through ``CommandRunner.run``.
Sudo elevation, timeouts, and process errors are handled here so that
backends only ever see a ``CommandResult``.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
import time
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

SudoPolicy = Literal["auto", "always", "never"]

# Shell conventions for "timed out" and "command not found".
EXIT_TIMEOUT = 124
EXIT_NOT_FOUND = 127


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured output of one external command."""

    returncode: int
    stdout: str = ""
    stderr: str = ""
    elapsed_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def error(self) -> str:
        """Best short description of a failure (stderr tail or exit code)."""
        tail = self.stderr.strip()[-500:]
        return tail or f"Command exited with code {self.returncode}"


def _is_root() -> bool:
    # os.geteuid does not exist on Windows
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


class CommandRunner:
    """Run external commands and probe for executables.

    Args:
        sudo: ``auto`` elevates privileged commands when not root and
            ``sudo`` exists; ``always`` and ``never`` force the choice.
        timeout: Seconds per command, or ``None`` to wait indefinitely.
        stream_output: If True, install commands inherit the terminal
            instead of having their output captured.
    """

    def __init__(
        self,
        sudo: SudoPolicy = "auto",
        timeout: int | None = None,
        stream_output: bool = False,
    ):
        self.sudo = sudo
        self.timeout = timeout
        self.stream_output = stream_output

    def has_command(self, name: str) -> bool:
        """Whether an executable called ``name`` is on PATH."""
        return shutil.which(name) is not None

    def _elevate(self, cmd: list[str]) -> list[str]:
        if self.sudo == "never":
            return cmd
        if self.sudo == "always":
            return ["sudo"] + cmd
        if _is_root() or not self.has_command("sudo"):
            return cmd
        return ["sudo"] + cmd

    def run(
        self,
        cmd: list[str],
        *,
        sudo: bool = False,
        capture: bool = True,
    ) -> CommandResult:
        """Run a command and return its result. Never raises.

        Args:
            cmd: Argument vector.
            sudo: Whether the command needs root.
            capture: Capture stdout/stderr. When False (and the runner
                streams output), stdout goes straight to the terminal and
                stderr is echoed after the command exits, so failures
                still carry their stderr tail.
        """
        if os.name == "nt":
            # scoop and friends are .cmd/.ps1 shims that need their full path
            resolved = shutil.which(cmd[0])
            if resolved:
                cmd = [resolved] + cmd[1:]
        if sudo:
            cmd = self._elevate(cmd)
        capture = capture or not self.stream_output
        pipes = {"capture_output": True} if capture else {"stderr": subprocess.PIPE}

        logger.debug("Executing: %s", " ".join(cmd))
        start = time.monotonic()

        try:
            result = subprocess.run(
                cmd,
                **pipes,
                text=True,
                timeout=self.timeout,
                stdin=subprocess.DEVNULL,
            )
        except subprocess.TimeoutExpired:
            logger.warning("Command timed out after %ss: %s", self.timeout, cmd[0])
            return CommandResult(
                returncode=EXIT_TIMEOUT,
                stderr=f"Command timed out after {self.timeout}s",
            )
        except FileNotFoundError:
            return CommandResult(returncode=EXIT_NOT_FOUND, stderr=f"{cmd[0]}: command not found")
        except OSError as e:
            logger.warning("Command could not be started: %s (%s)", cmd[0], e)
            return CommandResult(returncode=EXIT_NOT_FOUND, stderr=str(e))

        if not capture and result.stderr:
            sys.stderr.write(result.stderr)

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.debug("Exit %d after %dms: %s", result.returncode, elapsed_ms, cmd[0])

        return CommandResult(
            returncode=result.returncode,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            elapsed_ms=elapsed_ms,
        )
