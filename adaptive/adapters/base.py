"""
Backend base — the protocol contract between the resolver and package managers.

Every package-manager integration implements this interface. The
orchestrator only talks to backends through ``try_install``, never
directly to apt, winget, or any other tool.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from adaptive.adapters.shell.command import CommandResult
from adaptive.core.errors import NoPackageError
from adaptive.core.models.install import BackendAttempt

logger = logging.getLogger(__name__)


class Backend(ABC):
    """Abstract base class for all package-manager backends.

    Backends perform external side effects and return attempts.
    They never raise for external failures: a missing manager, a
    search miss, and a failed install are all captured in the
    BackendAttempt returned by ``try_install``.

    To create a new backend:
        1. Subclass Backend (or PackageManagerBackend for CLI managers)
        2. Implement name, is_available, exists, install
        3. Register it in the BackendRegistry
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The backend identifier used by ``--prefer-<name>`` (e.g. 'apt')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this backend's package manager is installed.

        Should be fast and never raise.
        """

    @abstractmethod
    def exists(self, package: str) -> bool:
        """Whether ``package`` exists in the manager's index."""

    @abstractmethod
    def install(self, package: str) -> CommandResult:
        """Install ``package`` and return the command result."""

    def try_install(
        self,
        candidates: list[str],
        *,
        dry_run: bool = False,
    ) -> BackendAttempt:
        """Install the first candidate this backend knows about.

        Availability is probed exactly once. Candidates are searched in
        order; the first one found is installed and its result is final
        for this backend, even when the install fails.

        Raises:
            NoPackageError: If ``candidates`` is empty.
        """
        if not candidates:
            raise NoPackageError(f"{self.name}.try_install")

        if not self.is_available():
            logger.debug("Skipping %s: not available on this host", self.name)
            return BackendAttempt.unavailable(self.name)

        probed: list[str] = []
        for package in candidates:
            probed.append(package)
            if not self.exists(package):
                logger.debug("%s: no package named %s", self.name, package)
                continue

            if dry_run:
                logger.info("[dry-run] would install %s using %s", package, self.name)
                return BackendAttempt.installed(self.name, package, probed, dry_run=True)

            logger.info("Installing %s using %s", package, self.name)
            result = self.install(package)
            if result.ok:
                return BackendAttempt.installed(self.name, package, probed)

            logger.warning(
                "Failed to install %s using %s (exit %d)",
                package, self.name, result.returncode,
            )
            return BackendAttempt.install_failed(self.name, package, probed, result.error)

        return BackendAttempt.not_found(self.name, probed)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
