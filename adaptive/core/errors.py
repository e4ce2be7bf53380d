"""
Exception hierarchy for the install resolver.

Exceptions only cross internal seams (argument parsing, backend
preconditions). The orchestrators convert them into outcomes, so
callers of ``install_on_*`` never have to catch anything.
"""

from __future__ import annotations


class InstallError(Exception):
    """Base class for install resolution errors."""


class NoPackageError(InstallError, ValueError):
    """Raised when no package-name candidate was supplied."""

    def __init__(self, caller: str = "install") -> None:
        self.caller = caller
        super().__init__(f"no package provided to {caller}()!")
