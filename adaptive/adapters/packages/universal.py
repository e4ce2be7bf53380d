"""
Cross-distro backends — snap, nix, and cargo.

These appear as fallbacks in several OS chains.
"""

from __future__ import annotations

from adaptive.adapters.packages.base import PackageManagerBackend, first_tokens
from adaptive.adapters.shell.command import CommandResult


class SnapBackend(PackageManagerBackend):
    id = "snap"
    executable = "snap"
    privileged = True

    def search_command(self, package: str) -> list[str]:
        return ["snap", "info", package]

    def install_command(self, package: str) -> list[str]:
        return ["snap", "install", package]

    def matches(self, package: str, result: CommandResult) -> bool:
        return result.ok


class NixBackend(PackageManagerBackend):
    """nix-env against the ``nixpkgs`` channel, addressed by attribute."""

    id = "nix"
    executable = "nix-env"

    def search_command(self, package: str) -> list[str]:
        return ["nix-env", "-qaP", "-A", f"nixpkgs.{package}"]

    def install_command(self, package: str) -> list[str]:
        return ["nix-env", "-iA", f"nixpkgs.{package}"]


class CargoBackend(PackageManagerBackend):
    """Install Rust binaries from crates.io.

    ``cargo search`` is fuzzy, so only an exact crate name on the first
    result line counts as a match.
    """

    id = "cargo"
    executable = "cargo"

    def search_command(self, package: str) -> list[str]:
        return ["cargo", "search", "--limit", "1", package]

    def install_command(self, package: str) -> list[str]:
        return ["cargo", "install", package]

    def matches(self, package: str, result: CommandResult) -> bool:
        if not result.ok:
            return False
        tokens = first_tokens(result.stdout)
        return bool(tokens) and tokens[0] == package
