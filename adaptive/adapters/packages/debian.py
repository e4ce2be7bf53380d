"""
Debian-family backends — nala and apt.

Both read the same package index, so both search with ``apt-cache``;
they differ only in which front-end performs the install.
"""

from __future__ import annotations

from adaptive.adapters.packages.base import PackageManagerBackend


class NalaBackend(PackageManagerBackend):
    id = "nala"
    executable = "nala"
    privileged = True

    def search_command(self, package: str) -> list[str]:
        return ["apt-cache", "show", package]

    def install_command(self, package: str) -> list[str]:
        return ["nala", "install", "-y", package]


class AptBackend(PackageManagerBackend):
    id = "apt"
    executable = "apt-get"
    privileged = True

    def search_command(self, package: str) -> list[str]:
        return ["apt-cache", "show", package]

    def install_command(self, package: str) -> list[str]:
        return ["apt-get", "install", "-y", package]
