"""
Alpine backend — apk.
"""

from __future__ import annotations

import re

from adaptive.adapters.packages.base import PackageManagerBackend
from adaptive.adapters.shell.command import CommandResult


class ApkBackend(PackageManagerBackend):
    id = "apk"
    executable = "apk"
    privileged = True

    def search_command(self, package: str) -> list[str]:
        return ["apk", "search", "-e", package]

    def install_command(self, package: str) -> list[str]:
        return ["apk", "add", package]

    def matches(self, package: str, result: CommandResult) -> bool:
        # `apk search -e` prints "<name>-<version>-r<rel>"
        if not result.ok:
            return False
        versioned = re.compile(rf"^{re.escape(package)}-\d")
        return any(
            line.strip() == package or versioned.match(line.strip())
            for line in result.stdout.splitlines()
        )
