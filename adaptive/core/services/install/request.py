"""
Install arguments — partition CLI-style tokens into a PackageRequest.

Flags and package names may be interleaved in any order::

    install_on_debian --prefer-snap ripgrep rg
    install_on_debian ripgrep --prefer-snap rg
    install_on_debian ripgrep rg --prefer-snap

all produce the same request: candidates ``["ripgrep", "rg"]`` and
preferences ``["snap"]``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from adaptive.core.errors import NoPackageError
from adaptive.core.models.install import PackageRequest

PREFER_FLAG = re.compile(r"^--prefer-([A-Za-z0-9][A-Za-z0-9_-]*)$")


def prefer_flag(backend: str) -> str:
    """The command-line flag that prefers ``backend``."""
    return f"--prefer-{backend}"


def split_install_args(args: Iterable[str]) -> tuple[list[str], list[str]]:
    """Classify every token as a preference flag or a candidate name.

    Order is preserved within each partition; repeated preferences are
    kept once. Blank tokens are dropped.

    Returns:
        ``(candidates, preferences)`` where preferences are backend ids.
    """
    candidates: list[str] = []
    preferences: list[str] = []
    for token in args:
        token = token.strip()
        if not token:
            continue
        match = PREFER_FLAG.match(token)
        if match:
            backend = match.group(1).lower()
            if backend not in preferences:
                preferences.append(backend)
        else:
            candidates.append(token)
    return candidates, preferences


def parse_install_args(args: Iterable[str], caller: str = "install") -> PackageRequest:
    """Build a PackageRequest from CLI-style arguments.

    Raises:
        NoPackageError: If only flags (or nothing) were given.
    """
    candidates, preferences = split_install_args(args)
    if not candidates:
        raise NoPackageError(caller)
    return PackageRequest(candidates=candidates, preferences=preferences)
