"""
Priority chains — the ordered backends each OS family tries.

A chain is built from the registry by id and can be re-ordered by
preferences. Preferring never removes a backend: preferred backends
move to the front in their default relative order, and everything
else follows in its default order as a fallback.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from adaptive.adapters.base import Backend
from adaptive.adapters.registry import BackendRegistry
from adaptive.core.models.platform import Platform

logger = logging.getLogger(__name__)

DEFAULT_CHAINS: dict[Platform, tuple[str, ...]] = {
    Platform.DEBIAN: ("nala", "apt", "snap", "nix", "cargo"),
    Platform.ALPINE: ("apk", "snap", "nix", "cargo"),
    Platform.WINDOWS: ("winget", "choco", "scoop"),
    Platform.MACOS: ("brew", "port", "fink", "nix", "cargo"),
    Platform.FEDORA: ("dnf", "yum", "nix", "cargo"),
    Platform.ARCH: ("pacman", "yay", "paru", "nix", "cargo"),
}


class PriorityChain:
    """An ordered, re-orderable list of backends for one platform."""

    def __init__(self, backends: Iterable[Backend], platform: Platform = Platform.UNKNOWN):
        self.platform = platform
        self.backends: list[Backend] = list(backends)

    @classmethod
    def for_platform(cls, platform: Platform, registry: BackendRegistry) -> PriorityChain:
        """The default chain for ``platform`` (empty when it has none)."""
        return cls(registry.resolve(DEFAULT_CHAINS.get(platform, ())), platform)

    @property
    def names(self) -> list[str]:
        return [backend.name for backend in self.backends]

    def prefer(self, preferences: Iterable[str]) -> PriorityChain:
        """Return a new chain with the preferred backends moved to the front.

        Preferences naming a backend outside this chain are ignored with
        a warning.
        """
        wanted = set()
        for name in preferences:
            if name in self.names:
                wanted.add(name)
            else:
                logger.warning(
                    "Ignoring --prefer-%s: not a package manager for %s",
                    name, self.platform.value,
                )
        if not wanted:
            return self

        preferred = [b for b in self.backends if b.name in wanted]
        rest = [b for b in self.backends if b.name not in wanted]
        return PriorityChain(preferred + rest, self.platform)

    def __iter__(self) -> Iterator[Backend]:
        return iter(self.backends)

    def __len__(self) -> int:
        return len(self.backends)

    def __repr__(self) -> str:
        return f"<PriorityChain {self.platform.value}: {' → '.join(self.names)}>"
