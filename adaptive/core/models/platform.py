"""
Platform model — the OS families the installer knows how to serve.
"""

from __future__ import annotations

from enum import Enum


class Platform(str, Enum):
    """An OS family with its own package-manager priority chain."""

    WINDOWS = "windows"
    MACOS = "macos"
    DEBIAN = "debian"
    ALPINE = "alpine"
    FEDORA = "fedora"
    ARCH = "arch"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | Platform) -> Platform:
        """Resolve a user-supplied platform name (case-insensitive).

        Accepts a few common aliases (``mac``, ``darwin``, ``ubuntu``, ``rhel``).

        Raises:
            ValueError: If the name is not a known platform or alias.
        """
        if isinstance(value, Platform):
            return value
        key = value.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            known = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown platform '{value}' (expected one of: {known})") from None


_ALIASES = {
    "mac": "macos",
    "darwin": "macos",
    "osx": "macos",
    "win": "windows",
    "ubuntu": "debian",
    "rhel": "fedora",
    "centos": "fedora",
    "manjaro": "arch",
}
