"""
Platform detection — which OS family's priority chain applies to this host.

Resolved once per process (OS identity does not change while we run)
and injected into the orchestrators through ``adaptive.core.context``.
"""

from __future__ import annotations

import logging
import platform
from functools import lru_cache

import distro

from adaptive.core.models.platform import Platform

logger = logging.getLogger(__name__)

# os-release ID / ID_LIKE tokens → platform family
_DISTRO_FAMILIES: dict[str, Platform] = {
    "debian": Platform.DEBIAN,
    "ubuntu": Platform.DEBIAN,
    "linuxmint": Platform.DEBIAN,
    "pop": Platform.DEBIAN,
    "raspbian": Platform.DEBIAN,
    "alpine": Platform.ALPINE,
    "fedora": Platform.FEDORA,
    "rhel": Platform.FEDORA,
    "centos": Platform.FEDORA,
    "rocky": Platform.FEDORA,
    "almalinux": Platform.FEDORA,
    "arch": Platform.ARCH,
    "manjaro": Platform.ARCH,
    "endeavouros": Platform.ARCH,
}


def _read_os_release() -> dict[str, str]:
    """os-release identity fields, as read by ``distro``."""
    return {
        "ID": distro.id(),
        "ID_LIKE": distro.like(),
        "NAME": distro.name(),
    }


def platform_from_os_release(info: dict[str, str]) -> Platform:
    """Map os-release fields to a platform family.

    ``ID`` wins over ``ID_LIKE``; the pretty ``NAME`` is the last resort
    for derivatives that ship neither.
    """
    ids = [info.get("ID", "").lower()] + info.get("ID_LIKE", "").lower().split()
    for distro_id in ids:
        if distro_id in _DISTRO_FAMILIES:
            return _DISTRO_FAMILIES[distro_id]

    name = info.get("NAME", "").lower()
    for token, family in _DISTRO_FAMILIES.items():
        if token in name:
            return family
    if "red hat" in name:
        return Platform.FEDORA

    return Platform.UNKNOWN


def _detect(system: str) -> Platform:
    if system == "Windows" or system.startswith(("CYGWIN", "MINGW", "MSYS")):
        return Platform.WINDOWS
    if system == "Darwin":
        return Platform.MACOS
    if system == "Linux":
        return platform_from_os_release(_read_os_release())
    return Platform.UNKNOWN


@lru_cache(maxsize=1)
def detect_platform() -> Platform:
    """Detect this host's platform family (cached for the process)."""
    detected = _detect(platform.system())
    logger.debug("Detected platform: %s", detected.value)
    return detected


def is_wsl() -> bool:
    """Whether we are running inside Windows Subsystem for Linux."""
    try:
        with open("/proc/version", encoding="utf-8") as f:
            version = f.read().lower()
    except OSError:
        return False
    return "microsoft" in version or "wsl" in version


def is_windows() -> bool:
    return detect_platform() is Platform.WINDOWS


def is_mac() -> bool:
    return detect_platform() is Platform.MACOS


def is_debian() -> bool:
    return detect_platform() is Platform.DEBIAN


def is_alpine() -> bool:
    return detect_platform() is Platform.ALPINE


def is_fedora() -> bool:
    return detect_platform() is Platform.FEDORA


def is_arch() -> bool:
    return detect_platform() is Platform.ARCH
