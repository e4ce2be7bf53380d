"""
Process context — the platform and installer this process works with.

Set ONCE at startup by the entry point (the CLI, or a test fixture),
then read by every orchestrator that is not handed its own:

    - CLI:    main.py  → context.set_platform(...) / context.set_installer(...)
    - Tests:  conftest → context.reset()

Module-level singletons, not a class. ``get_platform`` falls back to
detection and ``get_installer`` to a default installer when unset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from adaptive.core.models.platform import Platform

if TYPE_CHECKING:
    from adaptive.core.services.install.orchestrator import PackageInstaller


_platform: Optional[Platform] = None
_installer: Optional[PackageInstaller] = None


def set_platform(value: Platform | None) -> None:
    """Pin the platform for the current process (None re-enables detection)."""
    global _platform
    _platform = value


def get_platform() -> Platform:
    """Return the pinned platform, detecting it on first use."""
    if _platform is not None:
        return _platform
    from adaptive.core.services.platform_detect import detect_platform

    return detect_platform()


def set_installer(installer: PackageInstaller | None) -> None:
    """Register the installer used by the module-level ``install_on_*`` functions."""
    global _installer
    _installer = installer


def get_installer() -> PackageInstaller:
    """Return the registered installer, building a default one on first use."""
    global _installer
    if _installer is None:
        from adaptive.core.services.install.orchestrator import PackageInstaller

        _installer = PackageInstaller.from_settings()
    return _installer


def reset() -> None:
    """Forget the pinned platform and installer."""
    set_platform(None)
    set_installer(None)
