"""
Domain models — Pydantic types for the install resolver.

All models are re-exported here for convenient access:

    from adaptive.core.models import PackageRequest, InstallOutcome, Settings
"""

from adaptive.core.models.install import BackendAttempt, InstallOutcome, PackageRequest
from adaptive.core.models.platform import Platform
from adaptive.core.models.settings import InstallSettings, Settings, ToolSpec

__all__ = [
    # install.py
    "BackendAttempt",
    "InstallOutcome",
    "PackageRequest",
    # platform.py
    "Platform",
    # settings.py
    "InstallSettings",
    "Settings",
    "ToolSpec",
]
