"""
Shared test fixtures and configuration.
"""

import logging

import pytest

from adaptive.adapters.mock import MockBackend
from adaptive.adapters.registry import BackendRegistry
from adaptive.core import context
from adaptive.core.services.install.chains import DEFAULT_CHAINS
from adaptive.core.services.install.orchestrator import PackageInstaller
from adaptive.core.services.platform_detect import detect_platform


@pytest.fixture(autouse=True)
def _isolate_process_state(monkeypatch):
    """Keep context, detection cache, env, and root logging per-test."""
    for var in ("ADAPTIVE_CONFIG", "ADAPTIVE_LOG_LEVEL", "ADAPTIVE_LOG_FILE", "ADAPTIVE_LOG_FILE_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    level = root.level
    context.reset()
    detect_platform.cache_clear()
    yield
    context.reset()
    detect_platform.cache_clear()
    # Drop handlers installed by setup_logging; pytest manages its own
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def call_log() -> list[str]:
    """A call log shared by every mock backend in a test."""
    return []


@pytest.fixture
def make_installer(call_log):
    """Build an installer over mock backends for every known backend id.

    Usage::

        installer = make_installer(apt={"jq"}, snap={"jq"}, unavailable={"nala"})

    Backends not mentioned are available with an empty index.
    """

    def _make(unavailable=(), failing=(), settings=None, **packages):
        names = {name for chain in DEFAULT_CHAINS.values() for name in chain}
        registry = BackendRegistry(
            MockBackend(
                backend_name=name,
                available=name not in unavailable,
                packages=packages.get(name, ()),
                failing=failing,
                call_log=call_log,
            )
            for name in sorted(names)
        )
        return PackageInstaller(registry, settings)

    return _make
