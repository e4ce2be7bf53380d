"""
Backend registry — capability-keyed lookup for every package manager.

The registry is the single point of backend management. Priority
chains are built from it by id; the orchestrator never constructs
backends itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from adaptive.adapters.base import Backend

logger = logging.getLogger(__name__)


class BackendRegistry:
    """Central registry of backends, keyed by backend id.

    Features:
        - Register/unregister backends by id
        - Resolve an ordered list of ids into backend objects
        - Query backend availability
    """

    def __init__(self, backends: Iterable[Backend] = ()):
        self._backends: dict[str, Backend] = {}
        for backend in backends:
            self.register(backend)

    def register(self, backend: Backend) -> None:
        """Register a backend, replacing any existing one with the same id."""
        name = backend.name
        if name in self._backends:
            logger.warning("Overwriting existing backend: %s", name)
        self._backends[name] = backend
        logger.debug("Registered backend: %s", name)

    def unregister(self, name: str) -> None:
        """Remove a backend from the registry."""
        self._backends.pop(name, None)

    def get(self, name: str) -> Backend | None:
        """Look up a backend by id."""
        return self._backends.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._backends

    def list_backends(self) -> list[str]:
        """List all registered backend ids."""
        return list(self._backends.keys())

    def resolve(self, names: Iterable[str]) -> list[Backend]:
        """Map ids to backends, in order, skipping ids that are not registered."""
        resolved = []
        for name in names:
            backend = self._backends.get(name)
            if backend is None:
                logger.debug("No backend registered for '%s'", name)
                continue
            resolved.append(backend)
        return resolved

    def backend_status(self, names: Iterable[str] | None = None) -> dict[str, dict[str, Any]]:
        """Availability of the given (default: all) registered backends."""
        status = {}
        for backend in self.resolve(names if names is not None else self._backends):
            try:
                available = backend.is_available()
            except Exception:
                logger.debug("Availability probe raised for %s", backend.name, exc_info=True)
                available = False
            status[backend.name] = {
                "name": backend.name,
                "available": available,
                "type": backend.__class__.__name__,
            }
        return status
