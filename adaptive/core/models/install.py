"""
Install request, attempt, and outcome models — the resolver contract.

A PackageRequest goes in, one BackendAttempt is recorded per backend
the chain walks, and a single InstallOutcome comes out. Backends never
raise for external failures; every failure is captured in an attempt.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

AttemptStatus = Literal[
    "unavailable",     # manager executable not on this host
    "not_found",       # no candidate in the manager's index
    "install_failed",  # candidate found, install command failed
    "installed",
    "would_install",   # dry run: candidate found, install skipped
]


def _now_iso() -> str:
    """Current UTC time as ISO string."""
    return datetime.now(UTC).isoformat()


class PackageRequest(BaseModel):
    """One logical package: ordered candidate names plus backend preferences."""

    candidates: list[str] = Field(min_length=1)
    preferences: list[str] = Field(default_factory=list)


class BackendAttempt(BaseModel):
    """What one backend did with a request."""

    backend: str
    status: AttemptStatus
    package: str | None = None
    probed: list[str] = Field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether this backend installed (or would install) a candidate."""
        return self.status in ("installed", "would_install")

    @classmethod
    def unavailable(cls, backend: str) -> BackendAttempt:
        return cls(backend=backend, status="unavailable")

    @classmethod
    def not_found(cls, backend: str, probed: list[str]) -> BackendAttempt:
        return cls(backend=backend, status="not_found", probed=probed)

    @classmethod
    def installed(
        cls,
        backend: str,
        package: str,
        probed: list[str],
        dry_run: bool = False,
    ) -> BackendAttempt:
        return cls(
            backend=backend,
            status="would_install" if dry_run else "installed",
            package=package,
            probed=probed,
        )

    @classmethod
    def install_failed(
        cls,
        backend: str,
        package: str,
        probed: list[str],
        error: str,
    ) -> BackendAttempt:
        return cls(
            backend=backend,
            status="install_failed",
            package=package,
            probed=probed,
            error=error,
        )


class InstallOutcome(BaseModel):
    """Result of one resolution pass over a priority chain.

    ``installed`` means a backend installed one of the candidates,
    ``failed`` means the chain was exhausted, ``invalid`` means the
    request itself was unusable and no backend was touched.
    """

    status: Literal["installed", "failed", "invalid"]
    platform: str = "unknown"
    candidates: list[str] = Field(default_factory=list)
    chain: list[str] = Field(default_factory=list)

    backend: str | None = None
    package: str | None = None
    error: str | None = None
    dry_run: bool = False

    attempts: list[BackendAttempt] = Field(default_factory=list)
    finished_at: str = Field(default_factory=_now_iso)

    @property
    def ok(self) -> bool:
        return self.status == "installed"

    @property
    def exit_code(self) -> int:
        """Shell-style exit code: 0 on success, 1 otherwise."""
        return 0 if self.ok else 1

    @classmethod
    def success(cls, attempt: BackendAttempt, **kwargs: Any) -> InstallOutcome:
        """Create an outcome from the winning backend attempt."""
        return cls(
            status="installed",
            backend=attempt.backend,
            package=attempt.package,
            dry_run=attempt.status == "would_install",
            **kwargs,
        )

    @classmethod
    def failure(cls, error: str, **kwargs: Any) -> InstallOutcome:
        return cls(status="failed", error=error, **kwargs)

    @classmethod
    def invalid(cls, error: str, **kwargs: Any) -> InstallOutcome:
        return cls(status="invalid", error=error, **kwargs)

    def summary(self) -> str:
        """One-line human summary of the attempts, in chain order."""
        parts = []
        for attempt in self.attempts:
            label = f"{attempt.backend}={attempt.status}"
            if attempt.package:
                label += f"({attempt.package})"
            parts.append(label)
        return ", ".join(parts) or "no backends tried"

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump()
        data["ok"] = self.ok
        data["exit_code"] = self.exit_code
        return data
