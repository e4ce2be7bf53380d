"""
Install orchestration — walk a platform's priority chain, stop at first success.

``PackageInstaller`` owns the backend registry and the install settings.
The module-level ``install_on_<os>`` functions are the public entry
points: they accept CLI-style arguments (``--prefer-<backend>`` flags
mixed with candidate names) and return an InstallOutcome. They never
raise for usage errors or install failures; both are outcomes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from adaptive.adapters.packages import default_registry
from adaptive.adapters.registry import BackendRegistry
from adaptive.adapters.shell.command import CommandRunner
from adaptive.core import context
from adaptive.core.errors import NoPackageError
from adaptive.core.models.install import BackendAttempt, InstallOutcome, PackageRequest
from adaptive.core.models.platform import Platform
from adaptive.core.models.settings import Settings
from adaptive.core.services.install.chains import DEFAULT_CHAINS, PriorityChain
from adaptive.core.services.install.request import parse_install_args

logger = logging.getLogger(__name__)


class PackageInstaller:
    """Resolve package requests against per-platform backend chains."""

    def __init__(self, registry: BackendRegistry, settings: Settings | None = None):
        self.registry = registry
        self.settings = settings or Settings()

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        runner: CommandRunner | None = None,
    ) -> PackageInstaller:
        """Build an installer with every known backend on a real runner."""
        settings = settings or Settings()
        if runner is None:
            runner = CommandRunner(
                sudo=settings.install.sudo,
                timeout=settings.install.timeout,
                stream_output=settings.install.stream_output,
            )
        return cls(default_registry(runner), settings)

    def chain_for(self, platform: Platform, preferences: Iterable[str] = ()) -> PriorityChain:
        """The platform's chain with command-line then configured preferences applied."""
        wanted = list(preferences)
        wanted += [p for p in self.settings.install.prefer if p not in wanted]
        return PriorityChain.for_platform(platform, self.registry).prefer(wanted)

    def install(
        self,
        platform: Platform,
        args: Iterable[str],
        *,
        dry_run: bool | None = None,
        caller: str | None = None,
    ) -> InstallOutcome:
        """Install from CLI-style arguments.

        Args:
            platform: OS family whose chain is walked.
            args: ``--prefer-<backend>`` flags and candidate names, any order.
            dry_run: Probe but do not install (default: from settings).
            caller: Name used in the usage-error message.
        """
        caller = caller or f"install_on_{platform.value}"
        try:
            request = parse_install_args(args, caller=caller)
        except NoPackageError as e:
            logger.error("%s", e)
            return InstallOutcome.invalid(str(e), platform=platform.value)
        return self.resolve(platform, request, dry_run=dry_run)

    def resolve(
        self,
        platform: Platform,
        request: PackageRequest,
        *,
        dry_run: bool | None = None,
    ) -> InstallOutcome:
        """Walk the chain once; the first backend that installs wins."""
        if dry_run is None:
            dry_run = self.settings.install.dry_run

        if platform not in DEFAULT_CHAINS:
            error = f"no package managers known for platform '{platform.value}'"
            logger.error("%s", error)
            return InstallOutcome.invalid(
                error, platform=platform.value, candidates=request.candidates,
            )

        chain = self.chain_for(platform, request.preferences)
        logger.debug("Install %s via %r", request.candidates, chain)

        common = {
            "platform": platform.value,
            "candidates": request.candidates,
            "chain": chain.names,
            "dry_run": dry_run,
        }
        attempts: list[BackendAttempt] = []

        for backend in chain:
            attempt = backend.try_install(request.candidates, dry_run=dry_run)
            attempts.append(attempt)
            if attempt.ok:
                logger.info("Installed %s using %s", attempt.package, attempt.backend)
                common.pop("dry_run")
                return InstallOutcome.success(attempt, attempts=attempts, **common)

        names = ", ".join(request.candidates)
        error = f"unsure how to install '{names}' on this {platform.value} system"
        outcome = InstallOutcome.failure(error, attempts=attempts, **common)
        logger.error("%s [%s]", error, outcome.summary())
        return outcome

    def search(self, platform: Platform, candidates: list[str]) -> list[BackendAttempt]:
        """Ask every backend in the platform's chain about the candidates.

        Runs availability and search probes only; nothing is installed
        and the walk does not stop at the first hit.
        """
        if not candidates:
            raise NoPackageError("search")
        return [
            backend.try_install(candidates, dry_run=True)
            for backend in self.chain_for(platform)
        ]


# ── Public orchestrators ────────────────────────────────────────


def install_on(
    platform: Platform | str,
    *args: str,
    dry_run: bool | None = None,
    installer: PackageInstaller | None = None,
) -> InstallOutcome:
    """Install on an explicitly named platform family."""
    platform = Platform.parse(platform)
    installer = installer or context.get_installer()
    return installer.install(platform, args, dry_run=dry_run)


def install_on_debian(*args: str, dry_run: bool | None = None,
                      installer: PackageInstaller | None = None) -> InstallOutcome:
    """nala → apt → snap → nix → cargo."""
    return install_on(Platform.DEBIAN, *args, dry_run=dry_run, installer=installer)


def install_on_alpine(*args: str, dry_run: bool | None = None,
                      installer: PackageInstaller | None = None) -> InstallOutcome:
    """apk → snap → nix → cargo."""
    return install_on(Platform.ALPINE, *args, dry_run=dry_run, installer=installer)


def install_on_windows(*args: str, dry_run: bool | None = None,
                       installer: PackageInstaller | None = None) -> InstallOutcome:
    """winget → choco → scoop."""
    return install_on(Platform.WINDOWS, *args, dry_run=dry_run, installer=installer)


def install_on_macos(*args: str, dry_run: bool | None = None,
                     installer: PackageInstaller | None = None) -> InstallOutcome:
    """brew → port → fink → nix → cargo."""
    return install_on(Platform.MACOS, *args, dry_run=dry_run, installer=installer)


def install_on_fedora(*args: str, dry_run: bool | None = None,
                      installer: PackageInstaller | None = None) -> InstallOutcome:
    """dnf → yum → nix → cargo."""
    return install_on(Platform.FEDORA, *args, dry_run=dry_run, installer=installer)


def install_on_arch(*args: str, dry_run: bool | None = None,
                    installer: PackageInstaller | None = None) -> InstallOutcome:
    """pacman → yay → paru → nix → cargo."""
    return install_on(Platform.ARCH, *args, dry_run=dry_run, installer=installer)
