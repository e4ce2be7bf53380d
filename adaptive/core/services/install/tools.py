"""
Tool wrappers — ``install_<tool>`` for the tools in the catalog.

Each wrapper detects the platform (or uses the pinned one), picks the
tool's name variants for that platform, and hands them all to the
platform's orchestrator. Pass-through ``--prefer-<backend>`` flags are
forwarded unchanged.
"""

from __future__ import annotations

import logging

from adaptive.core import context
from adaptive.core.data.tools import TOOL_CATALOG
from adaptive.core.models.install import InstallOutcome
from adaptive.core.models.platform import Platform
from adaptive.core.models.settings import Settings, ToolSpec
from adaptive.core.services.install.chains import DEFAULT_CHAINS
from adaptive.core.services.install.orchestrator import PackageInstaller
from adaptive.core.services.install.request import prefer_flag, split_install_args

logger = logging.getLogger(__name__)


def tool_catalog(settings: Settings | None = None) -> dict[str, ToolSpec]:
    """Built-in tools merged with tools declared in the config file.

    A configured tool replaces the built-in entry of the same name.
    """
    catalog = {name: ToolSpec.model_validate(entry) for name, entry in TOOL_CATALOG.items()}
    if settings is not None:
        catalog.update(settings.tools)
    return catalog


def variants_for(spec: ToolSpec, platform: Platform) -> list[str]:
    """Candidate names for ``platform``, falling back to ``_default``."""
    return list(spec.install.get(platform.value) or spec.install.get("_default", []))


def install_tool(
    tool: str,
    *flags: str,
    platform: Platform | str | None = None,
    dry_run: bool | None = None,
    installer: PackageInstaller | None = None,
) -> InstallOutcome:
    """Install a catalog tool with the right name variants for this host."""
    installer = installer or context.get_installer()
    platform = Platform.parse(platform) if platform else context.get_platform()

    spec = tool_catalog(installer.settings).get(tool)
    if spec is None:
        error = f"unknown tool '{tool}'"
        logger.error("%s", error)
        return InstallOutcome.invalid(error, platform=platform.value)

    extra, preferences = split_install_args(flags)
    if extra:
        error = f"install_{tool}() only accepts --prefer-<backend> flags, got: {', '.join(extra)}"
        logger.error("%s", error)
        return InstallOutcome.invalid(error, platform=platform.value)

    variants = variants_for(spec, platform)
    if platform not in DEFAULT_CHAINS or not variants:
        where = f", go to {spec.homepage} and download manually" if spec.homepage else ""
        error = f"Unable to automate the install of {tool} on {platform.value}{where}"
        logger.error("%s", error)
        return InstallOutcome.invalid(error, platform=platform.value)

    return installer.install(
        platform,
        [*(prefer_flag(p) for p in preferences), *variants],
        dry_run=dry_run,
        caller=f"install_{tool}",
    )


def install_jq(*flags: str, **kwargs) -> InstallOutcome:
    return install_tool("jq", *flags, **kwargs)


def install_yq(*flags: str, **kwargs) -> InstallOutcome:
    return install_tool("yq", *flags, **kwargs)


def install_curl(*flags: str, **kwargs) -> InstallOutcome:
    return install_tool("curl", *flags, **kwargs)


def install_ripgrep(*flags: str, **kwargs) -> InstallOutcome:
    return install_tool("ripgrep", *flags, **kwargs)


def install_fd(*flags: str, **kwargs) -> InstallOutcome:
    return install_tool("fd", *flags, **kwargs)


def install_fzf(*flags: str, **kwargs) -> InstallOutcome:
    return install_tool("fzf", *flags, **kwargs)


def install_bat(*flags: str, **kwargs) -> InstallOutcome:
    return install_tool("bat", *flags, **kwargs)


def install_eza(*flags: str, **kwargs) -> InstallOutcome:
    return install_tool("eza", *flags, **kwargs)


def install_dust(*flags: str, **kwargs) -> InstallOutcome:
    return install_tool("dust", *flags, **kwargs)


def install_neovim(*flags: str, **kwargs) -> InstallOutcome:
    return install_tool("neovim", *flags, **kwargs)


def install_git(*flags: str, **kwargs) -> InstallOutcome:
    return install_tool("git", *flags, **kwargs)


def install_gh(*flags: str, **kwargs) -> InstallOutcome:
    return install_tool("gh", *flags, **kwargs)
