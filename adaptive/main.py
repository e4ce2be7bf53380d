"""
adaptive — CLI entrypoint.

Usage:
    adaptive --help
    adaptive install jq
    adaptive install-on debian --prefer-snap ripgrep rg
    adaptive platform
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from adaptive import __version__
from adaptive.core import context
from adaptive.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="adaptive")
@click.option("--verbose", "-v", is_flag=True, help="Show install progress.")
@click.option("--quiet", "-q", is_flag=True, help="Only show errors.")
@click.option("--debug", is_flag=True, help="Log every probe and command (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to config.yml (default: $ADAPTIVE_CONFIG or ~/.config/adaptive/config.yml).",
)
@click.option(
    "--platform",
    "platform_name",
    default=None,
    help="Override platform detection (debian, alpine, fedora, arch, macos, windows).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    platform_name: str | None,
) -> None:
    """adaptive — install developer tools with whatever package manager this host has."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("ADAPTIVE_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("ADAPTIVE_LOG_FILE"),
        log_file_level=os.environ.get("ADAPTIVE_LOG_FILE_LEVEL"),
    )

    # ── Settings, platform, installer ───────────────────────────
    from adaptive.core.config.loader import ConfigError, load_settings
    from adaptive.core.models.platform import Platform
    from adaptive.core.services.install.orchestrator import PackageInstaller

    try:
        settings = load_settings(Path(config_path) if config_path else None)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    platform = settings.platform
    if platform_name:
        try:
            platform = Platform.parse(platform_name)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--platform") from None

    context.set_platform(platform)

    # Tests hand in a pre-built installer through ctx.obj
    installer = ctx.obj.get("installer")
    if installer is None:
        installer = PackageInstaller.from_settings(settings)
    context.set_installer(installer)
    ctx.obj["installer"] = installer
    ctx.obj["settings"] = settings


@cli.command("platform")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def platform_cmd(as_json: bool) -> None:
    """Show the detected platform and its package-manager chain."""
    from adaptive.core.services.install.chains import DEFAULT_CHAINS
    from adaptive.core.services.platform_detect import is_wsl

    platform = context.get_platform()
    chain = list(DEFAULT_CHAINS.get(platform, ()))
    wsl = is_wsl()

    if as_json:
        click.echo(json.dumps({"platform": platform.value, "wsl": wsl, "chain": chain}, indent=2))
        return

    click.secho(f"🖥️  {platform.value}", fg="cyan", bold=True, nl=False)
    click.echo(" (WSL)" if wsl else "")
    if chain:
        click.echo(f"   Chain: {' → '.join(chain)}")
    else:
        click.secho("   No package-manager chain for this platform", fg="yellow")


# ── Register sub-commands from adaptive/ui/cli/ ─────────────────

from adaptive.ui.cli.backends import backends  # noqa: E402
from adaptive.ui.cli.install import install, install_on  # noqa: E402
from adaptive.ui.cli.tools import tools  # noqa: E402

cli.add_command(install)
cli.add_command(install_on)
cli.add_command(backends)
cli.add_command(tools)


if __name__ == "__main__":
    cli()
