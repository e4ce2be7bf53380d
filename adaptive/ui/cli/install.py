"""
CLI commands for installing packages and catalog tools.

Thin wrappers over ``adaptive.core.services.install``. Both commands
accept ``--prefer-<backend>`` flags anywhere among their arguments.
"""

from __future__ import annotations

import json
import sys

import click

from adaptive.core.models.install import InstallOutcome

# Let --prefer-* flags through to the resolver untouched
_PASSTHROUGH = {"ignore_unknown_options": True}

_ATTEMPT_ICONS = {
    "installed": ("✓", "green"),
    "would_install": ("✓", "green"),
    "install_failed": ("✗", "red"),
    "not_found": ("·", "white"),
    "unavailable": ("⊘", "yellow"),
}


def _render_outcome(ctx: click.Context, outcome: InstallOutcome, as_json: bool) -> None:
    """Print an outcome and exit non-zero unless it installed."""
    if as_json:
        click.echo(json.dumps(outcome.to_dict(), indent=2))
        sys.exit(outcome.exit_code)

    if outcome.ok:
        label = "[dry-run] would install" if outcome.dry_run else "Installed"
        if not ctx.obj.get("quiet"):
            click.secho(f"✅ {label} {outcome.package} using {outcome.backend}", fg="green")
    # Failures were already reported on stderr by the resolver's logger

    if ctx.obj.get("verbose") and outcome.attempts:
        for attempt in outcome.attempts:
            icon, color = _ATTEMPT_ICONS[attempt.status]
            click.secho(f"   {icon} {attempt.backend:<8}", fg=color, nl=False)
            detail = attempt.status.replace("_", " ")
            if attempt.package:
                detail += f" ({attempt.package})"
            click.echo(f" {detail}")

    sys.exit(outcome.exit_code)


@click.command(context_settings=_PASSTHROUGH)
@click.argument("tool")
@click.argument("flags", nargs=-1, type=click.UNPROCESSED)
@click.option("--dry-run", is_flag=True, default=None, help="Probe package managers but don't install.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def install(
    ctx: click.Context,
    tool: str,
    flags: tuple[str, ...],
    dry_run: bool | None,
    as_json: bool,
) -> None:
    """Install a catalog TOOL using this platform's package managers.

    Examples:

        adaptive install jq

        adaptive install ripgrep --prefer-cargo

        adaptive install yq --dry-run
    """
    from adaptive.core.services.install.request import PREFER_FLAG
    from adaptive.core.services.install.tools import install_tool

    # A leading --prefer-* flag lands in TOOL; the tool is the first plain token
    tokens = [tool, *flags]
    names = [t for t in tokens if not PREFER_FLAG.match(t)]
    if not names:
        raise click.UsageError("no tool given")
    if len(names) > 1:
        raise click.UsageError(f"install takes one tool, got: {' '.join(names)}")
    tool = names[0]
    tokens.remove(tool)

    outcome = install_tool(tool, *tokens, dry_run=dry_run or None, installer=ctx.obj["installer"])
    _render_outcome(ctx, outcome, as_json)


@click.command("install-on", context_settings=_PASSTHROUGH)
@click.argument("os_family", metavar="OS")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("--dry-run", is_flag=True, default=None, help="Probe package managers but don't install.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def install_on(
    ctx: click.Context,
    os_family: str,
    args: tuple[str, ...],
    dry_run: bool | None,
    as_json: bool,
) -> None:
    """Install the first of ARGS found by OS's package-manager chain.

    ARGS are candidate package names, most likely first, mixed with
    --prefer-<backend> flags in any position.

    Examples:

        adaptive install-on debian jq

        adaptive install-on debian --prefer-snap ripgrep rg

        adaptive install-on windows jq jqlang.jq
    """
    from adaptive.core.models.platform import Platform
    from adaptive.core.services.install.orchestrator import install_on as _install_on

    try:
        platform = Platform.parse(os_family)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="OS") from None

    outcome = _install_on(platform, *args, dry_run=dry_run or None, installer=ctx.obj["installer"])
    _render_outcome(ctx, outcome, as_json)
