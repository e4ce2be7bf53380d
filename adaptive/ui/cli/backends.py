"""
CLI commands for inspecting package-manager backends.

Thin wrappers over the active installer's registry and chains.
"""

from __future__ import annotations

import json
import sys

import click

from adaptive.core import context


@click.group()
def backends() -> None:
    """Backends — which package managers this host has and what they offer."""


@backends.command("list")
@click.option("--all", "show_all", is_flag=True, help="Include backends outside this platform's chain.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_cmd(ctx: click.Context, show_all: bool, as_json: bool) -> None:
    """Show the platform's chain in priority order with availability."""
    from adaptive.core.services.install.chains import DEFAULT_CHAINS

    installer = ctx.obj["installer"]
    platform = context.get_platform()
    names = None if show_all else DEFAULT_CHAINS.get(platform, ())
    status = installer.registry.backend_status(names)

    if as_json:
        click.echo(json.dumps({"platform": platform.value, "backends": list(status.values())}, indent=2))
        return

    if not status:
        click.secho(f"⚠️  No package managers known for {platform.value}", fg="yellow")
        return

    click.secho(f"📦 Package managers ({platform.value}):", fg="cyan", bold=True)
    for position, entry in enumerate(status.values(), start=1):
        icon = "✅" if entry["available"] else "❌"
        click.echo(f"   {position}. {icon} {entry['name']}")
    click.echo()


@backends.command("search")
@click.argument("names", nargs=-1, required=True)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def search(ctx: click.Context, names: tuple[str, ...], as_json: bool) -> None:
    """Ask every backend in the chain for NAMES. Never installs."""
    installer = ctx.obj["installer"]
    platform = context.get_platform()
    attempts = installer.search(platform, list(names))
    found = [a for a in attempts if a.ok]

    if as_json:
        click.echo(json.dumps([a.model_dump() for a in attempts], indent=2))
        sys.exit(0 if found else 1)

    click.secho(f"🔍 {', '.join(names)} ({platform.value}):", fg="cyan", bold=True)
    for attempt in attempts:
        if attempt.ok:
            click.secho(f"   ✓ {attempt.backend:<8}", fg="green", nl=False)
            click.echo(f" {attempt.package}")
        elif attempt.status == "unavailable":
            click.secho(f"   ⊘ {attempt.backend:<8} not installed", fg="yellow")
        else:
            click.echo(f"   · {attempt.backend:<8} not found")

    if not found:
        click.echo()
        sys.exit(1)
