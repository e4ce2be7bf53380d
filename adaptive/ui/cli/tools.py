"""
CLI commands for the tool catalog.
"""

from __future__ import annotations

import json
import sys

import click

from adaptive.core import context


@click.group()
def tools() -> None:
    """Tools — the catalog behind `adaptive install`."""


@tools.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_cmd(ctx: click.Context, as_json: bool) -> None:
    """List catalog tools with their names on this platform."""
    from adaptive.core.services.install.tools import tool_catalog, variants_for

    platform = context.get_platform()
    catalog = tool_catalog(ctx.obj.get("settings"))

    if as_json:
        data = {name: variants_for(spec, platform) for name, spec in sorted(catalog.items())}
        click.echo(json.dumps(data, indent=2))
        return

    click.secho(f"🧰 Tools ({platform.value}):", fg="cyan", bold=True)
    for name, spec in sorted(catalog.items()):
        variants = variants_for(spec, platform)
        click.echo(f"   {name:<10} {', '.join(variants) or '—'}")
    click.echo()


@tools.command("show")
@click.argument("tool")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, tool: str, as_json: bool) -> None:
    """Show every platform's name variants for TOOL."""
    from adaptive.core.services.install.tools import tool_catalog

    spec = tool_catalog(ctx.obj.get("settings")).get(tool)
    if spec is None:
        click.secho(f"❌ Unknown tool: {tool}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({"name": tool, **spec.model_dump()}, indent=2))
        return

    click.secho(f"🧰 {tool}", fg="cyan", bold=True)
    if spec.homepage:
        click.echo(f"   {spec.homepage}")
    for platform_name, variants in spec.install.items():
        click.echo(f"   {platform_name:<10} {', '.join(variants)}")
