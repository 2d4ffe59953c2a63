"""
Claw CLI Entry Point

Command-line interface using Click.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

# Load .env file from the current directory
_env_path = Path.cwd() / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

from claw_harness.config import WorkspaceConfig
from claw_harness.skills import Skill, SkillLoader


def _make_loader(ctx: click.Context) -> SkillLoader:
    return SkillLoader(ctx.obj["config"])


@click.group()
@click.option(
    "--workspace", "-w",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Workspace root (defaults to $CLAW_WORKSPACE)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def cli(ctx: click.Context, workspace: Optional[Path], verbose: bool) -> None:
    """
    Claw CLI - inspect agent skills
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = WorkspaceConfig.from_env(workspace)


@cli.group()
def skill() -> None:
    """
    Inspect installed skills.
    """


@skill.command("list")
@click.option(
    "--agent", "-a",
    default=None,
    help="Only skills visible to this agent",
)
@click.pass_context
def list_skills(ctx: click.Context, agent: Optional[str]) -> None:
    """
    List installed skills.
    """
    loader = _make_loader(ctx)
    loader.load_all()

    registry = loader.registry
    entries = registry.items_for_agent(agent) if agent else registry.items()

    if not entries:
        extension = loader.config.skills.extension
        click.echo("No skills installed.")
        click.echo(f"Drop a skill {extension} file into workspace/agents/<agent>/skills/")
        return

    click.echo(f"\n  {len(entries)} skill(s):\n")
    for key, found in sorted(entries, key=lambda entry: entry[0]):
        endpoints = f" ({len(found.endpoints)} endpoints)" if found.endpoints else ""
        untrusted = " [unreviewed]" if not found.trusted else ""
        click.echo(f"  {key}{endpoints}{untrusted}")
    click.echo("")


@skill.command("show")
@click.argument("key")
@click.pass_context
def show_skill(ctx: click.Context, key: str) -> None:
    """
    Show details for one skill.

    Example: claw skill show charlie/billing
    """
    loader = _make_loader(ctx)
    loader.load_all()

    found = loader.get(key)
    if found is None:
        click.echo(f"Skill not found: {key}", err=True)
        sys.exit(1)

    _render_skill(Console(markup=False, highlight=False), key, found)


def _render_skill(console: Console, key: str, found: Skill) -> None:
    console.print(Text(found.name, style="bold"), f"({key})")
    console.print(f"Path:     {found.source_path}")
    console.print(f"Trusted:  {found.trusted}")
    if found.source:
        console.print(f"Source:   {found.source}")

    perms = found.permissions
    http = ", ".join(sorted(perms.http)) or "none"
    console.print(f"HTTP:     {http}")
    console.print(f"Shell:    {perms.shell}")
    console.print(f"File:     {perms.file}")

    if found.auth:
        console.print(f"Base URL: {found.auth.base_url or '-'}")
        console.print(f"Header:   {found.auth.header or '-'}")

    if found.endpoints:
        table = Table(title="Endpoints")
        table.add_column("Method")
        table.add_column("Path")
        table.add_column("Description")
        for endpoint in found.endpoints:
            table.add_row(endpoint.method, endpoint.path, endpoint.description)
        console.print(table)

    if found.implementation is not None:
        console.print(Syntax(found.implementation, "text", line_numbers=True))


@cli.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """
    Show current configuration.
    """
    cfg = ctx.obj["config"]

    click.echo("Claw Configuration")
    click.echo("=" * 40)
    click.echo(f"Workspace:      {cfg.root}")
    click.echo(f"Agents dir:     {cfg.agents_dir}")
    click.echo(f"Shared skills:  {cfg.shared_skills_dir}")
    click.echo(f"Extension:      {cfg.skills.extension}")
    click.echo(f"Skills enabled: {cfg.skills.enabled}")


@cli.command()
def version() -> None:
    """
    Show version information.
    """
    from claw_harness import __version__

    click.echo(f"Claw CLI v{__version__}")


def main() -> None:
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
