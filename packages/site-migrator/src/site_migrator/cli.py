"""CLI entry point for site-migrator."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from site_migrator.config import MigratorConfig, load_config
from site_migrator.config.loader import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE
from site_migrator.exceptions import NoUpdateAvailableError, SiteMigratorError
from site_migrator.log import setup_logging
from site_migrator.migration import MigrationReport, compare
from site_migrator.tree import load_tree_file, write_tree_file
from site_migrator.updates import apply_update

app = typer.Typer(
    name="site-migrator",
    help="Compare a site against a newer template version and merge its additions.",
)

config_app = typer.Typer(help="Manage site-migrator configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: MigratorConfig | None = None


def _get_config() -> MigratorConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to site-migrator.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    _config = load_config(config)
    setup_logging(_config.log_level, _config.log_format)


_KIND_STYLES = {
    "added": "green",
    "removed": "red",
    "modified": "yellow",
}


def _display_report(report: MigrationReport, show_actions: bool) -> None:
    """Display a migration report as a Rich table."""
    title = (
        f"Template changes {report.from_version or '?'} -> {report.to_version or '?'} "
        f"({report.total_changes} total, {report.changes_requiring_action} need action)"
    )
    table = Table(title=title)
    table.add_column("Change", justify="center")
    table.add_column("Category", style="cyan")
    table.add_column("Path")
    table.add_column("Description")
    if show_actions:
        table.add_column("Action", style="yellow")

    for c in report.changes:
        style = _KIND_STYLES.get(c.kind.value, "white")
        row = [
            f"[{style}]{c.kind.value}[/{style}]",
            c.category.value,
            escape(c.path),
            escape(c.description),
        ]
        if show_actions:
            action = c.action_description or "-"
            row.append(f"(!) {action}" if c.requires_action else action)
        table.add_row(*row)
    rprint(table)


@app.command("compare")
def compare_cmd(
    user: Path = typer.Argument(..., help="User site tree (.json/.yaml)"),
    template: Path = typer.Argument(..., help="New template tree (.json/.yaml)"),
    from_version: str | None = typer.Option(None, "--from-version", help="Version the site tracks"),
    to_version: str | None = typer.Option(None, "--to-version", help="Template version"),
    format: str | None = typer.Option(None, "--format", "-f", help="Output format: table or json"),
) -> None:
    """Show what a template update would change."""
    cfg = _get_config()
    out_format = format or cfg.report.format
    if out_format not in ("table", "json"):
        rprint(f"[red]Error:[/red] Invalid format '{out_format}'. Choose table or json.")
        raise typer.Exit(1)

    try:
        report = compare(load_tree_file(user), load_tree_file(template), from_version, to_version)
    except SiteMigratorError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if out_format == "json":
        typer.echo(json.dumps(report.to_dict(), indent=2))
        return

    if not report.changes:
        rprint("[green]No template changes detected.[/green]")
        return
    _display_report(report, cfg.report.show_actions)


@app.command("apply")
def apply_cmd(
    user: Path = typer.Argument(..., help="User site tree (.json/.yaml)"),
    template: Path = typer.Argument(..., help="New template tree (.json/.yaml)"),
    from_version: str = typer.Option(..., "--from-version", help="Version the site tracks"),
    to_version: str = typer.Option(..., "--to-version", help="Template version"),
    output: Path = typer.Option(..., "--output", "-o", help="Where to write the merged tree"),
) -> None:
    """Merge the template's additions into the user tree and write the result."""
    cfg = _get_config()
    try:
        result = apply_update(
            load_tree_file(user),
            from_version,
            load_tree_file(template),
            to_version,
            flag_new_items=cfg.migration.flag_new_items,
        )
    except NoUpdateAvailableError as e:
        rprint(f"[green]Up to date:[/green] {escape(str(e))}")
        raise typer.Exit(0)
    except SiteMigratorError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    write_tree_file(result.tree, output)
    rprint(
        f"[green]Merged[/green] {result.applied_changes} of {result.report.total_changes} "
        f"change(s) from template {to_version}"
    )
    for path in result.applied_paths:
        rprint(f"  + {escape(path)}")
    rprint(f"[green]Written to[/green] {output}")


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default site-migrator.yaml in current directory."""
    target = Path(CONFIG_FILENAME)
    if target.exists() and not force:
        rprint(f"[yellow]{CONFIG_FILENAME} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    import yaml

    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


if __name__ == "__main__":
    app()
