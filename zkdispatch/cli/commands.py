"""CLI commands for zkdispatch.

Read-only diagnostics: the status-code catalog, the operation-kind table and
the effective configuration. Nothing here talks to a server.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from zkdispatch import __version__
from zkdispatch.config.access import get_config
from zkdispatch.config.loader import convert_to_camel, get_config_path
from zkdispatch.core.errors import ERROR_CATALOG, StatusCode
from zkdispatch.core.kinds import OPERATION_KINDS, status_ok_or_no_node

app = typer.Typer(
    name="zkdispatch",
    help=f"zkdispatch {__version__} - async result dispatch diagnostics",
    no_args_is_help=True,
)

console = Console()


@app.command("catalog")
def catalog_command(
    as_json: bool = typer.Option(False, "--json", help="Print machine-readable JSON"),
) -> None:
    """Show status codes and the errors they map to."""
    rows = []
    for status in sorted(ERROR_CATALOG, reverse=True):
        cls = ERROR_CATALOG[status]
        rows.append({
            "status": status,
            "name": StatusCode(status).name,
            "error": cls.__name__,
            "category": cls.category_default.value,
        })
    if as_json:
        console.print_json(json.dumps(rows))
        return
    table = Table(title="Error catalog")
    table.add_column("Status", justify="right")
    table.add_column("Code")
    table.add_column("Error")
    table.add_column("Category")
    for row in rows:
        table.add_row(str(row["status"]), row["name"], row["error"], row["category"])
    console.print(table)


@app.command("kinds")
def kinds_command() -> None:
    """Show operation kinds, their result fields and success rule."""
    table = Table(title="Operation kinds")
    table.add_column("Operation")
    table.add_column("Kind")
    table.add_column("Fields")
    table.add_column("Success")
    for name, kind in OPERATION_KINDS.items():
        success = "OK, NO_NODE" if kind.is_success is status_ok_or_no_node else "OK"
        table.add_row(name, kind.name, ", ".join(kind.result_keys) or "-", success)
    console.print(table)


@app.command("config")
def config_command(
    config_path: Optional[Path] = typer.Option(None, "--path", help="Config file (default ~/.zkdispatch/config.json)"),
) -> None:
    """Show the effective configuration."""
    path = config_path or get_config_path()
    try:
        cfg = get_config(config_path=path)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(f"Config: {path} {'[green]✓[/green]' if path.exists() else '[dim](defaults)[/dim]'}")
    console.print_json(json.dumps(convert_to_camel(cfg.model_dump())))


@app.command("version")
def version_command() -> None:
    """Show the installed version."""
    console.print(f"zkdispatch v{__version__}")


if __name__ == "__main__":
    app()
