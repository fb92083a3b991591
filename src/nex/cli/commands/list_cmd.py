"""Command to list installed packages."""

import click
from rich.console import Console
from rich.table import Table

from nex.cli.error_boundary import cli_error_boundary
from nex.cli.output import user_output
from nex.core.context import NexContext


@click.command("list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: NexContext) -> None:
    """List installed packages.

    Entries whose package directory no longer exists are marked missing.
    """
    installations = ctx.installed_store.load()
    if not installations:
        user_output("No packages installed.")
        user_output("  Install one with: nex install <package>")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("package", style="cyan", no_wrap=True)
    table.add_column("version", no_wrap=True)
    table.add_column("status", no_wrap=True)
    table.add_column("path", no_wrap=True)

    for record in installations:
        if record.install_path.is_dir():
            status = "[green]installed[/green]"
        else:
            status = "[red]missing[/red]"
        table.add_row(record.id, f"v{record.version}", status, str(record.install_path))

    console = Console(width=200)
    console.print(table)
