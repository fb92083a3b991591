import click
from rich.console import Console
from rich.table import Table

from nex.cli.error_boundary import cli_error_boundary
from nex.cli.output import user_output
from nex.core.context import NexContext


@click.command("search")
@click.argument("query")
@click.pass_obj
@cli_error_boundary
def search_cmd(ctx: NexContext, query: str) -> None:
    """Search the registry by id, name, description or keyword."""
    matches = ctx.registry.search(query)
    if not matches:
        user_output(f"No packages found matching '{query}'")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("package", style="cyan", no_wrap=True)
    table.add_column("short name", no_wrap=True)
    table.add_column("description")

    for entry in matches:
        table.add_row(entry.id, entry.short_name or "-", entry.description or "")

    console = Console(width=200)
    console.print(table)
    user_output(f"{len(matches)} package(s) found")
