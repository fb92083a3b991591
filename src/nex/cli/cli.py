import logging

import click

from nex import __version__
from nex.cli.commands.alias import alias_cmd
from nex.cli.commands.config import config_cmd
from nex.cli.commands.doctor import doctor_cmd
from nex.cli.commands.info import info_cmd
from nex.cli.commands.install import install_cmd
from nex.cli.commands.list_cmd import list_cmd
from nex.cli.commands.remove import remove_cmd
from nex.cli.commands.run import run_cmd
from nex.cli.commands.search import search_cmd
from nex.cli.commands.update import update_cmd
from nex.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "-v", "--version", prog_name="nex")
@click.option("--debug", is_flag=True, help="Show debug logging and full tracebacks.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Nex - install and run packages from a shared registry."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s"
        )

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)


cli.add_command(install_cmd)
cli.add_command(run_cmd)
cli.add_command(remove_cmd)
cli.add_command(update_cmd)
cli.add_command(list_cmd)
cli.add_command(search_cmd)
cli.add_command(info_cmd)
cli.add_command(alias_cmd)
cli.add_command(config_cmd)
cli.add_command(doctor_cmd)


def main() -> None:
    """CLI entry point used by the `nex` console script."""
    cli()
