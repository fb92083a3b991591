import click

from nex.cli.error_boundary import cli_error_boundary
from nex.core.context import NexContext
from nex.core.executor import run_package
from nex.core.manifest import DEFAULT_COMMAND


def split_command_and_args(tokens: tuple[str, ...]) -> tuple[str, list[str]]:
    """Separate the optional command name from the forwarded arguments.

    A first token starting with '-' is an argument, not a command name.
    """
    if tokens and not tokens[0].startswith("-"):
        return tokens[0], list(tokens[1:])
    return DEFAULT_COMMAND, list(tokens)


@click.command(
    "run",
    context_settings=dict(ignore_unknown_options=True, allow_interspersed_args=False),
)
@click.argument("name_or_id")
@click.argument("command_and_args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
@cli_error_boundary
def run_cmd(ctx: NexContext, name_or_id: str, command_and_args: tuple[str, ...]) -> None:
    """Run a package command, installing the package on first use.

    \b
    Examples:
      nex run hello
      nex run hello greet --name "Ada Lovelace"
      nex run alice.hello --verbose
    """
    command, args = split_command_and_args(command_and_args)
    exit_code = run_package(ctx, name_or_id, command, args)
    if exit_code != 0:
        raise SystemExit(exit_code)
