import click

from nex.cli.ensure import Ensure
from nex.cli.error_boundary import cli_error_boundary
from nex.cli.output import info_line, machine_output, ok_line, user_output
from nex.core.config_store import KNOWN_KEYS, format_config_value, parse_config_value
from nex.core.context import NexContext


def _show_all(ctx: NexContext) -> None:
    values = ctx.config_store.load()
    if not values:
        user_output("No configuration set.")
    for key, value in values.items():
        machine_output(f"{key} = {format_config_value(value)}")

    user_output("")
    user_output("Usage:")
    user_output("  nex config <key>              Get a value")
    user_output("  nex config <key> <value>      Set a value")
    user_output("  nex config --unset <key>      Remove a value")
    user_output("")
    user_output("Available keys:")
    for key, description in KNOWN_KEYS.items():
        user_output(f"  {key:<17} {description}")


@click.command("config")
@click.argument("key", required=False)
@click.argument("value", required=False)
@click.option("--unset", is_flag=True, help="Remove KEY from the configuration.")
@click.pass_obj
@cli_error_boundary
def config_cmd(ctx: NexContext, key: str | None, value: str | None, unset: bool) -> None:
    """Show, get, set or unset configuration values."""
    if unset:
        key = Ensure.not_none(key, "Usage: nex config --unset <key>")
        if ctx.config_store.unset(key):
            user_output(ok_line(f"Removed '{key}' from config"))
        else:
            user_output(info_line(f"'{key}' was not set"))
        return

    if key is None:
        _show_all(ctx)
        return

    if value is None:
        current = ctx.config_store.get(key)
        if current is None:
            machine_output(f"{key}: (not set)")
        else:
            machine_output(format_config_value(current))
        return

    ctx.config_store.set(key, parse_config_value(key, value))
    user_output(ok_line(f"Set {key} = {value}"))
