import click

from nex.cli.ensure import Ensure
from nex.cli.error_boundary import cli_error_boundary
from nex.cli.output import machine_output, ok_line, user_output
from nex.core.alias_store import validate_shortcut
from nex.core.context import NexContext
from nex.core.package_id import PackageId


def _list_aliases(ctx: NexContext) -> None:
    aliases = ctx.alias_store.load()
    if not aliases:
        user_output("No aliases defined.")
    for shortcut, package_id in aliases.items():
        machine_output(click.style(f"{shortcut:<15}", bold=True) + f" -> {package_id}")

    user_output("")
    user_output("Usage:")
    user_output("  nex alias <shortcut> <package>   Create an alias")
    user_output("  nex alias --remove <shortcut>    Remove an alias")


@click.command("alias")
@click.argument("shortcut", required=False)
@click.argument("package", required=False)
@click.option("-r", "--remove", is_flag=True, help="Remove the alias SHORTCUT.")
@click.pass_obj
@cli_error_boundary
def alias_cmd(ctx: NexContext, shortcut: str | None, package: str | None, remove: bool) -> None:
    """List, show, create or remove package aliases.

    \b
    Examples:
      nex alias                  List aliases
      nex alias pp               Show what 'pp' points to
      nex alias pp pagepull      Create alias 'pp'
      nex alias --remove pp      Remove alias 'pp'
    """
    if remove:
        shortcut = Ensure.not_none(shortcut, "Usage: nex alias --remove <shortcut>")
        Ensure.invariant(package is None, "Usage: nex alias --remove <shortcut>")
        Ensure.invariant(
            ctx.alias_store.remove(shortcut), f"Alias '{shortcut}' does not exist"
        )
        user_output(ok_line(f"Removed alias '{shortcut}'"))
        return

    if shortcut is None:
        _list_aliases(ctx)
        return

    if package is None:
        target = ctx.alias_store.get(shortcut)
        if target is None:
            machine_output(f"'{shortcut}' is not an alias")
        else:
            machine_output(f"{shortcut} -> {target}")
        return

    validate_shortcut(shortcut)
    package_id = str(PackageId.parse(ctx.resolver.resolve_from_registry(package)))
    ctx.alias_store.set(shortcut, package_id)
    user_output(ok_line(f"Created alias: {shortcut} -> {package_id}"))
    user_output(f"  You can now use: nex run {shortcut}")
