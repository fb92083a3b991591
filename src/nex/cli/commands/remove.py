import click

from nex.cli.error_boundary import cli_error_boundary
from nex.cli.output import ok_line, user_output
from nex.core.context import NexContext
from nex.core.installer import remove_package
from nex.core.package_id import PackageId


@click.command("remove")
@click.argument("name_or_id")
@click.pass_obj
@cli_error_boundary
def remove_cmd(ctx: NexContext, name_or_id: str) -> None:
    """Remove an installed package."""
    package_id = str(PackageId.parse(ctx.resolver.resolve(name_or_id)))
    remove_package(ctx, package_id)
    user_output(ok_line(f"Removed {package_id}"))
