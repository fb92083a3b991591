import click

from nex.cli.error_boundary import cli_error_boundary
from nex.cli.output import info_line, ok_line, user_output
from nex.core.context import NexContext
from nex.core.errors import AlreadyInstalledError
from nex.core.installer import install_package


@click.command("install")
@click.argument("name_or_id")
@click.pass_obj
@cli_error_boundary
def install_cmd(ctx: NexContext, name_or_id: str) -> None:
    """Install a package by short name, alias or author.package-name."""
    package_id = ctx.resolver.resolve(name_or_id)

    try:
        result = install_package(ctx, package_id)
    except AlreadyInstalledError as e:
        user_output(info_line(f"Package '{e.package_id}' is already installed"))
        user_output(f"  Use 'nex remove {e.package_id}' first to reinstall")
        return

    user_output(
        ok_line(f"Installed {result.manifest.name} v{result.manifest.version}")
    )
    user_output(f"  Run it with: nex run {result.package_id}")
