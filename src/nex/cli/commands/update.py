import click

from nex.cli.error_boundary import cli_error_boundary
from nex.cli.output import error_line, info_line, ok_line, user_output
from nex.core.context import NexContext
from nex.core.errors import NexError
from nex.core.installer import UpdateResult, is_installed, update_package


def _report(result: UpdateResult) -> None:
    if result.version_changed:
        old = result.old_version or "unknown"
        user_output(ok_line(f"Updated {result.package_id}: v{old} -> v{result.new_version}"))
    else:
        user_output(ok_line(f"{result.package_id} is up to date (v{result.new_version})"))


@click.command("update")
@click.argument("name_or_id", required=False)
@click.pass_obj
@cli_error_boundary
def update_cmd(ctx: NexContext, name_or_id: str | None) -> None:
    """Update one package, or every installed package when NAME_OR_ID is omitted."""
    if name_or_id is not None:
        package_id = ctx.resolver.resolve(name_or_id)
        _report(update_package(ctx, package_id))
        return

    installed = [rec for rec in ctx.installed_store.load() if is_installed(ctx, rec.id)]
    if not installed:
        user_output(info_line("No packages installed"))
        return

    failures: list[str] = []
    for record in installed:
        try:
            _report(update_package(ctx, record.id))
        except NexError as e:
            user_output(error_line(f"{record.id}: {e}"))
            failures.append(record.id)

    if failures:
        user_output(error_line(f"{len(failures)} of {len(installed)} packages failed to update"))
        raise SystemExit(1)
