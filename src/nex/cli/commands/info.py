import click

from nex.cli.error_boundary import cli_error_boundary
from nex.cli.output import machine_output
from nex.core.context import NexContext
from nex.core.installer import is_installed
from nex.core.manifest import PackageManifest, parse_manifest
from nex.core.package_id import PackageId
from nex.core.runtime import DISPLAY_NAMES


def _label(text: str) -> str:
    return click.style(f"{text}:".ljust(14), bold=True)


def _format_manifest(manifest: PackageManifest, installed: bool) -> list[str]:
    runtime = DISPLAY_NAMES[manifest.runtime_type]
    if manifest.runtime.version:
        runtime += f" {manifest.runtime.version}"

    lines = [
        click.style(manifest.name, fg="cyan", bold=True) + f" v{manifest.version}",
        "",
        f"  {_label('ID')}{manifest.id}",
    ]
    if manifest.description:
        lines.append(f"  {_label('Description')}{manifest.description}")
    if manifest.author:
        lines.append(f"  {_label('Author')}{manifest.author}")
    if manifest.license:
        lines.append(f"  {_label('License')}{manifest.license}")
    lines.append(f"  {_label('Repository')}{manifest.repository}")
    lines.append(f"  {_label('Runtime')}{runtime}")
    if manifest.keywords:
        lines.append(f"  {_label('Keywords')}{', '.join(manifest.keywords)}")

    if manifest.commands:
        lines.append("")
        lines.append(click.style("  Commands:", bold=True))
        for name, template in manifest.commands.items():
            lines.append(f"    {name:<12} {template}")

    lines.append("")
    status = click.style("yes", fg="green") if installed else click.style("no", fg="yellow")
    lines.append(f"  {_label('Installed')}{status}")
    return lines


@click.command("info")
@click.argument("name_or_id")
@click.pass_obj
@cli_error_boundary
def info_cmd(ctx: NexContext, name_or_id: str) -> None:
    """Show details about a package from the registry."""
    package_id = PackageId.parse(ctx.resolver.resolve(name_or_id))
    manifest = parse_manifest(ctx.registry.fetch_manifest_bytes(package_id))

    for line in _format_manifest(manifest, is_installed(ctx, str(package_id))):
        machine_output(line)
