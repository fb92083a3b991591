import click

from nex.cli.error_boundary import cli_error_boundary
from nex.cli.output import machine_output, user_output
from nex.core.context import NexContext
from nex.core.runtime import probe_tools


@click.command("doctor")
@click.pass_obj
@cli_error_boundary
def doctor_cmd(ctx: NexContext) -> None:
    """Report which runtimes and tools are available on PATH."""
    user_output(f"Nex home: {ctx.paths.home}")
    user_output(f"Registry: {ctx.registry.base_url}")
    user_output("")

    for status in probe_tools(ctx.shell):
        if status.found:
            mark = click.style("found", fg="green")
            machine_output(f"  {status.name:<12} {mark}  {status.path}")
        else:
            mark = click.style("missing", fg="yellow")
            machine_output(f"  {status.name:<12} {mark}")
