"""Run commands declared by installed packages.

A run resolves the name, installs the package on first use, checks the
declared runtime, picks a command template, then hands

    cd "<install_path>" && <template> <args...>

to the platform shell. The child's exit code is returned unchanged.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from nex.core.context import NexContext
from nex.core.errors import (
    AlreadyInstalledError,
    ManifestParseError,
    NoSuchCommandError,
    NotInstalledError,
    RuntimeMissingError,
)
from nex.core.installer import install_package, is_installed
from nex.core.manifest import DEFAULT_COMMAND, PackageManifest, parse_manifest
from nex.core.package_id import PackageId
from nex.core.runtime import (
    RuntimeType,
    find_runtime_binary,
    install_instructions,
    launcher_command,
)
from nex.core.shell.abc import Shell

logger = logging.getLogger(__name__)

LOCAL_MANIFEST_FILES = ("manifest.json", "nex.json")

_PYTHON = "python"
_PYTHON3 = "python3"


def load_local_manifest(install_path: Path) -> PackageManifest:
    """Load the manifest snapshot of an installed package.

    Raises:
        ManifestParseError: If neither manifest.json nor nex.json exists, or
            the file found is invalid
    """
    for filename in LOCAL_MANIFEST_FILES:
        candidate = install_path / filename
        if candidate.is_file():
            logger.debug("Loading local manifest %s", candidate)
            return parse_manifest(candidate.read_bytes())
    raise ManifestParseError(f"No manifest.json or nex.json found in {install_path}")


def ensure_runtime(manifest: PackageManifest, shell: Shell) -> None:
    """Fail unless the manifest's runtime is on PATH.

    Binary and unknown runtimes are not probed.

    Raises:
        RuntimeMissingError: If no executable for the runtime is found
    """
    runtime = manifest.runtime_type
    if runtime in (RuntimeType.UNKNOWN, RuntimeType.BINARY):
        return
    path = find_runtime_binary(runtime, shell)
    if path is None:
        raise RuntimeMissingError(runtime.value, install_instructions(runtime.value))
    logger.debug("Runtime %s found at %s", runtime, path)


def select_command_template(manifest: PackageManifest, requested: str) -> str:
    """Pick the command line for a requested command name.

    Falls back to launching the entrypoint for "default".

    Raises:
        NoSuchCommandError: If the command is not declared and no fallback applies
    """
    template = manifest.commands.get(requested)
    if template is not None:
        return template
    if requested == DEFAULT_COMMAND and manifest.entrypoint:
        return launcher_command(manifest.runtime_type, manifest.entrypoint)
    raise NoSuchCommandError(manifest.id, requested, list(manifest.commands))


def _command_positions(template: str) -> list[int]:
    """Offsets of unquoted 'python' tokens in command position.

    Command position is the start of the template or right after '&',
    ignoring whitespace.
    """
    positions: list[int] = []
    quote: str | None = None
    expect_command = True
    i = 0
    while i < len(template):
        ch = template[i]
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
            expect_command = False
        elif ch == "&":
            expect_command = True
        elif not ch.isspace():
            if expect_command and template.startswith(_PYTHON, i):
                end = i + len(_PYTHON)
                if end == len(template) or template[end].isspace() or template[end] == "&":
                    positions.append(i)
            expect_command = False
        i += 1
    return positions


def apply_python_fallback(template: str, shell: Shell, os_name: str) -> str:
    """Rewrite leading 'python' to 'python3' where only python3 exists.

    Applies on POSIX only. Quoted text, python3 and pythonw are left alone.
    """
    if os_name == "nt":
        return template
    if shell.which(_PYTHON) is not None or shell.which(_PYTHON3) is None:
        return template

    rewritten = template
    for position in reversed(_command_positions(template)):
        rewritten = rewritten[:position] + _PYTHON3 + rewritten[position + len(_PYTHON) :]
    if rewritten != template:
        logger.debug("python not on PATH, using python3: %s", rewritten)
    return rewritten


def quote_argument(arg: str) -> str:
    return f'"{arg}"' if " " in arg else arg


def build_shell_invocation(install_path: Path, template: str, args: Sequence[str]) -> str:
    """Command line that runs a template inside the install directory."""
    parts = [f'cd "{install_path}" && {template}']
    parts.extend(quote_argument(arg) for arg in args)
    return " ".join(parts)


def execute_package(
    ctx: NexContext, package_id: str, command: str, args: Sequence[str]
) -> int:
    """Run a command of an installed package and return its exit code.

    Raises:
        InvalidPackageIdError: If package_id is not author.name shaped
        NotInstalledError: If the package is not installed
        ManifestParseError: If the local manifest is missing or invalid
        RuntimeMissingError: If the declared runtime is not on PATH
        NoSuchCommandError: If the command is not declared
    """
    package_id = str(PackageId.parse(package_id))
    install_path = ctx.paths.package_dir(package_id)
    if not install_path.is_dir():
        raise NotInstalledError(package_id)

    manifest = load_local_manifest(install_path)
    ensure_runtime(manifest, ctx.shell)

    template = select_command_template(manifest, command)
    template = apply_python_fallback(template, ctx.shell, ctx.os_name)
    invocation = build_shell_invocation(install_path, template, args)

    logger.debug("Executing: %s", invocation)
    exit_code = ctx.shell.run(invocation)
    logger.debug("%s exited with %d", package_id, exit_code)
    return exit_code


def run_package(
    ctx: NexContext,
    name_or_id: str,
    command: str = DEFAULT_COMMAND,
    args: Sequence[str] = (),
) -> int:
    """Resolve, install on first use, then execute.

    Raises:
        PackageNotFoundError, AmbiguousPackageError: From resolution
        InvalidPackageIdError: If the resolved id is not author.name shaped
        NexError: Any install or execution failure
    """
    package_id = str(PackageId.parse(ctx.resolver.resolve(name_or_id)))

    if not is_installed(ctx, package_id):
        ctx.feedback.info(f"Package {package_id} is not installed. Installing...")
        try:
            result = install_package(ctx, package_id)
        except AlreadyInstalledError:
            logger.debug("%s appeared during install, continuing", package_id)
        else:
            package_id = result.package_id
            ctx.feedback.success(f"Installed {package_id} v{result.manifest.version}")

    return execute_package(ctx, package_id, command, args)
