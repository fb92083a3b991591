"""Materialise packages locally and keep installed.json in step.

Install steps, in order:

1. Derive the manifest URL from the registry layout
2. Fetch and parse the manifest, keeping the raw bytes
3. Refuse if packages/<id>/ already exists
4. git clone --depth 1 <repository> packages/<id>
5. Write packages/<id>/manifest.json with the fetched bytes
6. Run the manifest's "install" command, if any (failure is a warning)
7. Upsert the installed.json record
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from nex.core.context import NexContext
from nex.core.errors import AlreadyInstalledError, InvalidPackageIdError, NotInstalledError
from nex.core.installed_store import LocalInstallation
from nex.core.manifest import PackageManifest, parse_manifest
from nex.core.package_id import PackageId

logger = logging.getLogger(__name__)

MANIFEST_FILE = "manifest.json"


@dataclass(frozen=True)
class InstallResult:
    """Outcome of a completed install.

    hook_exit_code is None when the manifest has no install command.
    """

    package_id: str
    manifest: PackageManifest
    install_path: Path
    hook_exit_code: int | None

    @property
    def hook_failed(self) -> bool:
        return self.hook_exit_code is not None and self.hook_exit_code != 0


@dataclass(frozen=True)
class UpdateResult:
    package_id: str
    old_version: str | None
    new_version: str
    install_path: Path

    @property
    def version_changed(self) -> bool:
        return self.old_version != self.new_version


def is_installed(ctx: NexContext, package_id: str) -> bool:
    """Check for packages/<id>/. installed.json is not consulted.

    Strings that are not valid identifiers are never installed.
    """
    try:
        canonical = str(PackageId.parse(package_id))
    except InvalidPackageIdError:
        return False
    return ctx.paths.package_dir(canonical).is_dir()


def install_package(ctx: NexContext, package_id: str) -> InstallResult:
    """Fetch, clone and register a package by canonical id.

    Raises:
        InvalidPackageIdError: If package_id is not author.name shaped
        PackageNotFoundError: If the registry has no manifest for it
        ManifestParseError: If the manifest is invalid
        AlreadyInstalledError: If packages/<id>/ already exists
        SubprocessFailedError: If git clone fails
        RuntimeMissingError: If git is not installed
    """
    pid = PackageId.parse(package_id)
    canonical = str(pid)

    ctx.feedback.info(f"Fetching manifest for {canonical}...")
    raw = ctx.registry.fetch_manifest_bytes(pid)
    manifest = parse_manifest(raw)

    install_path = ctx.paths.package_dir(canonical)
    if install_path.exists():
        raise AlreadyInstalledError(canonical)

    ctx.feedback.info(f"Cloning {manifest.repository}...")
    ctx.git.clone_shallow(manifest.repository, install_path)

    (install_path / MANIFEST_FILE).write_bytes(raw)
    logger.debug("Wrote manifest snapshot to %s", install_path / MANIFEST_FILE)

    hook_exit_code = None
    hook = manifest.install_command
    if hook is not None:
        ctx.feedback.info(f"Running install command: {hook}")
        hook_exit_code = ctx.shell.run(hook, cwd=install_path)
        if hook_exit_code != 0:
            ctx.feedback.warning(
                f"Install command failed (exit code {hook_exit_code}); "
                f"{canonical} is installed but may not work"
            )

    ctx.installed_store.upsert(
        LocalInstallation(id=canonical, version=manifest.version, install_path=install_path)
    )
    logger.debug("Recorded %s v%s in installed.json", canonical, manifest.version)

    return InstallResult(
        package_id=canonical,
        manifest=manifest,
        install_path=install_path,
        hook_exit_code=hook_exit_code,
    )


def remove_package(ctx: NexContext, package_id: str) -> Path:
    """Delete packages/<id>/ and its installed.json record.

    Returns:
        The removed install path

    Raises:
        InvalidPackageIdError: If package_id is not author.name shaped
        NotInstalledError: If the directory is absent
    """
    canonical = str(PackageId.parse(package_id))
    install_path = ctx.paths.package_dir(canonical)
    if not install_path.is_dir():
        raise NotInstalledError(canonical)

    shutil.rmtree(install_path)
    logger.debug("Deleted %s", install_path)

    if not ctx.installed_store.remove(canonical):
        logger.debug("%s had no installed.json record", canonical)
    return install_path


def update_package(ctx: NexContext, package_id: str) -> UpdateResult:
    """Pull the latest source of an installed package and refresh its manifest.

    Raises:
        NotInstalledError: If the package is not installed
        SubprocessFailedError: If git pull fails
    """
    pid = PackageId.parse(package_id)
    canonical = str(pid)
    install_path = ctx.paths.package_dir(canonical)
    if not install_path.is_dir():
        raise NotInstalledError(canonical)

    previous = ctx.installed_store.get(canonical)
    old_version = previous.version if previous is not None else None

    ctx.feedback.info(f"Fetching manifest for {canonical}...")
    raw = ctx.registry.fetch_manifest_bytes(pid)
    manifest = parse_manifest(raw)

    ctx.feedback.info(f"Pulling latest changes for {canonical}...")
    ctx.git.pull(install_path)

    (install_path / MANIFEST_FILE).write_bytes(raw)
    ctx.installed_store.upsert(
        LocalInstallation(id=canonical, version=manifest.version, install_path=install_path)
    )

    return UpdateResult(
        package_id=canonical,
        old_version=old_version,
        new_version=manifest.version,
        install_path=install_path,
    )
