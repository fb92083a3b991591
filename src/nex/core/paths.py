"""Location of the user-scoped Nex home and its on-disk layout.

Layout under the home directory:

    config.json           ConfigEntry map
    aliases.json          Alias map
    installed.json        list of LocalInstallation records
    packages/<id>/        working tree of a cloned package
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

NEX_DIR_NAME = ".nex"


def discover_home(environ: Mapping[str, str] | None = None, os_name: str | None = None) -> Path:
    """Return the Nex home directory for the current user.

    Uses USERPROFILE on Windows and HOME elsewhere. Falls back to
    Path.home() when the variable is unset.
    """
    env = os.environ if environ is None else environ
    platform_name = os.name if os_name is None else os_name

    var = "USERPROFILE" if platform_name == "nt" else "HOME"
    base = env.get(var)
    if not base:
        logger.debug("%s is not set, falling back to Path.home()", var)
        return Path.home() / NEX_DIR_NAME
    return Path(base) / NEX_DIR_NAME


@dataclass(frozen=True)
class NexPaths:
    """Resolved paths for one Nex home directory."""

    home: Path

    @property
    def config_file(self) -> Path:
        return self.home / "config.json"

    @property
    def aliases_file(self) -> Path:
        return self.home / "aliases.json"

    @property
    def installed_file(self) -> Path:
        return self.home / "installed.json"

    @property
    def packages_dir(self) -> Path:
        return self.home / "packages"

    def package_dir(self, package_id: str) -> Path:
        """Get the install directory for a canonical package id."""
        return self.packages_dir / package_id

    def ensure_directories(self) -> None:
        """Create the home and packages directories if missing.

        Idempotent. Raises OSError only when the filesystem refuses.
        """
        self.packages_dir.mkdir(parents=True, exist_ok=True)
