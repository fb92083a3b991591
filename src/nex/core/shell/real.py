"""Production shell implementation."""

import logging
import shutil
import subprocess
from pathlib import Path

from nex.core.shell.abc import Shell

logger = logging.getLogger(__name__)


class RealShell(Shell):
    """Probes PATH with shutil.which and runs commands with shell=True."""

    def which(self, name: str) -> str | None:
        return shutil.which(name)

    def run(self, command: str, cwd: Path | None = None) -> int:
        logger.debug("Shell: %s (cwd=%s)", command, cwd)
        result = subprocess.run(command, shell=True, cwd=cwd, check=False)
        return result.returncode
