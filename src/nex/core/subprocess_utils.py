"""Subprocess execution with enriched error context."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from nex.core.errors import RuntimeMissingError, SubprocessFailedError
from nex.core.runtime import install_instructions

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    capture_output: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess and raise engine errors on failure.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation ("clone foo")
        cwd: Working directory for command execution
        capture_output: Whether to capture stdout/stderr (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        SubprocessFailedError: If command exits non-zero
        RuntimeMissingError: If the command binary is not found
    """
    cmd_str = " ".join(str(arg) for arg in cmd)
    logger.debug("Running: %s (cwd=%s)", cmd_str, cwd)

    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=capture_output,
            text=True,
            encoding="utf-8",
            check=False,
            **kwargs,
        )
    except FileNotFoundError as e:
        raise RuntimeMissingError(cmd[0], install_instructions(cmd[0])) from e

    if result.returncode != 0:
        error = SubprocessFailedError(cmd_str, result.returncode, operation_context)
        if capture_output and result.stderr and result.stderr.strip():
            error.add_note(f"stderr: {result.stderr.strip()}")
        raise error

    return result
