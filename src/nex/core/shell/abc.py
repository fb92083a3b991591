"""Shell operations: PATH probing and command execution."""

from abc import ABC, abstractmethod
from pathlib import Path


class Shell(ABC):
    """Abstract interface for shell operations.

    Provides dependency injection so tests can simulate which tools are on
    PATH and what commands exit with.
    """

    @abstractmethod
    def which(self, name: str) -> str | None:
        """Return the absolute path of an executable on PATH, or None."""
        ...

    @abstractmethod
    def run(self, command: str, cwd: Path | None = None) -> int:
        """Run a command line through the platform shell and wait for it.

        Output is inherited from the current process.

        Returns:
            Exit code of the command
        """
        ...
