"""Git operations needed to materialise packages.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using the git binary
- FakeGit: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def clone_shallow(self, repository: str, destination: Path) -> None:
        """Clone the remote HEAD of a repository with depth 1.

        Raises:
            SubprocessFailedError: If git exits non-zero
            RuntimeMissingError: If git is not installed
        """
        ...

    @abstractmethod
    def pull(self, repo_dir: Path) -> None:
        """Fast-forward an existing clone to the remote HEAD.

        Raises:
            SubprocessFailedError: If git exits non-zero
            RuntimeMissingError: If git is not installed
        """
        ...
