"""Fake Git operations for testing.

FakeGit simulates clones by creating the destination directory and
writing pre-configured repository files.
"""

from pathlib import Path

from nex.core.errors import SubprocessFailedError
from nex.core.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of Git operations.

    This class has NO public setup methods. All state is provided via
    constructor using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        repositories: dict[str, dict[str, str]] | None = None,
        failing_repositories: set[str] | None = None,
        pull_exit_code: int = 0,
    ) -> None:
        """Create FakeGit with pre-configured repositories.

        Args:
            repositories: Mapping of repository URL -> {relative path: file content}.
                Unknown repositories clone as an empty working tree.
            failing_repositories: Repository URLs whose clone exits with code 128
            pull_exit_code: Exit code simulated by pull()
        """
        self._repositories = repositories or {}
        self._failing_repositories = failing_repositories or set()
        self._pull_exit_code = pull_exit_code
        self._clone_calls: list[tuple[str, Path]] = []
        self._pull_calls: list[Path] = []

    def clone_shallow(self, repository: str, destination: Path) -> None:
        self._clone_calls.append((repository, destination))
        command = f"git clone --depth 1 {repository} {destination}"
        if repository in self._failing_repositories:
            raise SubprocessFailedError(command, 128, f"clone {repository}")

        destination.mkdir(parents=True)
        for relative, content in self._repositories.get(repository, {}).items():
            file_path = destination / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")

    def pull(self, repo_dir: Path) -> None:
        self._pull_calls.append(repo_dir)
        if self._pull_exit_code != 0:
            raise SubprocessFailedError(
                "git pull --ff-only", self._pull_exit_code, f"update {repo_dir.name}"
            )

    @property
    def clone_calls(self) -> list[tuple[str, Path]]:
        """Get the list of clone_shallow() calls as (repository, destination).

        This property is for test assertions only.
        """
        return self._clone_calls.copy()

    @property
    def pull_calls(self) -> list[Path]:
        """Get the list of pull() calls.

        This property is for test assertions only.
        """
        return self._pull_calls.copy()
