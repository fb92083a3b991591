"""Production Git implementation using subprocess."""

from pathlib import Path

from nex.core.git.abc import Git
from nex.core.subprocess_utils import run_subprocess_with_context


class RealGit(Git):
    """Runs the git binary. Progress output goes straight to the terminal."""

    def clone_shallow(self, repository: str, destination: Path) -> None:
        run_subprocess_with_context(
            ["git", "clone", "--depth", "1", repository, str(destination)],
            operation_context=f"clone {repository}",
            capture_output=False,
        )

    def pull(self, repo_dir: Path) -> None:
        run_subprocess_with_context(
            ["git", "pull", "--ff-only"],
            operation_context=f"update {repo_dir.name}",
            cwd=repo_dir,
            capture_output=False,
        )
