"""Tests for the in-memory fakes used across the suite."""

from pathlib import Path

import pytest

from nex.core.errors import SubprocessFailedError, TransportError
from nex.core.git.fake import FakeGit
from nex.core.http.abc import HttpResponse
from nex.core.http.fake import FakeHttpFetcher
from nex.core.shell.fake import FakeShell
from nex.core.user_feedback import FakeUserFeedback


def test_fake_http_serves_bodies_and_404s() -> None:
    http = FakeHttpFetcher(
        responses={
            "https://x/a": "text",
            "https://x/b": b"bytes",
            "https://x/c": HttpResponse(content=b"gone", status_code=410),
        }
    )

    assert http.get("https://x/a") == HttpResponse(content=b"text", status_code=200)
    assert http.get("https://x/b").content == b"bytes"
    assert http.get("https://x/c").status_code == 410
    assert http.get("https://x/d").status_code == 404
    assert http.requested_urls == ["https://x/a", "https://x/b", "https://x/c", "https://x/d"]


def test_fake_http_unreachable() -> None:
    http = FakeHttpFetcher(unreachable={"https://down"})

    with pytest.raises(TransportError, match="https://down"):
        http.get("https://down")


def test_fake_git_clone_writes_files(tmp_path: Path) -> None:
    git = FakeGit(repositories={"https://git/r.git": {"src/main.py": "print(1)"}})

    git.clone_shallow("https://git/r.git", tmp_path / "r")

    assert (tmp_path / "r" / "src" / "main.py").read_text(encoding="utf-8") == "print(1)"
    assert git.clone_calls == [("https://git/r.git", tmp_path / "r")]


def test_fake_git_clone_into_existing_directory_fails(tmp_path: Path) -> None:
    (tmp_path / "r").mkdir()

    with pytest.raises(FileExistsError):
        FakeGit().clone_shallow("https://git/r.git", tmp_path / "r")


def test_fake_git_failing_clone(tmp_path: Path) -> None:
    git = FakeGit(failing_repositories={"https://git/r.git"})

    with pytest.raises(SubprocessFailedError):
        git.clone_shallow("https://git/r.git", tmp_path / "r")

    assert not (tmp_path / "r").exists()


def test_fake_shell_matches_command_suffix(tmp_path: Path) -> None:
    shell = FakeShell(command_exit_codes={"false": 1}, default_exit_code=0)

    assert shell.run('cd "/x" && false') == 1
    assert shell.run("true", cwd=tmp_path) == 0
    assert shell.command_calls == [('cd "/x" && false', None), ("true", tmp_path)]


def test_fake_user_feedback_records_levels() -> None:
    feedback = FakeUserFeedback()

    feedback.info("a")
    feedback.warning("b")
    feedback.success("c")

    assert feedback.messages == [("info", "a"), ("warning", "b"), ("success", "c")]
    assert feedback.messages_at("warning") == ["b"]
