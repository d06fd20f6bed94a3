"""Unit tests for the git command line client."""

import shutil
import subprocess
from pathlib import Path

import pytest

from release_notes_manager.git.client import GitCLIClient, parse_git_log
from release_notes_manager.git.exceptions import GitCommandError

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git executable not available")


def test_parse_git_log() -> None:
    """Test parsing well-formed git log lines."""
    output = (
        "a1b2c3d|Alice Smith|alice@example.com|2024-06-14T10:00:00+02:00|feat: add search\n"
        "e4f5a6b|Bob|bob@example.com|2024-06-13T09:00:00+00:00|fix: handle a|b pipes in subjects\n"
    )
    commits = parse_git_log(output)

    assert len(commits) == 2
    assert commits[0].hash == "a1b2c3d"
    assert commits[0].author == "Alice Smith"
    assert commits[0].email == "alice@example.com"
    assert commits[0].date == "2024-06-14T10:00:00+02:00"
    assert commits[0].message == "feat: add search"
    assert commits[1].message == "fix: handle a|b pipes in subjects"


def test_parse_git_log_skips_blank_and_malformed_lines() -> None:
    """Test that blank or truncated lines are ignored."""
    output = "\n\nshort|line\n a1b2c3d | Alice | alice@example.com | 2024-06-14T10:00:00+00:00 |  docs: trim  \n"
    commits = parse_git_log(output)

    assert len(commits) == 1
    assert commits[0].author == "Alice"
    assert commits[0].message == "docs: trim"


def test_parse_git_log_empty_output() -> None:
    """Test that an empty repository yields no commits."""
    assert parse_git_log("") == []


def test_run_wraps_missing_executable(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a missing git executable raises GitCommandError."""

    def raise_not_found(*args: object, **kwargs: object) -> None:
        raise FileNotFoundError("git")

    monkeypatch.setattr(subprocess, "run", raise_not_found)
    with pytest.raises(GitCommandError, match="git executable not found"):
        GitCLIClient().fetch_recent_history(5)


def init_repository(path: Path) -> None:
    """Create a git repository with a local identity."""
    for command in (
        ["git", "init", "-q"],
        ["git", "config", "user.name", "Alice"],
        ["git", "config", "user.email", "alice@example.com"],
        ["git", "config", "commit.gpgsign", "false"],
    ):
        subprocess.run(command, cwd=path, check=True, capture_output=True)


@pytest.mark.integration
@requires_git
def test_fetch_recent_history_and_commit_all(tmp_path: Path) -> None:
    """Test reading history from and committing to a real repository."""
    init_repository(tmp_path)
    client = GitCLIClient(tmp_path)

    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    client.commit_all("feat: first")
    (tmp_path / "b.txt").write_text("b", encoding="utf-8")
    client.commit_all("fix: second | with pipe")

    commits = client.fetch_recent_history(30)
    assert [commit.message for commit in commits] == ["fix: second | with pipe", "feat: first"]
    assert commits[0].author == "Alice"
    assert commits[0].email == "alice@example.com"

    assert len(client.fetch_recent_history(1)) == 1


@pytest.mark.integration
@requires_git
def test_commit_all_without_changes_fails(tmp_path: Path) -> None:
    """Test that committing a clean tree raises GitCommandError."""
    init_repository(tmp_path)
    client = GitCLIClient(tmp_path)
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    client.commit_all("feat: first")

    with pytest.raises(GitCommandError):
        client.commit_all("release note")


@pytest.mark.integration
@requires_git
def test_fetch_recent_history_outside_repository(tmp_path: Path) -> None:
    """Test that reading history outside a repository raises GitCommandError."""
    with pytest.raises(GitCommandError):
        GitCLIClient(tmp_path).fetch_recent_history(5)
