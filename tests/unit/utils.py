"""Helpers shared by the unit tests."""

from release_notes_manager.git.abc import VersionControlClientBase
from release_notes_manager.git.exceptions import GitCommandError
from release_notes_manager.release_notes.models import Commit


class FakeVersionControlClient(VersionControlClientBase):
    """In-memory version-control client recording the commits it is asked to create."""

    def __init__(self, history: list[Commit] | None = None, fail_commit: bool = False) -> None:
        self.history = history or []
        self.fail_commit = fail_commit
        self.requested_limits: list[int] = []
        self.commit_messages: list[str] = []

    def fetch_recent_history(self, limit: int) -> list[Commit]:
        self.requested_limits.append(limit)
        return self.history[:limit]

    def commit_all(self, message: str) -> None:
        if self.fail_commit:
            raise GitCommandError(["git", "commit", "-m", message], "nothing to commit")
        self.commit_messages.append(message)


def make_commit(message: str, author: str = "alice", commit_hash: str = "abc1234") -> Commit:
    """Build a commit with sensible defaults."""
    return Commit(
        hash=commit_hash,
        author=author,
        email=f"{author}@example.com",
        date="2024-06-14T10:00:00+00:00",
        message=message,
    )
