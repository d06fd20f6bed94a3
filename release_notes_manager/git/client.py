"""Runs git as a subprocess to read history and create commits."""

import subprocess
from pathlib import Path

import structlog

from release_notes_manager.git.abc import VersionControlClientBase
from release_notes_manager.git.exceptions import GitCommandError
from release_notes_manager.release_notes.models import Commit
from release_notes_manager.utils.constants import GIT_LOG_FIELD_SEPARATOR, GIT_LOG_FORMAT

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def parse_git_log(output: str) -> list[Commit]:
    """Parse ``git log`` output produced with GIT_LOG_FORMAT into commits.

    The subject is everything after the fourth separator, so subjects that
    themselves contain the separator are kept whole. Blank and truncated
    lines are skipped.
    """
    commits: list[Commit] = []
    for line in output.strip().splitlines():
        if not line.strip():
            continue
        parts = line.split(GIT_LOG_FIELD_SEPARATOR)
        if len(parts) < 5:
            logger.warning("Skipping malformed git log line", line=line)
            continue
        commit_hash, author, email, date, *message_parts = parts
        commits.append(
            Commit(
                hash=commit_hash.strip(),
                author=author.strip(),
                email=email.strip(),
                date=date.strip(),
                message=GIT_LOG_FIELD_SEPARATOR.join(message_parts).strip(),
            )
        )
    return commits


class GitCLIClient(VersionControlClientBase):
    """Version-control client backed by the git command line."""

    def __init__(self, repo_dir: Path | None = None) -> None:
        """Initialize with the working directory git is run in (defaults to the current directory)."""
        self.repo_dir = repo_dir

    def _run(self, command: list[str]) -> str:
        logger.debug("Running git command", command=" ".join(command), cwd=str(self.repo_dir or "."))
        try:
            result = subprocess.run(command, capture_output=True, text=True, check=True, cwd=self.repo_dir)
        except FileNotFoundError as exc:
            raise GitCommandError(command, "git executable not found") from exc
        except subprocess.CalledProcessError as exc:
            raise GitCommandError(command, (exc.stderr or exc.stdout or "").strip() or f"exit status {exc.returncode}") from exc
        return result.stdout

    def fetch_recent_history(self, limit: int) -> list[Commit]:
        """Fetch the most recent ``limit`` commits, newest first."""
        output = self._run(["git", "log", f"-{limit}", f"--pretty=format:{GIT_LOG_FORMAT}", "--date=iso-strict"])
        commits = parse_git_log(output)
        logger.debug("Fetched git history", requested=limit, received=len(commits))
        return commits

    def commit_all(self, message: str) -> None:
        """Stage every working-tree change and create a commit with ``message``."""
        self._run(["git", "add", "."])
        self._run(["git", "commit", "-m", message])
        logger.info("Created commit", message=message)
