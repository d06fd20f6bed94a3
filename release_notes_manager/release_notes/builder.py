"""Builds release note records from new commits."""

from datetime import datetime
from typing import Iterable, Sequence

import structlog

from release_notes_manager.release_notes.classifier import detect_commit_type
from release_notes_manager.release_notes.models import AuthorRelease, BuildResult, BuildState, Commit, CommitType, ReleaseNote
from release_notes_manager.release_notes.versioning import bump_version, resolve_bump_kind
from release_notes_manager.utils.constants import DAYS_THRESHOLD, DEFAULT_FILTER_PHRASES

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def should_filter_commit(message: str, filter_phrases: Iterable[str] = DEFAULT_FILTER_PHRASES) -> bool:
    """Check whether a commit message marks a housekeeping commit (merge, rebase, pull request)."""
    lower_message = message.lower()
    return any(phrase.lower() in lower_message for phrase in filter_phrases)


def filter_commits(commits: Iterable[Commit], filter_phrases: Iterable[str] = DEFAULT_FILTER_PHRASES) -> list[Commit]:
    """Drop housekeeping commits, keeping the original order."""
    filter_phrases = tuple(filter_phrases)
    return [commit for commit in commits if not should_filter_commit(commit.message, filter_phrases)]


def commit_exists(message: str, notes: Iterable[ReleaseNote]) -> bool:
    """Check whether a commit message is already represented in any existing release note.

    A message matches a recorded change when either one contains the other,
    ignoring case. Every note is searched regardless of its version.
    """
    lower_message = message.lower()
    for note in notes:
        for change in note.changes:
            lower_change = change.lower()
            if lower_message in lower_change or lower_change in lower_message:
                return True
    return False


def find_new_commits(commits: Iterable[Commit], notes: Sequence[ReleaseNote]) -> list[Commit]:
    """Return the commits not yet recorded in the release notes."""
    return [commit for commit in commits if not commit_exists(commit.message, notes)]


def group_commits_by_author(commits: Iterable[Commit]) -> dict[str, list[Commit]]:
    """Group commits by author name, ordered by each author's first appearance."""
    commits_by_author: dict[str, list[Commit]] = {}
    for commit in commits:
        commits_by_author.setdefault(commit.author, []).append(commit)
    return commits_by_author


def add_author_release_note(
    state: BuildState,
    author: str,
    commits: Sequence[Commit],
    timestamp: str,
    now: datetime,
    days_threshold: int = DAYS_THRESHOLD,
) -> tuple[BuildState, AuthorRelease]:
    """Produce the next build state with one new release note for ``author`` at the front."""
    commit_types = [detect_commit_type(commit.message) for commit in commits]
    highest_type, bump_kind = resolve_bump_kind(commit_types, state.notes, now, days_threshold)
    new_version = bump_version(state.version, bump_kind)

    release_note = ReleaseNote(
        version=new_version,
        date=timestamp,
        developer=author,
        changes=[commit.message for commit in commits],
    )
    highest_type_name = highest_type.value if isinstance(highest_type, CommitType) else highest_type
    logger.info(
        "Added release note",
        author=author,
        version=new_version,
        commit_count=len(commits),
        highest_priority_type=highest_type_name,
        bump_kind=bump_kind.value,
    )
    author_release = AuthorRelease(
        author=author,
        commit_count=len(commits),
        highest_priority_type=highest_type_name,
        bump_kind=bump_kind,
        version=new_version,
    )
    return BuildState(notes=(release_note, *state.notes), version=new_version), author_release


def build_release_notes(
    commits: Sequence[Commit],
    notes: Sequence[ReleaseNote],
    current_version: str,
    timestamp: str,
    now: datetime,
    days_threshold: int = DAYS_THRESHOLD,
) -> BuildResult:
    """Build one release note per author and prepend them to the existing notes.

    Authors are processed in order of first appearance. Each author's bump
    starts from the version produced for the previous author, and each new note
    is placed at the front, so the last processed author ends up first.
    """
    commits_by_author = group_commits_by_author(commits)
    logger.info("Commits grouped by author", author_count=len(commits_by_author), commit_count=len(commits))

    state = BuildState(notes=tuple(notes), version=current_version)
    author_releases: list[AuthorRelease] = []
    for author, author_commits in commits_by_author.items():
        logger.debug("Processing commits for author", author=author, commit_count=len(author_commits))
        state, author_release = add_author_release_note(state, author, author_commits, timestamp, now, days_threshold)
        author_releases.append(author_release)
    return BuildResult(state=state, authors=tuple(author_releases))
