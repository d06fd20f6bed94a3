"""Main release notes generation orchestration."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable

import structlog

from release_notes_manager.git.abc import VersionControlClientBase
from release_notes_manager.git.exceptions import GitCommandError
from release_notes_manager.release_notes.builder import build_release_notes, filter_commits, find_new_commits
from release_notes_manager.release_notes.exceptions import InvalidVersionError, ManifestError
from release_notes_manager.release_notes.models import ReleaseNotesResult, ReleaseNotesStatus
from release_notes_manager.release_notes.storage import load_manifest, load_release_notes, manifest_version, save_manifest, save_release_notes
from release_notes_manager.release_notes.versioning import parse_version
from release_notes_manager.utils.constants import (
    COMMIT_LIMIT,
    DAYS_THRESHOLD,
    DEFAULT_FILTER_PHRASES,
    RELEASE_COMMIT_MESSAGE,
)
from release_notes_manager.utils.helpers import format_timestamp

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    """Return the current time in UTC."""
    return datetime.now(timezone.utc)


class ReleaseNotesGenerator:
    """Orchestrates a release notes run from commit history to a version-control commit.

    The version-control client is injected so that history queries and commit
    creation can be replaced in tests. Nothing is written unless at least one
    new, non-housekeeping commit is found.
    """

    def __init__(
        self,
        client: VersionControlClientBase,
        notes_path: Path,
        manifest_path: Path,
        commit_limit: int = COMMIT_LIMIT,
        days_threshold: int = DAYS_THRESHOLD,
        filter_phrases: Iterable[str] = DEFAULT_FILTER_PHRASES,
        commit_message: str = RELEASE_COMMIT_MESSAGE,
        create_commit: bool = True,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize with the version-control client, file locations and run settings.

        Args:
            client: Client used to read history and create the final commit
            notes_path: Path to the release notes JSON file
            manifest_path: Path to the JSON manifest holding the version field
            commit_limit: Number of most recent commits to inspect
            days_threshold: Minimum days between minor version bumps
            filter_phrases: Phrases marking housekeeping commits to ignore
            commit_message: Message of the commit created after writing files
            create_commit: Whether to commit the written files
            clock: Returns the current time; the run timestamp comes from it
        """
        self.client = client
        self.notes_path = notes_path
        self.manifest_path = manifest_path
        self.commit_limit = commit_limit
        self.days_threshold = days_threshold
        self.filter_phrases = tuple(filter_phrases)
        self.commit_message = commit_message
        self.create_commit = create_commit
        self.clock = clock

    def generate(self, dry_run: bool = False) -> ReleaseNotesResult:
        """Generate release notes for new commits.

        Args:
            dry_run: If True, compute the new notes and version but write nothing

        Returns:
            Result of the generation process

        Raises:
            GitCommandError: If the commit history cannot be read
            ManifestError: If the manifest is missing, unparsable or holds an invalid version
        """
        logger.info("Fetching recent commits", limit=self.commit_limit)
        history = self.client.fetch_recent_history(self.commit_limit)
        commits = filter_commits(history, self.filter_phrases)
        logger.info("Found valid commits", count=len(commits), filtered=len(history) - len(commits))

        if not commits:
            logger.warning("No valid commits found to process")
            return ReleaseNotesResult(status=ReleaseNotesStatus.NO_CONTENT)

        notes = load_release_notes(self.notes_path)
        manifest = load_manifest(self.manifest_path)
        current_version = manifest_version(manifest)
        try:
            parse_version(current_version)
        except InvalidVersionError as exc:
            raise ManifestError(str(self.manifest_path), str(exc)) from exc
        logger.info("Current manifest version", version=current_version)

        new_commits = find_new_commits(commits, notes)
        logger.info("Found new commits to process", count=len(new_commits))
        if not new_commits:
            logger.info("No new commits to add to release notes")
            return ReleaseNotesResult(status=ReleaseNotesStatus.UP_TO_DATE, previous_version=current_version, version=current_version)

        now = self.clock()
        build = build_release_notes(
            new_commits,
            notes,
            current_version,
            timestamp=format_timestamp(now),
            now=now,
            days_threshold=self.days_threshold,
        )
        new_version = build.state.version
        result = ReleaseNotesResult(
            status=ReleaseNotesStatus.SUCCESS,
            previous_version=current_version,
            version=new_version,
            new_notes=len(build.authors),
            authors=[author_release.author for author_release in build.authors],
        )

        if dry_run:
            logger.info("Dry run mode - not writing files", previous_version=current_version, version=new_version)
            result.status = ReleaseNotesStatus.DRY_RUN
            return result

        save_manifest(self.manifest_path, manifest, new_version)
        save_release_notes(self.notes_path, build.state.notes)
        logger.info(
            "Processed new commits",
            commit_count=len(new_commits),
            author_count=len(build.authors),
            previous_version=current_version,
            version=new_version,
        )

        if self.create_commit:
            result.commit_created, result.error = self._commit()
        return result

    def _commit(self) -> tuple[bool, str | None]:
        """Commit the written files, reporting but not raising on failure."""
        logger.info("Creating commit", message=self.commit_message)
        try:
            self.client.commit_all(self.commit_message)
        except GitCommandError as exc:
            logger.error("Error creating commit", error=str(exc))
            return False, str(exc)
        return True, None
