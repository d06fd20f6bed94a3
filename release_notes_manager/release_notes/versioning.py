"""Version bump resolution for release notes."""

from datetime import datetime
from typing import Iterable, Sequence

import structlog
from packaging.version import Version

from release_notes_manager.release_notes.exceptions import InvalidVersionError
from release_notes_manager.release_notes.models import BumpKind, CommitType, ReleaseNote
from release_notes_manager.utils.constants import BUMP_PRIORITY, DAYS_THRESHOLD, SEMANTIC_VERSION_PATTERN, VERSION_BUMP_RULES
from release_notes_manager.utils.helpers import days_between, parse_timestamp

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def parse_version(version: str) -> tuple[int, int, int]:
    """Split a major.minor.patch version into its integer components."""
    if not isinstance(version, str) or not SEMANTIC_VERSION_PATTERN.match(version):
        raise InvalidVersionError(version)
    major, minor, patch = Version(version).release
    return major, minor, patch


def bump_version(version: str, bump_kind: BumpKind | str = BumpKind.PATCH) -> str:
    """Return the version that follows ``version`` for the given bump kind."""
    major, minor, patch = parse_version(version)
    bump_kind = BumpKind(bump_kind)

    if bump_kind is BumpKind.MAJOR:
        major, minor, patch = major + 1, 0, 0
    elif bump_kind is BumpKind.MINOR:
        minor, patch = minor + 1, 0
    else:
        patch += 1

    return f"{major}.{minor}.{patch}"


def bump_kind_for_type(commit_type: CommitType | str) -> BumpKind:
    """Look up the bump kind for a commit type, defaulting to a patch bump."""
    if isinstance(commit_type, CommitType):
        commit_type = commit_type.value
    return BumpKind(VERSION_BUMP_RULES.get(commit_type, BumpKind.PATCH.value))


def highest_priority_type(commit_types: Sequence[CommitType | str]) -> CommitType | str:
    """Return the commit type with the highest bump priority.

    Types are scanned left to right and a later type only replaces the current
    one when its priority is strictly higher, so ties keep the earliest type.
    """
    if not commit_types:
        raise ValueError("At least one commit type is required")

    highest = commit_types[0]
    for current in commit_types[1:]:
        if BUMP_PRIORITY[bump_kind_for_type(current).value] > BUMP_PRIORITY[bump_kind_for_type(highest).value]:
            highest = current
    return highest


def last_minor_release(notes: Iterable[ReleaseNote]) -> ReleaseNote | None:
    """Return the first note whose version has a non-zero minor or patch component."""
    for note in notes:
        _, minor, patch = note.version.split(".")
        if minor != "0" or patch != "0":
            return note
    return None


def should_bump_minor(notes: Sequence[ReleaseNote], now: datetime, days_threshold: int = DAYS_THRESHOLD) -> bool:
    """Decide whether enough time has passed since the last minor release to allow another."""
    last_minor = last_minor_release(notes)
    if last_minor is None:
        logger.info("No previous minor version found, allowing minor bump")
        return True

    days_since = days_between(parse_timestamp(last_minor.date), now)
    logger.info("Days since last minor version", days=days_since, threshold=days_threshold, version=last_minor.version)
    if days_since >= days_threshold:
        return True

    logger.info("Minor version bump conditions not met, using patch bump", days=days_since, threshold=days_threshold)
    return False


def resolve_bump_kind(
    commit_types: Sequence[CommitType | str],
    notes: Sequence[ReleaseNote],
    now: datetime,
    days_threshold: int = DAYS_THRESHOLD,
) -> tuple[CommitType | str, BumpKind]:
    """Resolve the bump kind for a set of commit types.

    Returns the highest priority commit type together with the bump kind to
    apply. A minor bump is downgraded to a patch bump when the previous minor
    release is more recent than ``days_threshold`` days.
    """
    highest = highest_priority_type(commit_types)
    bump_kind = bump_kind_for_type(highest)
    if bump_kind is BumpKind.MINOR and not should_bump_minor(notes, now, days_threshold):
        bump_kind = BumpKind.PATCH
    return highest, bump_kind
