"""Groups release notes into the sections shown by the viewer."""

from typing import Iterable, Sequence

from packaging import version
from pydantic import BaseModel

from release_notes_manager.release_notes.classifier import detect_display_type
from release_notes_manager.release_notes.models import ReleaseNote
from release_notes_manager.utils.helpers import parse_timestamp


class CommitEntry(BaseModel):
    """A single change flattened out of a release note."""

    message: str
    date: str
    type: str


class DeveloperGroup(BaseModel):
    """All changes by one developer within a minor version."""

    developer: str
    commit_count: int
    commits: list[CommitEntry]


class VersionSection(BaseModel):
    """A collapsible section covering one minor version."""

    minor_version: str
    latest_date: str
    expanded: bool
    developers: list[DeveloperGroup]


class ReleaseNotesView(BaseModel):
    """Everything the viewer template needs to render the page."""

    sections: list[VersionSection] = []
    error: bool = False


def minor_version_key(note_version: str) -> str:
    """Return the major.minor part of a version (e.g., 2.1.3 -> 2.1)."""
    major, minor = note_version.split(".")[:2]
    return f"{major}.{minor}"


def sort_notes_by_date(notes: Iterable[ReleaseNote]) -> list[ReleaseNote]:
    """Sort notes newest first, keeping the existing order for equal dates."""
    return sorted(notes, key=lambda note: parse_timestamp(note.date), reverse=True)


def group_notes_by_minor_version(notes: Iterable[ReleaseNote]) -> dict[str, list[ReleaseNote]]:
    """Group notes by minor version, each group ordered newest first."""
    grouped: dict[str, list[ReleaseNote]] = {}
    for note in notes:
        grouped.setdefault(minor_version_key(note.version), []).append(note)
    return {key: sort_notes_by_date(group) for key, group in grouped.items()}


def sort_minor_versions(minor_versions: Iterable[str]) -> list[str]:
    """Sort minor version keys newest first by numeric comparison."""
    return sorted(minor_versions, key=version.parse, reverse=True)


def group_notes_by_developer(notes: Iterable[ReleaseNote]) -> dict[str, list[ReleaseNote]]:
    """Group notes by developer in order of first appearance."""
    groups: dict[str, list[ReleaseNote]] = {}
    for note in notes:
        groups.setdefault(note.developer, []).append(note)
    return groups


def developer_commit_count(notes: Iterable[ReleaseNote]) -> int:
    """Count the changes across a developer's notes."""
    return sum(len(note.changes) for note in notes)


def flatten_developer_commits(notes: Iterable[ReleaseNote]) -> list[CommitEntry]:
    """Flatten a developer's changes into entries tagged with their note's date, newest first."""
    entries = [
        CommitEntry(message=change, date=note.date, type=detect_display_type(change))
        for note in notes
        for change in note.changes
    ]
    return sorted(entries, key=lambda entry: parse_timestamp(entry.date), reverse=True)


def format_display_date(timestamp: str) -> str:
    """Format a timestamp for section headers (e.g., May 1, 2024)."""
    moment = parse_timestamp(timestamp)
    return f"{moment:%B} {moment.day}, {moment.year}"


def build_version_section(minor_version: str, notes: Sequence[ReleaseNote], expanded: bool) -> VersionSection:
    """Build one minor version section from notes already ordered newest first."""
    developers = [
        DeveloperGroup(
            developer=developer,
            commit_count=developer_commit_count(developer_notes),
            commits=flatten_developer_commits(developer_notes),
        )
        for developer, developer_notes in group_notes_by_developer(notes).items()
    ]
    return VersionSection(
        minor_version=minor_version,
        latest_date=format_display_date(notes[0].date),
        expanded=expanded,
        developers=developers,
    )


def build_view(notes: Iterable[ReleaseNote]) -> ReleaseNotesView:
    """Build the viewer model: newest minor version first and expanded, the rest collapsed."""
    grouped = group_notes_by_minor_version(notes)
    sections = [
        build_version_section(minor_version, grouped[minor_version], expanded=index == 0)
        for index, minor_version in enumerate(sort_minor_versions(grouped))
    ]
    return ReleaseNotesView(sections=sections)
