"""Release notes viewer: loads the persisted notes and renders them as a web page."""

from .exceptions import NotesLoadError
from .grouping import (
    CommitEntry,
    DeveloperGroup,
    ReleaseNotesView,
    VersionSection,
    build_view,
    flatten_developer_commits,
    group_notes_by_developer,
    group_notes_by_minor_version,
    minor_version_key,
    sort_minor_versions,
)
from .loader import NotesLoader
from .renderer import render_error_page, render_release_notes_page, render_viewer, write_viewer_page

__all__ = [
    "NotesLoadError",
    "NotesLoader",
    "CommitEntry",
    "DeveloperGroup",
    "VersionSection",
    "ReleaseNotesView",
    "build_view",
    "flatten_developer_commits",
    "group_notes_by_developer",
    "group_notes_by_minor_version",
    "minor_version_key",
    "sort_minor_versions",
    "render_release_notes_page",
    "render_error_page",
    "render_viewer",
    "write_viewer_page",
]
