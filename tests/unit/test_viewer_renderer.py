"""Unit tests for rendering the viewer page."""

import json
from pathlib import Path

from release_notes_manager.viewer.grouping import CommitEntry, DeveloperGroup, ReleaseNotesView, VersionSection
from release_notes_manager.viewer.loader import NotesLoader
from release_notes_manager.viewer.renderer import (
    render_error_page,
    render_release_notes_page,
    render_viewer,
    write_viewer_page,
)


def make_view(message: str = "feat: add search") -> ReleaseNotesView:
    """Build a single-section view."""
    return ReleaseNotesView(
        sections=[
            VersionSection(
                minor_version="1.3",
                latest_date="June 15, 2024",
                expanded=True,
                developers=[
                    DeveloperGroup(
                        developer="alice",
                        commit_count=1,
                        commits=[CommitEntry(message=message, date="2024-06-15T12:00:00.000Z", type="feat")],
                    )
                ],
            )
        ]
    )


def test_render_release_notes_page() -> None:
    """Test the content of a rendered section."""
    page = render_release_notes_page(make_view())

    assert "v1.3.x" in page
    assert "Release 1.3" in page
    assert "Latest: June 15, 2024" in page
    assert "1 commits" in page
    assert '<span class="commit-tag feat">feat</span>' in page
    assert "feat: add search" in page
    assert 'class="version-header active"' in page
    assert '<div id="error" style="display: none;">' in page


def test_render_release_notes_page_escapes_messages() -> None:
    """Test that commit messages are HTML-escaped."""
    page = render_release_notes_page(make_view("fix: handle <script> tags & more"))

    assert "<script> tags" not in page
    assert "fix: handle &lt;script&gt; tags &amp; more" in page


def test_render_error_page() -> None:
    """Test that the error page shows the error and no sections."""
    page = render_error_page()

    assert '<div id="error" style="display: block;">' in page
    assert "version-section\"" not in page
    assert "v1.3.x" not in page


def test_render_viewer(tmp_path: Path) -> None:
    """Test rendering straight from a notes directory."""
    notes = [{"version": "1.3.0", "date": "2024-06-15T12:00:00.000Z", "developer": "alice", "changes": ["feat: add search"]}]
    (tmp_path / "release-notes.json").write_text(json.dumps(notes), encoding="utf-8")

    page, ok = render_viewer(NotesLoader(str(tmp_path)))

    assert ok is True
    assert "Release 1.3" in page


def test_render_viewer_failure_shows_error_page(tmp_path: Path) -> None:
    """Test that a load failure yields the error page."""
    page, ok = render_viewer(NotesLoader(str(tmp_path)))

    assert ok is False
    assert '<div id="error" style="display: block;">' in page


def test_write_viewer_page_creates_directories(tmp_path: Path) -> None:
    """Test that the output directory is created."""
    output_path = tmp_path / "site" / "index.html"
    write_viewer_page(output_path, "<html></html>")
    assert output_path.read_text(encoding="utf-8") == "<html></html>"


def test_render_viewer_non_iso_date_shows_error_page(tmp_path: Path) -> None:
    """Test that a note with an unparsable date yields the error page."""
    notes = [{"version": "1.3.0", "date": "June 15, 2024", "developer": "alice", "changes": ["feat: add search"]}]
    (tmp_path / "release-notes.json").write_text(json.dumps(notes), encoding="utf-8")

    page, ok = render_viewer(NotesLoader(str(tmp_path)))

    assert ok is False
    assert '<div id="error" style="display: block;">' in page
