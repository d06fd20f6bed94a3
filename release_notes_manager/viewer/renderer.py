"""Renders the release notes viewer page."""

from pathlib import Path

import structlog

from release_notes_manager.utils.templates import construct_packaged_template, render_template_with_model
from release_notes_manager.viewer.grouping import ReleaseNotesView, build_view
from release_notes_manager.viewer.loader import NotesLoader

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

VIEWER_TEMPLATE_NAME = "release_notes.html.j2"


def render_release_notes_page(view: ReleaseNotesView) -> str:
    """Render the viewer page for a prepared view."""
    template = construct_packaged_template(VIEWER_TEMPLATE_NAME)
    return render_template_with_model(model=view, template=template)


def render_error_page() -> str:
    """Render the viewer page in its error state, without any content."""
    return render_release_notes_page(ReleaseNotesView(error=True))


def render_viewer(loader: NotesLoader) -> tuple[str, bool]:
    """Load, group and render the release notes.

    Any failure along the way is logged and replaced by the error page.

    Returns:
        The rendered page and whether it rendered successfully
    """
    try:
        notes = loader.load()
        view = build_view(notes)
        return render_release_notes_page(view), True
    except Exception:
        logger.exception("Error initializing release notes viewer", source=loader.source)
        return render_error_page(), False


def write_viewer_page(output_path: Path, page: str) -> None:
    """Write a rendered page to disk, creating parent directories as needed."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(page, encoding="utf-8")
    logger.info("Wrote release notes page", path=str(output_path))
