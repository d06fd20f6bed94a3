"""Loads the persisted release notes for the viewer."""

import time
from pathlib import Path
from typing import Any, Sequence

import httpx
import structlog

from release_notes_manager.release_notes.models import ReleaseNote, ReleaseNotesAdapter
from release_notes_manager.utils.constants import VIEWER_CANDIDATE_PATHS, VIEWER_FETCH_TIMEOUT
from release_notes_manager.utils.json import load_json_file
from release_notes_manager.viewer.exceptions import NotesLoadError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def is_http_source(source: str) -> bool:
    """Check whether a source refers to an HTTP(S) location rather than a local directory."""
    return source.startswith(("http://", "https://"))


class NotesLoader:
    """Tries each candidate location in turn until one returns the release notes.

    ``source`` is either an HTTP(S) base URL or a local directory. Candidate
    paths are relative to it; a ``{timestamp}`` placeholder is replaced with the
    current time in milliseconds to bypass caches.
    """

    def __init__(
        self,
        source: str,
        candidate_paths: Sequence[str] = VIEWER_CANDIDATE_PATHS,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize with the base location, candidate paths and an optional HTTP client."""
        self.source = source
        self.candidate_paths = list(candidate_paths)
        self.http_client = http_client

    def candidate_locations(self) -> list[str]:
        """Return the candidate paths with any cache-busting placeholder filled in."""
        timestamp = int(time.time() * 1000)
        return [path.format(timestamp=timestamp) for path in self.candidate_paths]

    def load(self) -> list[ReleaseNote]:
        """Load and validate the release notes from the first candidate that succeeds."""
        if is_http_source(self.source):
            data = self._load_from_http()
        else:
            data = self._load_from_directory()
        notes = ReleaseNotesAdapter.validate_python(data)
        logger.info("Loaded release notes", source=self.source, count=len(notes))
        return notes

    def _load_from_http(self) -> Any:
        base_url = httpx.URL(self.source if self.source.endswith("/") else self.source + "/")
        attempted: list[str] = []
        status_code: int | None = None
        last_error: str | None = None

        client = self.http_client or httpx.Client(timeout=VIEWER_FETCH_TIMEOUT)
        try:
            for path in self.candidate_locations():
                url = base_url.join(path)
                attempted.append(str(url))
                try:
                    response = client.get(url)
                except httpx.HTTPError as exc:
                    last_error = str(exc)
                    logger.warning("Failed to load release notes", location=str(url), error=last_error)
                    continue
                status_code = response.status_code
                if response.is_success:
                    return response.json()
                logger.warning("Release notes location returned an error status", location=str(url), status_code=status_code)
        finally:
            if self.http_client is None:
                client.close()

        raise NotesLoadError(attempted, status_code=status_code, last_error=last_error)

    def _load_from_directory(self) -> Any:
        base_dir = Path(self.source)
        attempted: list[str] = []
        last_error: str | None = None

        for path in self.candidate_locations():
            # Query strings only matter to HTTP caches.
            file_path = base_dir / path.split("?", 1)[0]
            attempted.append(str(file_path))
            if not file_path.is_file():
                last_error = f"File not found: {file_path}"
                logger.warning("Failed to load release notes", location=str(file_path), error=last_error)
                continue
            return load_json_file(file_path)

        raise NotesLoadError(attempted, last_error=last_error)
