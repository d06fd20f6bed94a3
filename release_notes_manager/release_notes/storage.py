"""Reads and writes the release notes file and the project manifest."""

import json
from pathlib import Path
from typing import Any, Sequence

import structlog
from pydantic import ValidationError

from release_notes_manager.release_notes.exceptions import ManifestError
from release_notes_manager.release_notes.models import ReleaseNote, ReleaseNotesAdapter
from release_notes_manager.utils.constants import DEFAULT_VERSION
from release_notes_manager.utils.json import dump_json_to_file, load_json_file

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def load_release_notes(path: Path) -> list[ReleaseNote]:
    """Load the release notes collection, starting fresh when the file is missing or unreadable."""
    if not path.exists():
        logger.warning("No existing release notes file found, starting fresh", path=str(path))
        return []
    try:
        notes = ReleaseNotesAdapter.validate_python(load_json_file(path))
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        logger.warning("Could not load release notes file, starting fresh", path=str(path), error=str(exc))
        return []
    logger.info("Loaded existing release notes", path=str(path), count=len(notes))
    return notes


def save_release_notes(path: Path, notes: Sequence[ReleaseNote]) -> None:
    """Overwrite the release notes file with the given collection."""
    dump_json_to_file(ReleaseNotesAdapter.dump_python(list(notes), mode="json"), path)
    logger.info("Saved release notes", path=str(path), count=len(notes))


def load_manifest(path: Path) -> dict[str, Any]:
    """Load the project manifest. Any failure is fatal."""
    try:
        manifest = load_json_file(path)
    except FileNotFoundError as exc:
        raise ManifestError(str(path), "file not found") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise ManifestError(str(path), str(exc)) from exc
    if not isinstance(manifest, dict):
        raise ManifestError(str(path), "expected a JSON object")
    return manifest


def manifest_version(manifest: dict[str, Any]) -> str:
    """Return the manifest's version, defaulting to 0.0.0 when absent."""
    return manifest.get("version") or DEFAULT_VERSION


def save_manifest(path: Path, manifest: dict[str, Any], version: str) -> None:
    """Overwrite the manifest with its version field set to ``version``."""
    updated_manifest = {**manifest, "version": version}
    dump_json_to_file(updated_manifest, path)
    logger.info("Updated manifest version", path=str(path), version=version)
