"""Contains utility functions for working with JSON files."""

import json
from pathlib import Path
from typing import Any

from release_notes_manager.utils.constants import JSON_INDENT


def load_json_file(path: Path) -> Any:
    """Loads a JSON file and returns the decoded document."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def dump_json_to_file(data: Any, file_path: Path) -> None:
    """Dumps data to a pretty-printed JSON file, replacing any existing content."""
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=JSON_INDENT, ensure_ascii=False)
