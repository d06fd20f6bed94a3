"""Resolved configuration for each CLI command."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class BaseConfig:
    """Configuration shared by every command."""

    debug: bool


@dataclass
class GenerateConfig(BaseConfig):
    """Configuration class for the generate command."""

    notes_path: Path
    manifest_path: Path
    repo_dir: Path | None
    commit_limit: int
    days_threshold: int
    commit_message: str
    create_commit: bool
    dry_run: bool


@dataclass
class RenderConfig(BaseConfig):
    """Configuration class for the render command."""

    source: str
    output_path: Path
