"""Reconciles configuration between CLI arguments and environment variables.

Values given on the command line win, then environment variables (or a .env
file), then the built-in defaults held by the settings model.
"""

from pathlib import Path
from typing import TypeVar

from release_notes_manager.configuration.env import settings
from release_notes_manager.configuration.models import GenerateConfig, RenderConfig

T = TypeVar("T")


def pick(cli_value: T | None, env_value: T) -> T:
    """Prefer the CLI value when one was given."""
    return env_value if cli_value is None else cli_value


def reconcile_generate_configuration(
    cli_debug: bool | None = None,
    cli_notes_path: Path | None = None,
    cli_manifest_path: Path | None = None,
    cli_repo_dir: Path | None = None,
    cli_commit_limit: int | None = None,
    cli_days_threshold: int | None = None,
    cli_commit_message: str | None = None,
    cli_create_commit: bool = True,
    cli_dry_run: bool = False,
) -> GenerateConfig:
    """Resolve the configuration for the generate command."""
    commit_limit = pick(cli_commit_limit, settings.COMMIT_LIMIT)
    if commit_limit < 1:
        raise ValueError(f"Commit limit must be a positive integer, got {commit_limit}")
    days_threshold = pick(cli_days_threshold, settings.DAYS_THRESHOLD)
    if days_threshold < 0:
        raise ValueError(f"Days threshold must not be negative, got {days_threshold}")

    notes_path = pick(cli_notes_path, Path(settings.RELEASE_NOTES_PATH))
    manifest_path = pick(cli_manifest_path, Path(settings.MANIFEST_PATH))
    # Relative file paths follow the repository being processed.
    if cli_repo_dir is not None:
        notes_path = cli_repo_dir / notes_path
        manifest_path = cli_repo_dir / manifest_path

    return GenerateConfig(
        debug=pick(cli_debug, settings.DEBUG),
        notes_path=notes_path,
        manifest_path=manifest_path,
        repo_dir=cli_repo_dir,
        commit_limit=commit_limit,
        days_threshold=days_threshold,
        commit_message=pick(cli_commit_message, settings.RELEASE_COMMIT_MESSAGE),
        create_commit=cli_create_commit,
        dry_run=cli_dry_run,
    )


def reconcile_render_configuration(
    cli_debug: bool | None = None,
    cli_source: str | None = None,
    cli_output_path: Path | None = None,
) -> RenderConfig:
    """Resolve the configuration for the render command."""
    return RenderConfig(
        debug=pick(cli_debug, settings.DEBUG),
        source=pick(cli_source, settings.VIEWER_SOURCE),
        output_path=pick(cli_output_path, Path(settings.VIEWER_OUTPUT_PATH)),
    )
