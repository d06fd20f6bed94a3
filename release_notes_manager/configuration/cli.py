"""Defines the Command Line Interface (CLI) using Typer."""

from pathlib import Path

import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from release_notes_manager.configuration.reconcile import reconcile_generate_configuration, reconcile_render_configuration
from release_notes_manager.git.client import GitCLIClient
from release_notes_manager.git.exceptions import GitCommandError
from release_notes_manager.release_notes.classifier import detect_commit_type, detect_display_type
from release_notes_manager.release_notes.exceptions import InvalidVersionError, ManifestError
from release_notes_manager.release_notes.generator import ReleaseNotesGenerator
from release_notes_manager.release_notes.models import BumpKind, ReleaseNotesStatus
from release_notes_manager.release_notes.versioning import bump_version
from release_notes_manager.utils.logging import configure_logging
from release_notes_manager.viewer.loader import NotesLoader
from release_notes_manager.viewer.renderer import render_viewer, write_viewer_page

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Generate release notes from git history and render them as a web page.")


@typer_app.command(name="generate")
def generate_cli(
    notes_path: Annotated[Path | None, Option(envvar="RELEASE_NOTES_PATH", help="Path to the release notes JSON file.")] = None,
    manifest_path: Annotated[Path | None, Option(envvar="MANIFEST_PATH", help="Path to the JSON manifest holding the version field.")] = None,
    repo_dir: Annotated[Path | None, Option(help="Git repository to read history from. Defaults to the current directory.")] = None,
    commit_limit: Annotated[int | None, Option(envvar="COMMIT_LIMIT", help="Number of most recent commits to inspect.")] = None,
    days_threshold: Annotated[int | None, Option(envvar="DAYS_THRESHOLD", help="Minimum days between minor version bumps.")] = None,
    commit: Annotated[bool, Option("--commit/--no-commit", help="Commit the updated files when done.")] = True,
    dry_run: Annotated[bool, Option(help="Compute the new release notes without writing any files.")] = False,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Add release notes for new commits and bump the manifest version."""
    try:
        config = reconcile_generate_configuration(
            cli_debug=debug or None,
            cli_notes_path=notes_path,
            cli_manifest_path=manifest_path,
            cli_repo_dir=repo_dir,
            cli_commit_limit=commit_limit,
            cli_days_threshold=days_threshold,
            cli_create_commit=commit,
            cli_dry_run=dry_run,
        )
    except ValueError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(1) from exc
    configure_logging(config.debug)

    generator = ReleaseNotesGenerator(
        client=GitCLIClient(config.repo_dir),
        notes_path=config.notes_path,
        manifest_path=config.manifest_path,
        commit_limit=config.commit_limit,
        days_threshold=config.days_threshold,
        commit_message=config.commit_message,
        create_commit=config.create_commit,
    )
    try:
        result = generator.generate(dry_run=config.dry_run)
    except (ManifestError, GitCommandError) as exc:
        typer.echo(f"Error updating release notes: {exc}", err=True)
        raise typer.Exit(1) from exc

    if result.status is ReleaseNotesStatus.NO_CONTENT:
        typer.echo("No valid commits found to process.")
    elif result.status is ReleaseNotesStatus.UP_TO_DATE:
        typer.echo("No new commits to add to release notes.")
    else:
        prefix = "Would bump" if result.status is ReleaseNotesStatus.DRY_RUN else "Bumped"
        typer.echo(f"{prefix} version from {result.previous_version} to {result.version}")
        typer.echo(f"Release notes added for {result.new_notes} developer(s): {', '.join(result.authors)}")
        if result.error:
            typer.echo(f"Error creating commit: {result.error}", err=True)
        elif result.commit_created:
            typer.echo("Commit created successfully")


@typer_app.command(name="render")
def render_cli(
    source: Annotated[str | None, Option(envvar="VIEWER_SOURCE", help="Base URL or directory the release notes file is loaded from.")] = None,
    output: Annotated[Path | None, Option(envvar="VIEWER_OUTPUT_PATH", help="Path the HTML page is written to.")] = None,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = False,
) -> None:
    """Render the release notes as a collapsible HTML page."""
    config = reconcile_render_configuration(cli_debug=debug or None, cli_source=source, cli_output_path=output)
    configure_logging(config.debug)

    page, ok = render_viewer(NotesLoader(config.source))
    write_viewer_page(config.output_path, page)
    if not ok:
        typer.echo(f"Unable to load release notes from {config.source}, wrote error page to {config.output_path}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Wrote release notes page to {config.output_path}")


@typer_app.command(name="bump")
def bump_cli(
    version: Annotated[str, Argument(help="Current version in major.minor.patch form.")],
    kind: Annotated[BumpKind, Argument(help="Component to increment.", case_sensitive=False)] = BumpKind.PATCH,
) -> None:
    """Print the version that follows VERSION for the given bump kind."""
    try:
        typer.echo(bump_version(version, kind))
    except InvalidVersionError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from exc


@typer_app.command(name="classify")
def classify_cli(
    message: Annotated[str, Argument(help="Commit message to classify.")],
) -> None:
    """Print the commit type and the viewer tag detected for MESSAGE."""
    typer.echo(f"type: {detect_commit_type(message).value}")
    typer.echo(f"display: {detect_display_type(message)}")


if __name__ == "__main__":
    typer_app()
