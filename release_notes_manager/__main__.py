"""Allows running the CLI with ``python -m release_notes_manager``."""

from release_notes_manager.configuration.cli import typer_app

typer_app()
