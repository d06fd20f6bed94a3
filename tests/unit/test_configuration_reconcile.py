"""Unit tests for the configuration.reconcile module."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from release_notes_manager.configuration.models import GenerateConfig, RenderConfig
from release_notes_manager.configuration.reconcile import (
    pick,
    reconcile_generate_configuration,
    reconcile_render_configuration,
)


def mock_env_settings(mock_settings: MagicMock) -> None:
    """Populate mocked settings with environment-like values."""
    mock_settings.DEBUG = False
    mock_settings.RELEASE_NOTES_PATH = "env-notes.json"
    mock_settings.MANIFEST_PATH = "env-package.json"
    mock_settings.COMMIT_LIMIT = 50
    mock_settings.DAYS_THRESHOLD = 14
    mock_settings.RELEASE_COMMIT_MESSAGE = "release note"
    mock_settings.VIEWER_SOURCE = "https://example.com/notes"
    mock_settings.VIEWER_OUTPUT_PATH = "env-page.html"


def test_pick() -> None:
    """Test that explicit CLI values win, including falsy ones."""
    assert pick(None, 5) == 5
    assert pick(0, 5) == 0
    assert pick(False, True) is False


def test_reconcile_generate_with_cli_args() -> None:
    """Test reconciliation when values are provided via CLI arguments."""
    # When
    with patch("release_notes_manager.configuration.reconcile.settings") as mock_settings:
        mock_env_settings(mock_settings)
        result = reconcile_generate_configuration(
            cli_debug=True,
            cli_notes_path=Path("notes.json"),
            cli_manifest_path=Path("manifest.json"),
            cli_commit_limit=10,
            cli_days_threshold=3,
            cli_commit_message="chore: release notes",
            cli_create_commit=False,
            cli_dry_run=True,
        )

    # Then
    assert isinstance(result, GenerateConfig)
    assert result.debug is True
    assert result.notes_path == Path("notes.json")
    assert result.manifest_path == Path("manifest.json")
    assert result.repo_dir is None
    assert result.commit_limit == 10
    assert result.days_threshold == 3
    assert result.commit_message == "chore: release notes"
    assert result.create_commit is False
    assert result.dry_run is True


def test_reconcile_generate_with_env_vars() -> None:
    """Test reconciliation when values come from the environment."""
    # When
    with patch("release_notes_manager.configuration.reconcile.settings") as mock_settings:
        mock_env_settings(mock_settings)
        result = reconcile_generate_configuration()

    # Then
    assert result.debug is False
    assert result.notes_path == Path("env-notes.json")
    assert result.manifest_path == Path("env-package.json")
    assert result.commit_limit == 50
    assert result.days_threshold == 14
    assert result.commit_message == "release note"
    assert result.create_commit is True
    assert result.dry_run is False


def test_reconcile_generate_paths_follow_repo_dir(tmp_path: Path) -> None:
    """Test that relative file paths resolve inside the repository directory."""
    with patch("release_notes_manager.configuration.reconcile.settings") as mock_settings:
        mock_env_settings(mock_settings)
        result = reconcile_generate_configuration(cli_repo_dir=tmp_path, cli_manifest_path=tmp_path / "other" / "package.json")

    assert result.repo_dir == tmp_path
    assert result.notes_path == tmp_path / "env-notes.json"
    assert result.manifest_path == tmp_path / "other" / "package.json"


@pytest.mark.parametrize(
    "kwargs,match",
    [
        ({"cli_commit_limit": 0}, "Commit limit"),
        ({"cli_days_threshold": -1}, "Days threshold"),
    ],
)
def test_reconcile_generate_rejects_invalid_numbers(kwargs: dict[str, int], match: str) -> None:
    """Test that out-of-range numeric settings are rejected."""
    with patch("release_notes_manager.configuration.reconcile.settings") as mock_settings:
        mock_env_settings(mock_settings)
        with pytest.raises(ValueError, match=match):
            reconcile_generate_configuration(**kwargs)  # type: ignore[arg-type]


def test_reconcile_render_configuration() -> None:
    """Test reconciliation for the render command."""
    with patch("release_notes_manager.configuration.reconcile.settings") as mock_settings:
        mock_env_settings(mock_settings)
        from_env = reconcile_render_configuration()
        from_cli = reconcile_render_configuration(cli_debug=True, cli_source="./site", cli_output_path=Path("out.html"))

    assert isinstance(from_env, RenderConfig)
    assert from_env.source == "https://example.com/notes"
    assert from_env.output_path == Path("env-page.html")
    assert from_cli.debug is True
    assert from_cli.source == "./site"
    assert from_cli.output_path == Path("out.html")
