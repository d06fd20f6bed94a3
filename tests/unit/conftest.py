"""Fixtures for unit tests."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Generator

import pytest
import structlog

from release_notes_manager.release_notes.models import Commit
from tests.unit.utils import make_commit

FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def commit_factory() -> Callable[..., Commit]:
    """Return a factory for commits."""
    return make_commit


@pytest.fixture
def fixed_now() -> datetime:
    """Return the fixed current time used across tests."""
    return FIXED_NOW


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """Write a manifest at version 1.2.0 and return its path."""
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"name": "demo", "version": "1.2.0", "private": True}, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def notes_path(tmp_path: Path) -> Path:
    """Return the path of a (not yet written) release notes file."""
    return tmp_path / "release-notes.json"
