"""Shared fixtures for CLI tests."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_settings():
    """Settings object isolated from the environment."""
    from termweight.config import Settings

    return Settings(
        _env_file=None,
        unknown_term="%UNCATEGORIZED%",
        default_top_terms=5,
        log_level="WARNING",
    )


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    """JSON corpus with a common and a rare term."""
    path = tmp_path / "corpus.json"
    path.write_text(json.dumps([["a", "b"], ["a"]]), encoding="utf-8")
    return path


@pytest.fixture
def add_file(tmp_path: Path) -> Path:
    """Plain text file with one document to add."""
    path = tmp_path / "new.txt"
    path.write_text("a zebra\n", encoding="utf-8")
    return path
