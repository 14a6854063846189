"""Shared pytest fixtures for coffeedoc tests."""

import copy
import json
from pathlib import Path
from typing import Any, Iterator

import pytest
import structlog

from tests._fixtures.nodes import SAMPLE_MODULE


@pytest.fixture
def sample_module_data() -> list[dict[str, Any]]:
    """Return the sample module's syntax tree as plain data."""
    return copy.deepcopy(SAMPLE_MODULE)


@pytest.fixture
def sample_ast_file(tmp_path: Path) -> Path:
    """Write the sample module's syntax tree to a JSON file."""
    ast_dir = tmp_path / "ast"
    ast_dir.mkdir()
    ast_file = ast_dir / "shapes.json"
    ast_file.write_text(json.dumps({"kind": "block", "expressions": SAMPLE_MODULE}))
    return ast_file


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the user's config files and environment out of the tests."""
    for key in (
        "COFFEEDOC_LOG_LEVEL",
        "COFFEEDOC_LOG_FORMAT",
        "COFFEEDOC_OUTPUT_DIR",
        "COFFEEDOC_JSON_INDENT",
        "COFFEEDOC_OVERWRITE",
        "COFFEEDOC_FAIL_FAST",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo CLI logging configuration after each test."""
    yield
    structlog.reset_defaults()
