# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "2.1.0-beta.2"

[tool.segver]
range = "^2.0"
default-segment = "minor"
"""
    )

    yield project_dir


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """Create a project directory without any configuration."""
    project_dir = tmp_path / "empty_project"
    project_dir.mkdir()
    return project_dir
