# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from ..number import Segment, VersionNumber
from ..range import VersionRange


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        version: Project version from [project].version
        range: Default caret range from [tool.segver].range
        default_segment: Segment bumped by default from [tool.segver].default-segment
    """

    project_dir: Path
    version: str = ""
    range: str = ""
    default_segment: Optional[Segment] = None

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or holds invalid values
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a configured version, range or segment is invalid
        """
        project = pyproject.get("project", {})
        tool_segver = pyproject.get("tool", {}).get("segver", {})

        version = project.get("version", "")
        if not isinstance(version, str):
            raise ConfigError(f"[project].version must be a string, got {type(version).__name__}")
        if version and not VersionNumber.is_valid(version):
            raise ConfigError(f"[project].version is not a supported version: {version!r}")

        range_text = tool_segver.get("range", "")
        if not isinstance(range_text, str):
            raise ConfigError(f"[tool.segver].range must be a string, got {type(range_text).__name__}")
        if range_text and not VersionRange.is_valid(range_text):
            raise ConfigError(f"[tool.segver].range is not a caret range: {range_text!r}")

        default_segment = None
        segment_name = tool_segver.get("default-segment")
        if segment_name is not None:
            if not isinstance(segment_name, str):
                raise ConfigError(
                    f"[tool.segver].default-segment must be a string, got {type(segment_name).__name__}"
                )
            try:
                default_segment = Segment.from_name(segment_name)
            except ValueError as e:
                raise ConfigError(f"[tool.segver].default-segment: {e}") from e

        return cls(
            project_dir=project_dir,
            version=version,
            range=range_text,
            default_segment=default_segment,
        )

    def has_pyproject(self) -> bool:
        """Check if pyproject.toml exists in the project directory."""
        return (self.project_dir / "pyproject.toml").exists()


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    return None


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration from the project directory.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        CLIConfig instance, with defaults when there is no pyproject.toml

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    if project_dir is None:
        project_dir = find_project_root()
        if project_dir is None:
            return CLIConfig(project_dir=Path.cwd())

    project_path = Path(project_dir)

    if (project_path / "pyproject.toml").exists():
        return CLIConfig.from_pyproject(project_path)

    return CLIConfig(project_dir=project_path)
