"""Centralized path management for salesaudit.

This module provides a single source of truth for the paths the CLI and the
report workflows touch, so no module builds its own file locations.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

CONFIG_ENV_VAR = "SALESAUDIT_CONFIG"


def _get_project_root() -> Path:
    """Reports are run against the directory the user invoked the CLI from."""
    return Path.cwd()


@dataclass
class ProjectPaths:
    """Container for all project-related paths.

    Relative paths are resolved against ``root`` so that every module agrees
    on where configuration and exports live.
    """

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        self.root = self.root.resolve()

    # --- Configuration paths ---
    @property
    def config_file(self) -> Path:
        """Report settings TOML file (overridable via SALESAUDIT_CONFIG)."""
        override = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if override:
            return Path(override).expanduser()
        return self.root / "salesaudit.toml"

    @property
    def config_is_default(self) -> bool:
        """True when no environment override points at a specific config file."""
        return not os.environ.get(CONFIG_ENV_VAR, "").strip()

    # --- Output paths ---
    def export_dir(self, configured: str) -> Path:
        """Resolve a configured export directory against the project root."""
        path = Path(configured).expanduser()
        if path.is_absolute():
            return path
        return self.root / path


_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the singleton ProjectPaths instance."""
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths(root: Path | None = None) -> ProjectPaths:
    """Replace the singleton, e.g. after changing directory in tests."""
    global _paths
    _paths = ProjectPaths(root=root) if root is not None else ProjectPaths()
    return _paths
