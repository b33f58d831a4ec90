"""Workspace detection and paths.

The workspace is the monorepo root. It is identified by an `nx.json` file;
a plain git checkout (`.git`) is accepted as a fallback so the hooks still
run in repositories that configure Nx elsewhere.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .config import CONFIG_FILENAME
from .result import Err, Ok, Result

__all__ = [
    "Workspace",
    "WorkspaceError",
    "WORKSPACE_ENV_VAR",
    "detect_workspace",
    "find_workspace_upward",
    "is_workspace_root",
]

WORKSPACE_ENV_VAR = "PRH_WORKSPACE_ROOT"


@dataclass(frozen=True)
class WorkspaceError:
    """Error when workspace cannot be detected."""

    message: str
    searched_from: Path | None = None


@dataclass(frozen=True, slots=True)
class Workspace:
    """A detected monorepo workspace."""

    root: Path

    @property
    def config_path(self) -> Path:
        """Path to prh.toml."""
        return self.root / CONFIG_FILENAME

    @property
    def git_dir(self) -> Path:
        return self.root / ".git"

    @property
    def hooks_dir(self) -> Path:
        """Path to the git hooks directory (.git/hooks)."""
        return self.git_dir / "hooks"

    def __str__(self) -> str:
        return str(self.root)


def is_workspace_root(path: Path) -> bool:
    """Check if a path looks like a workspace root (nx.json or .git)."""
    return (path / "nx.json").is_file() or (path / ".git").exists()


def find_workspace_upward(start: Path) -> Path | None:
    """Search upward from start for a workspace root.

    An `nx.json` anywhere up the tree wins over a closer `.git`, so nested
    checkouts inside a monorepo resolve to the monorepo.
    """
    candidates = (start, *start.parents)
    for parent in candidates:
        if (parent / "nx.json").is_file():
            return parent
    for parent in candidates:
        if (parent / ".git").exists():
            return parent
    return None


def detect_workspace(
    *,
    start_dir: Path | None = None,
    env_var: str = WORKSPACE_ENV_VAR,
) -> Result[Workspace, WorkspaceError]:
    """Detect the workspace root directory.

    Detection order:
    1. PRH_WORKSPACE_ROOT environment variable (if set and valid)
    2. Search upward from start_dir (or cwd)
    """
    env_value = os.environ.get(env_var)
    if env_value:
        env_path = Path(env_value).expanduser().resolve()
        if env_path.is_dir() and is_workspace_root(env_path):
            return Ok(Workspace(root=env_path))
        return Err(
            WorkspaceError(
                message=f"${env_var} is set to '{env_value}' but it is not a valid workspace",
                searched_from=env_path if env_path.is_dir() else None,
            )
        )

    search_start = (start_dir or Path.cwd()).resolve()
    found = find_workspace_upward(search_start)
    if found is None:
        return Err(
            WorkspaceError(
                message="Could not find workspace (no nx.json or .git found)",
                searched_from=search_start,
            )
        )
    return Ok(Workspace(root=found))
