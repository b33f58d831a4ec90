"""Publishability: does a project ship its own distributable manifest?"""

from __future__ import annotations

from pathlib import Path

from prh.core.config import DEFAULT_MANIFEST
from prh.inventory.model import ProjectConfig

__all__ = ["is_publishable", "resolve_project_root"]


def resolve_project_root(project: ProjectConfig, workspace_root: Path) -> Path | None:
    """Resolve the project root inside the workspace.

    Returns None when the root is empty, cannot be resolved, or points
    outside the workspace.
    """
    if not project.root:
        return None
    try:
        base = workspace_root.resolve()
        candidate = (base / project.root).resolve()
        candidate.relative_to(base)
    except (OSError, RuntimeError, ValueError):
        return None
    return candidate


def is_publishable(
    project: ProjectConfig | None,
    workspace_root: Path,
    *,
    manifest: str = DEFAULT_MANIFEST,
) -> bool:
    """Return True if a manifest file exists at the project root.

    Only existence is probed; the manifest is never read.
    """
    if project is None:
        return False
    root = resolve_project_root(project, workspace_root)
    if root is None:
        return False
    try:
        return (root / manifest).is_file()
    except OSError:
        return False
