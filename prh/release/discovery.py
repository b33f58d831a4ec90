"""Workspace-wide discovery over an inventory snapshot.

Both aggregates keep the inventory's enumeration order and fetch each
project's configuration once. A provider that raises is treated as having
no data: no projects, or a project that cannot be found.
"""

from __future__ import annotations

import logging
from pathlib import Path

from prh.core.config import DEFAULT_MANIFEST
from prh.inventory.model import ProjectConfig
from prh.inventory.provider import InventoryProvider
from prh.release.classifier import is_publishable
from prh.release.model import ValidationResult
from prh.release.rules import has_release_config, validate_project_config

__all__ = [
    "get_projects_with_release_config",
    "get_unconfigured_publishable_projects",
    "list_project_ids",
    "lookup_project",
    "validate_project",
]

log = logging.getLogger(__name__)


def list_project_ids(inventory: InventoryProvider) -> list[str]:
    """List project ids; an inventory failure yields no projects."""
    try:
        return list(inventory.list_projects())
    except Exception as e:  # noqa: BLE001
        log.warning("inventory unavailable: %s", e)
        return []


def lookup_project(inventory: InventoryProvider, project_id: str) -> ProjectConfig | None:
    """Fetch one project's configuration; a lookup failure yields None."""
    try:
        return inventory.get_config(project_id)
    except Exception as e:  # noqa: BLE001
        log.warning("project %s unavailable: %s", project_id, e)
        return None


def get_unconfigured_publishable_projects(
    inventory: InventoryProvider,
    workspace_root: Path,
    *,
    manifest: str = DEFAULT_MANIFEST,
) -> list[str]:
    """Projects that ship a manifest but declare no release target."""
    unconfigured: list[str] = []
    for project_id in list_project_ids(inventory):
        project = lookup_project(inventory, project_id)
        if is_publishable(project, workspace_root, manifest=manifest) and not has_release_config(
            project
        ):
            unconfigured.append(project_id)
    return unconfigured


def get_projects_with_release_config(inventory: InventoryProvider) -> list[str]:
    """Projects that declare at least one release target."""
    return [
        project_id
        for project_id in list_project_ids(inventory)
        if has_release_config(lookup_project(inventory, project_id))
    ]


def validate_project(inventory: InventoryProvider, project_id: str) -> ValidationResult:
    """Look up a project and validate it; unknown ids are "not found"."""
    return validate_project_config(lookup_project(inventory, project_id))
