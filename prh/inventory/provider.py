"""Project inventory providers.

The checker never talks to Nx directly. It receives an `InventoryProvider`,
which lists project ids and hands out `ProjectConfig` snapshots. A provider
that cannot answer returns no data (empty list, None); it never raises.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from prh.core.config import DEFAULT_INVENTORY_COMMAND, DEFAULT_INVENTORY_TIMEOUT
from prh.core.result import Err, Ok, Result
from prh.core.structured import as_str_dict, as_str_list
from prh.inventory.model import ProjectConfig
from prh.platform.process import run

__all__ = [
    "InventoryError",
    "InventoryProvider",
    "NxInventory",
    "StaticInventory",
]

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InventoryError:
    """Why the inventory could not answer a query."""

    message: str
    project: str | None = None


class InventoryProvider(Protocol):
    """Source of projects and their configuration."""

    def list_projects(self) -> list[str]:
        """Return every project id, in a stable order."""
        ...

    def get_config(self, project_id: str) -> ProjectConfig | None:
        """Return the project's configuration, or None if it is unknown."""
        ...


class NxInventory:
    """Inventory backed by the Nx CLI (`nx show projects` / `nx show project`)."""

    def __init__(
        self,
        *,
        root: Path,
        command: tuple[str, ...] = DEFAULT_INVENTORY_COMMAND,
        timeout: float | None = DEFAULT_INVENTORY_TIMEOUT,
    ) -> None:
        self._root = root
        self._command = command
        self._timeout = timeout

    def query_projects(self) -> Result[list[str], InventoryError]:
        cmd = [*self._command, "show", "projects", "--json"]
        result = run(cmd, cwd=self._root, timeout=self._timeout)
        if isinstance(result, Err):
            detail = result.error.stderr.strip() or str(result.error)
            return Err(InventoryError(f"Failed to get projects: {detail}"))

        parsed = _parse_json(result.value)
        ids = as_str_list(parsed.value) if isinstance(parsed, Ok) else None
        if ids is None:
            return Err(InventoryError("Failed to get projects: expected a JSON list of names"))
        return Ok(ids)

    def query_project(self, project_id: str) -> Result[ProjectConfig, InventoryError]:
        cmd = [*self._command, "show", "project", project_id, "--json"]
        result = run(cmd, cwd=self._root, timeout=self._timeout)
        if isinstance(result, Err):
            detail = result.error.stderr.strip() or str(result.error)
            return Err(InventoryError(detail, project=project_id))

        parsed = _parse_json(result.value)
        data = as_str_dict(parsed.value) if isinstance(parsed, Ok) else None
        if data is None:
            return Err(InventoryError("expected a JSON object", project=project_id))
        return Ok(ProjectConfig.from_dict(data))

    def list_projects(self) -> list[str]:
        result = self.query_projects()
        if isinstance(result, Err):
            log.warning("%s", result.error.message)
            return []
        return result.value

    def get_config(self, project_id: str) -> ProjectConfig | None:
        result = self.query_project(project_id)
        if isinstance(result, Err):
            log.debug("project %s unavailable: %s", project_id, result.error.message)
            return None
        return result.value


class StaticInventory:
    """In-memory inventory, used for fixtures and offline checks.

    Values may be `ProjectConfig` instances or raw mappings in the shape
    `nx show project --json` emits. A `None` value models a project that is
    listed but whose lookup fails.
    """

    def __init__(self, projects: Mapping[str, ProjectConfig | Mapping[str, object] | None]) -> None:
        configs: dict[str, ProjectConfig | None] = {}
        for project_id, value in projects.items():
            if value is None or isinstance(value, ProjectConfig):
                configs[project_id] = value
            else:
                configs[project_id] = ProjectConfig.from_dict(value)
        self._projects = MappingProxyType(configs)

    def list_projects(self) -> list[str]:
        return list(self._projects)

    def get_config(self, project_id: str) -> ProjectConfig | None:
        return self._projects.get(project_id)


def _parse_json(text: str) -> Result[object, InventoryError]:
    try:
        return Ok(json.loads(text))
    except json.JSONDecodeError as e:
        return Err(InventoryError(f"invalid JSON: {e}"))
