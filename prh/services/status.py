from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from prh.core.config import DEFAULT_MANIFEST
from prh.inventory.provider import InventoryProvider
from prh.release.classifier import is_publishable
from prh.release.discovery import list_project_ids, lookup_project
from prh.release.model import ValidationResult
from prh.release.rules import has_release_config, validate_project_config


@dataclass(frozen=True, slots=True)
class ProjectStatus:
    """One row of the status report; `validation` is None when no release target is declared."""

    project_id: str
    found: bool
    publishable: bool
    configured: bool
    validation: ValidationResult | None

    @property
    def needs_attention(self) -> bool:
        if not self.found:
            return True
        if self.publishable and not self.configured:
            return True
        return self.validation is not None and not self.validation.valid


@dataclass(frozen=True, slots=True)
class StatusReport:
    projects: list[ProjectStatus]

    def has_problems(self) -> bool:
        return any(p.needs_attention for p in self.projects)


class StatusService:
    def __init__(
        self,
        *,
        inventory: InventoryProvider,
        workspace_root: Path,
        manifest: str = DEFAULT_MANIFEST,
    ) -> None:
        self._inventory = inventory
        self._workspace_root = workspace_root
        self._manifest = manifest

    def run(self) -> StatusReport:
        rows: list[ProjectStatus] = []
        for project_id in list_project_ids(self._inventory):
            project = lookup_project(self._inventory, project_id)
            configured = has_release_config(project)
            rows.append(
                ProjectStatus(
                    project_id=project_id,
                    found=project is not None,
                    publishable=is_publishable(
                        project, self._workspace_root, manifest=self._manifest
                    ),
                    configured=configured,
                    validation=validate_project_config(project) if configured else None,
                )
            )
        return StatusReport(projects=rows)
