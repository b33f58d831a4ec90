from __future__ import annotations

from pathlib import Path

from prh.core.config import DEFAULT_MANIFEST
from prh.inventory.provider import InventoryProvider
from prh.release.discovery import (
    get_unconfigured_publishable_projects,
    list_project_ids,
    lookup_project,
)
from prh.release.rules import has_release_config, validate_project_config
from prh.services.outcome import Configured, GateOutcome, Invalid, ProjectFinding, Unconfigured


class PreCommitGate:
    """Blocks commits while publishable projects lack release configuration."""

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

    def run(self) -> GateOutcome:
        unconfigured = get_unconfigured_publishable_projects(
            self._inventory, self._workspace_root, manifest=self._manifest
        )
        if unconfigured:
            return Unconfigured(project_ids=tuple(unconfigured))
        return Configured(checked=0)


class PrePushGate:
    """Blocks pushes while any declared release configuration is invalid.

    Each project is fetched once; the same snapshot decides whether it is
    configured and whether its configuration is valid.
    """

    def __init__(self, *, inventory: InventoryProvider) -> None:
        self._inventory = inventory

    def run(self) -> GateOutcome:
        checked = 0
        findings: list[ProjectFinding] = []
        for project_id in list_project_ids(self._inventory):
            project = lookup_project(self._inventory, project_id)
            if not has_release_config(project):
                continue

            checked += 1
            result = validate_project_config(project)
            if not result.valid:
                findings.append(ProjectFinding(project_id=project_id, result=result))

        if findings:
            return Invalid(findings=tuple(findings), checked=checked)
        return Configured(checked=checked)
