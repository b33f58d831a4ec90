"""Gate outcomes consumed by the hook commands."""

from __future__ import annotations

from dataclasses import dataclass

from prh.release.model import ValidationResult


@dataclass(frozen=True, slots=True)
class Configured:
    """Nothing blocks the operation. `checked` is how many projects were looked at."""

    checked: int


@dataclass(frozen=True, slots=True)
class Unconfigured:
    project_ids: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ProjectFinding:
    project_id: str
    result: ValidationResult


@dataclass(frozen=True, slots=True)
class Invalid:
    findings: tuple[ProjectFinding, ...]
    checked: int


GateOutcome = Configured | Unconfigured | Invalid
