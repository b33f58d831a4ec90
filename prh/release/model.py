"""Validation result produced per project."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ValidationResult", "PROJECT_NOT_FOUND"]

PROJECT_NOT_FOUND = "Project not found"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one project's release targets.

    `valid` is derived from `errors`, so the two never disagree.
    """

    errors: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors

    @classmethod
    def not_found(cls) -> ValidationResult:
        return cls(errors=(PROJECT_NOT_FOUND,))
