"""Release-configuration compliance: classification, rules and discovery."""

from .classifier import is_publishable
from .discovery import (
    get_projects_with_release_config,
    get_unconfigured_publishable_projects,
    validate_project,
)
from .model import PROJECT_NOT_FOUND, ValidationResult
from .rules import REGISTRY_TYPES, RELEASE_TARGETS, has_release_config, validate_project_config

__all__ = [
    "PROJECT_NOT_FOUND",
    "REGISTRY_TYPES",
    "RELEASE_TARGETS",
    "ValidationResult",
    "get_projects_with_release_config",
    "get_unconfigured_publishable_projects",
    "has_release_config",
    "is_publishable",
    "validate_project",
    "validate_project_config",
]
