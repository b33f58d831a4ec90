"""Release-configuration rules.

A project is configured for release as soon as it declares one of the
release targets, whatever their options. Validation is stricter: every
declared release target must carry its required options.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from prh.inventory.model import ProjectConfig
from prh.release.model import ValidationResult

__all__ = [
    "CHANGELOG",
    "PROJECT_RELEASE",
    "PUBLISH",
    "REGISTRY_TYPES",
    "RELEASE_TARGETS",
    "VERSION",
    "has_release_config",
    "validate_project_config",
]

VERSION = "version"
CHANGELOG = "changelog"
PUBLISH = "publish"
PROJECT_RELEASE = "project-release"

# Validation order; errors are reported in this order.
RELEASE_TARGETS: tuple[str, ...] = (VERSION, CHANGELOG, PUBLISH, PROJECT_RELEASE)

REGISTRY_TYPES: tuple[str, ...] = ("npm", "nexus", "s3", "custom")


def has_release_config(project: ProjectConfig | None) -> bool:
    """Return True if the project declares any release target."""
    if project is None:
        return False
    return any(name in project.targets for name in RELEASE_TARGETS)


def validate_project_config(project: ProjectConfig | None) -> ValidationResult:
    """Check every declared release target for its required options.

    Errors accumulate across targets. A project that could not be looked
    up yields a single "Project not found" error.
    """
    if project is None:
        return ValidationResult.not_found()

    errors: list[str] = []
    for name in RELEASE_TARGETS:
        spec = project.targets.get(name)
        if spec is None:
            continue
        errors.extend(_CHECKS[name](spec.options))
    return ValidationResult(errors=tuple(errors))


def _missing(target: str, option: str) -> str:
    return f'{target}: Missing required option "{option}"'


def _has_option(options: Mapping[str, object], key: str) -> bool:
    return options.get(key) is not None


def _has_version_files(options: Mapping[str, object]) -> bool:
    value = options.get("versionFiles")
    return isinstance(value, list) and len(value) > 0


def _check_version(options: Mapping[str, object]) -> list[str]:
    if not _has_version_files(options):
        return [_missing(VERSION, "versionFiles")]
    return []


def _check_changelog(options: Mapping[str, object]) -> list[str]:
    if not _has_option(options, "preset"):
        return [_missing(CHANGELOG, "preset")]
    return []


def _check_publish(options: Mapping[str, object]) -> list[str]:
    if not _has_option(options, "registryType"):
        return [_missing(PUBLISH, "registryType")]

    registry_type = options["registryType"]
    if not isinstance(registry_type, str) or registry_type not in REGISTRY_TYPES:
        shown = (
            registry_type
            if isinstance(registry_type, str)
            else json.dumps(registry_type, default=str)
        )
        return [
            f'{PUBLISH}: Invalid registryType "{shown}". '
            f"Must be one of: {', '.join(REGISTRY_TYPES)}"
        ]
    return []


def _check_project_release(options: Mapping[str, object]) -> list[str]:
    # registryType is required here but not checked against REGISTRY_TYPES.
    errors: list[str] = []
    if not _has_version_files(options):
        errors.append(_missing(PROJECT_RELEASE, "versionFiles"))
    if not _has_option(options, "preset"):
        errors.append(_missing(PROJECT_RELEASE, "preset"))
    if not _has_option(options, "registryType"):
        errors.append(_missing(PROJECT_RELEASE, "registryType"))
    return errors


_CHECKS = {
    VERSION: _check_version,
    CHANGELOG: _check_changelog,
    PUBLISH: _check_publish,
    PROJECT_RELEASE: _check_project_release,
}
