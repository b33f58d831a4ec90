"""Project configuration snapshot as reported by the inventory."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from prh.core.structured import as_str_dict, get_str, get_table

__all__ = ["ProjectConfig", "TargetSpec"]


def _empty_mapping() -> Mapping[str, object]:
    return MappingProxyType({})


def _empty_targets() -> Mapping[str, TargetSpec]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class TargetSpec:
    """A named target's option bag. Values may be scalars, lists, or None."""

    options: Mapping[str, object] = field(default_factory=_empty_mapping)

    @classmethod
    def from_dict(cls, data: object) -> TargetSpec:
        table = as_str_dict(data)
        if table is None:
            return cls()
        options = get_table(table, "options") or {}
        return cls(options=MappingProxyType(dict(options)))


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Read-only view of one project.

    Attributes:
        root: Project root, relative to the workspace root.
        targets: Target name -> spec, in the order the inventory reported them.
    """

    root: str
    targets: Mapping[str, TargetSpec] = field(default_factory=_empty_targets)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ProjectConfig:
        """Build from the JSON emitted by `nx show project <id> --json`.

        A missing `targets` object yields no targets; malformed target
        entries yield targets without options.
        """
        raw_targets = get_table(data, "targets") or {}
        targets = {name: TargetSpec.from_dict(spec) for name, spec in raw_targets.items()}
        return cls(
            root=get_str(data, "root") or "",
            targets=MappingProxyType(targets),
        )
