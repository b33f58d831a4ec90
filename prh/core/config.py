"""Typed configuration loading and access.

`prh.toml` at the workspace root is optional. Every key has a default that
matches a stock Nx workspace using the nx-project-release plugin.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_str, get_str_list, get_table

__all__ = [
    "Config",
    "ConfigError",
    "GeneratorsConfig",
    "InventoryConfig",
    "PublishableConfig",
    "CONFIG_FILENAME",
    "DEFAULT_INVENTORY_COMMAND",
    "DEFAULT_INVENTORY_TIMEOUT",
    "DEFAULT_MANIFEST",
    "load_config",
]

CONFIG_FILENAME = "prh.toml"

DEFAULT_INVENTORY_COMMAND: tuple[str, ...] = ("npx", "nx")
DEFAULT_INVENTORY_TIMEOUT = 60
DEFAULT_MANIFEST = "package.json"
DEFAULT_INIT_GENERATOR = "nx-project-release:init"
DEFAULT_REFRESH_GENERATOR = "nx-project-release:refreshConf"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class InventoryConfig:
    """How project inventory is queried.

    Attributes:
        command: Executable prefix; `show projects --json` is appended.
        timeout: Seconds allowed per query before it counts as unavailable.
    """

    command: tuple[str, ...] = DEFAULT_INVENTORY_COMMAND
    timeout: int = DEFAULT_INVENTORY_TIMEOUT


@dataclass(frozen=True, slots=True)
class PublishableConfig:
    """Which file marks a project as publishable."""

    manifest: str = DEFAULT_MANIFEST


@dataclass(frozen=True, slots=True)
class GeneratorsConfig:
    """Nx generators suggested to (or run for) the developer."""

    init: str = DEFAULT_INIT_GENERATOR
    refresh: str = DEFAULT_REFRESH_GENERATOR


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    inventory: InventoryConfig = field(default_factory=InventoryConfig)
    publishable: PublishableConfig = field(default_factory=PublishableConfig)
    generators: GeneratorsConfig = field(default_factory=GeneratorsConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        inventory: StrDict = get_table(data, "inventory") or {}
        publishable: StrDict = get_table(data, "publishable") or {}
        generators: StrDict = get_table(data, "generators") or {}

        command = get_str_list(inventory, "command")
        timeout = get_int(inventory, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"inventory.timeout must be positive, got {timeout}")

        return cls(
            inventory=InventoryConfig(
                command=tuple(command) if command else DEFAULT_INVENTORY_COMMAND,
                timeout=timeout or DEFAULT_INVENTORY_TIMEOUT,
            ),
            publishable=PublishableConfig(
                manifest=get_str(publishable, "manifest") or DEFAULT_MANIFEST,
            ),
            generators=GeneratorsConfig(
                init=get_str(generators, "init") or DEFAULT_INIT_GENERATOR,
                refresh=get_str(generators, "refresh") or DEFAULT_REFRESH_GENERATOR,
            ),
        )

    def init_command(self, project_id: str) -> list[str]:
        """Command that runs the init generator for one project."""
        return [*self.inventory.command, "g", self.generators.init, f"--project={project_id}"]

    def refresh_command(self) -> list[str]:
        return [*self.inventory.command, "g", self.generators.refresh]


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to prh.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))
