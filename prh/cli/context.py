from __future__ import annotations

from dataclasses import dataclass

import typer

from prh.core.config import Config, load_config
from prh.core.errors import ErrorCode
from prh.core.result import Err
from prh.core.workspace import Workspace, detect_workspace
from prh.inventory.provider import InventoryProvider, NxInventory
from prh.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    workspace: Workspace
    config: Config
    console: ConsoleProtocol
    inventory: InventoryProvider


def build_context() -> CLIContext:
    workspace_result = detect_workspace()
    if isinstance(workspace_result, Err):
        typer.echo(f"error: {workspace_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    workspace = workspace_result.value

    config = Config()
    if workspace.config_path.exists():
        config_result = load_config(workspace.config_path)
        if isinstance(config_result, Err):
            typer.echo(f"error: {config_result.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))
        config = config_result.value

    return CLIContext(
        workspace=workspace,
        config=config,
        console=RichConsole(),
        inventory=NxInventory(
            root=workspace.root,
            command=config.inventory.command,
            timeout=config.inventory.timeout,
        ),
    )
