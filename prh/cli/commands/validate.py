from __future__ import annotations

import typer

from prh.cli.context import build_context
from prh.core.errors import ErrorCode
from prh.output.console import Style
from prh.release.discovery import validate_project


def validate(project: str = typer.Argument(..., help="Project name as known to Nx.")) -> None:
    """Validate one project's release configuration."""
    ctx = build_context()

    result = validate_project(ctx.inventory, project)
    if result.valid:
        ctx.console.success(f"{project}: release configuration is valid")
        return

    ctx.console.error(f"{project}: release configuration is invalid")
    for message in result.errors:
        ctx.console.print(f"  x {message}", Style.ERROR)
    raise typer.Exit(code=int(ErrorCode.RELEASE_CONFIG_ERROR))
