from __future__ import annotations

import typer

from prh.cli.context import build_context
from prh.core.errors import ErrorCode
from prh.output.console import Style
from prh.output.report import print_status
from prh.services.status import StatusService


def status(
    strict: bool = typer.Option(False, "--strict", help="Exit non-zero when any project needs attention."),
) -> None:
    """Show release configuration status for every project."""
    ctx = build_context()

    report = StatusService(
        inventory=ctx.inventory,
        workspace_root=ctx.workspace.root,
        manifest=ctx.config.publishable.manifest,
    ).run()

    ctx.console.print(f"workspace: {ctx.workspace.root}", Style.DIM)
    if not report.projects:
        ctx.console.warning("No projects found")
        return

    print_status(report, ctx.console)

    if strict and report.has_problems():
        raise typer.Exit(code=int(ErrorCode.RELEASE_CONFIG_ERROR))
