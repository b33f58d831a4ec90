from __future__ import annotations

import typer

from prh.cli.context import build_context
from prh.core.errors import ErrorCode
from prh.core.result import Err
from prh.output.console import Style
from prh.services.hooks import HookInstaller

hooks_app = typer.Typer(
    no_args_is_help=True,
    help="Install or remove the prh git hooks.",
    add_completion=False,
)


@hooks_app.command("install")
def install(
    force: bool = typer.Option(False, "--force", help="Overwrite existing hooks not written by prh."),
) -> None:
    """Write pre-commit and pre-push hooks into .git/hooks."""
    ctx = build_context()

    result = HookInstaller(ctx.workspace.hooks_dir).install(force=force)
    if isinstance(result, Err):
        ctx.console.error(result.error.message)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    for path in result.value:
        ctx.console.success(f"installed {path.name}")
    ctx.console.print(f"hooks dir: {ctx.workspace.hooks_dir}", Style.DIM)


@hooks_app.command("uninstall")
def uninstall() -> None:
    """Remove hooks previously written by prh."""
    ctx = build_context()

    removed = HookInstaller(ctx.workspace.hooks_dir).uninstall()
    if not removed:
        ctx.console.info("No prh hooks installed")
        return
    for path in removed:
        ctx.console.success(f"removed {path.name}")
