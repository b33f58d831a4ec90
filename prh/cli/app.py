from __future__ import annotations

import logging
import os
from pathlib import Path

import typer

from prh import __version__
from prh.cli.commands.hooks import hooks_app
from prh.cli.commands.pre_commit import pre_commit
from prh.cli.commands.pre_push import pre_push
from prh.cli.commands.status import status
from prh.cli.commands.validate import validate
from prh.core.errors import ErrorCode
from prh.core.workspace import WORKSPACE_ENV_VAR, is_workspace_root


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Release-configuration checks for monorepo git hooks.",
)


# Commands
app.command("pre-commit")(pre_commit)
app.command("pre-push")(pre_push)
app.command()(status)
app.command()(validate)

# Sub-apps
app.add_typer(hooks_app, name="hooks")


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        is_eager=True,
        callback=_print_version,
    ),
    workspace: Path | None = typer.Option(
        None,
        "--workspace",
        help="Workspace root (overrides auto detection)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log inventory queries."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if workspace is not None:
        try:
            root = workspace.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --workspace: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not root.is_dir() or not is_workspace_root(root):
            typer.echo(
                f"error: --workspace '{root}' is not a valid workspace (missing nx.json or .git)",
                err=True,
            )
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

        os.environ[WORKSPACE_ENV_VAR] = str(root)


def main() -> None:
    app()
