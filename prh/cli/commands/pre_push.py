from __future__ import annotations

import typer

from prh.cli.context import build_context
from prh.output.console import Style
from prh.output.report import outcome_exit_code, print_invalid
from prh.services.gates import PrePushGate
from prh.services.outcome import Configured, Invalid, Unconfigured


def pre_push(
    remote: str | None = typer.Argument(None, hidden=True, help="Remote name passed by git"),
    url: str | None = typer.Argument(None, hidden=True, help="Remote URL passed by git"),
) -> None:
    """Validate every release configuration before pushing.

    git runs the hook as `pre-push <remote> <url>`; both are accepted and unused.
    """
    ctx = build_context()
    console = ctx.console
    console.print("Validating release configurations...", Style.DIM)

    outcome = PrePushGate(inventory=ctx.inventory).run()

    match outcome:
        case Configured(checked=0):
            console.info("No projects with release configuration found")
        case Configured(checked=checked):
            console.success(f"All {checked} release configurations are valid")
        case Invalid():
            console.newline()
            print_invalid(outcome, console, ctx.config)
            raise typer.Exit(code=outcome_exit_code(outcome))
        case Unconfigured():
            raise typer.Exit(code=outcome_exit_code(outcome))
