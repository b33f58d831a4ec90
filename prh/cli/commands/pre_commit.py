from __future__ import annotations

import os
from typing import Literal

import typer

from prh.cli.context import CLIContext, build_context
from prh.cli.selector import SelectorOption, is_interactive_terminal, select_one
from prh.core.errors import ErrorCode
from prh.core.result import Err
from prh.output.console import Style
from prh.output.report import print_configure_instructions, print_unconfigured
from prh.platform.process import run_streaming
from prh.services.gates import PreCommitGate
from prh.services.outcome import Configured, Invalid, Unconfigured

Action = Literal["configure", "skip", "abort"]

_ACTIONS: list[SelectorOption[Action]] = [
    SelectorOption("configure", "Configure now", "run the init generator for each project"),
    SelectorOption("skip", "Skip (commit anyway)", "configure later"),
    SelectorOption("abort", "Abort commit", "configure manually, then commit again"),
]


def pre_commit(
    non_interactive: bool = typer.Option(
        False,
        "--non-interactive",
        help="Never prompt; block when projects are unconfigured (default in CI).",
    ),
    skip: bool = typer.Option(False, "--skip", help="Report unconfigured projects but never block."),
) -> None:
    """Detect publishable projects without release configuration."""
    ctx = build_context()
    console = ctx.console
    console.print("Checking for unconfigured projects...", Style.DIM)

    gate = PreCommitGate(
        inventory=ctx.inventory,
        workspace_root=ctx.workspace.root,
        manifest=ctx.config.publishable.manifest,
    )
    outcome = gate.run()

    match outcome:
        case Configured() | Invalid():
            console.success("All publishable projects are configured")
            return
        case Unconfigured():
            pass

    console.newline()
    print_unconfigured(outcome, console)
    console.newline()

    if skip:
        console.warning("Skipping configuration. Remember to configure these projects later!")
        return

    if non_interactive or not _can_prompt():
        print_configure_instructions(outcome, console, ctx.config)
        raise typer.Exit(code=int(ErrorCode.RELEASE_CONFIG_ERROR))

    action = _prompt_action()
    if action is None:
        console.newline()
        console.print("Commit cancelled.")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if action == "abort":
        console.newline()
        console.print("Commit aborted. Configure projects and try again.")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    if action == "skip":
        console.newline()
        console.warning("Skipping configuration. Remember to configure these projects later!")
        return

    _configure_projects(ctx, outcome.project_ids)


def _can_prompt() -> bool:
    if os.environ.get("CI"):
        return False
    return is_interactive_terminal()


def _prompt_action() -> Action | None:
    choice = select_one(title="What would you like to do?", options=_ACTIONS)
    if choice.action == "cancel":
        return None
    return choice.value


def _configure_projects(ctx: CLIContext, project_ids: tuple[str, ...]) -> None:
    console = ctx.console
    console.header("Configuring projects...")

    for project_id in project_ids:
        console.print(f"Configuring {project_id}...", Style.INFO)
        result = run_streaming(ctx.config.init_command(project_id), cwd=ctx.workspace.root)
        if isinstance(result, Err):
            console.error(f"Failed to configure {project_id} ({result.error})")
            raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    console.newline()
    console.success("All projects configured!")
    console.info("Don't forget to add the configuration files to your commit")
