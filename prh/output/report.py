"""Rendering of gate outcomes and their exit codes.

Kept apart from the gates so the release checker never formats text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prh.core.errors import ErrorCode
from prh.output.console import Style
from prh.services.outcome import Configured, GateOutcome, Invalid, Unconfigured

if TYPE_CHECKING:
    from prh.core.config import Config
    from prh.output.console import ConsoleProtocol
    from prh.services.status import StatusReport

__all__ = [
    "outcome_exit_code",
    "print_configure_instructions",
    "print_invalid",
    "print_status",
    "print_unconfigured",
]


def print_unconfigured(outcome: Unconfigured, console: ConsoleProtocol) -> None:
    console.warning("Unconfigured publishable projects detected:")
    for project_id in outcome.project_ids:
        console.print(f"  - {project_id}")


def print_configure_instructions(
    outcome: Unconfigured, console: ConsoleProtocol, config: Config
) -> None:
    """Explain how to configure projects when the gate cannot prompt."""
    console.error("These projects need release configuration before commit.")
    console.print("Configure them by running:", Style.DIM)
    for project_id in outcome.project_ids:
        console.print(f"  {' '.join(config.init_command(project_id))}")
    console.print("Or bypass this check with: git commit --no-verify", Style.DIM)


def print_invalid(outcome: Invalid, console: ConsoleProtocol, config: Config) -> None:
    console.error("Release configuration errors detected:")
    for finding in outcome.findings:
        console.header(finding.project_id)
        for message in finding.result.errors:
            console.print(f"  x {message}", Style.ERROR)

    console.newline()
    console.print("Fix configuration errors before pushing.")
    console.print("To fix these errors:", Style.DIM)
    console.print(f"  1. Run: {' '.join(config.refresh_command())}", Style.DIM)
    console.print("  2. Or manually edit project.json for each project", Style.DIM)
    console.print("  3. Or bypass this check with: git push --no-verify", Style.DIM)


def print_status(report: StatusReport, console: ConsoleProtocol) -> None:
    console.header("Projects")
    for row in report.projects:
        if not row.found:
            console.print(f"{row.project_id}: not found", Style.ERROR)
            continue

        flags = [
            "publishable" if row.publishable else "private",
            "configured" if row.configured else "unconfigured",
        ]
        line = f"{row.project_id}: {', '.join(flags)}"
        if row.validation is None:
            style = Style.WARNING if row.needs_attention else Style.DIM
            console.print(line, style)
            continue

        if row.validation.valid:
            console.print(f"{line}, valid", Style.SUCCESS)
            continue

        console.print(f"{line}, invalid", Style.ERROR)
        for message in row.validation.errors:
            console.print(f"  x {message}", Style.ERROR)


def outcome_exit_code(outcome: GateOutcome) -> int:
    """Exit code a hook should return for an outcome it will not override."""
    match outcome:
        case Configured():
            return int(ErrorCode.OK)
        case Unconfigured() | Invalid():
            return int(ErrorCode.RELEASE_CONFIG_ERROR)
