from __future__ import annotations

from pathlib import Path

import pytest
import typer

from prh.cli.context import CLIContext
from prh.core.errors import ErrorCode
from prh.core.result import Err, Ok, Result
from prh.output.console import MockConsole
from prh.platform.process import ProcessError
from prh.test._fixtures import add_manifest, project
from prh.test.cli._helpers import make_ctx


def _unconfigured_ctx(root: Path) -> CLIContext:
    add_manifest(root, "libs/ui-shared")
    return make_ctx(root, {"ui-shared": project("libs/ui-shared")})


def _install(
    monkeypatch: pytest.MonkeyPatch,
    ctx: CLIContext,
    *,
    can_prompt: bool = True,
    action: str | None = None,
) -> None:
    import prh.cli.commands.pre_commit as cmd

    monkeypatch.setattr(cmd, "build_context", lambda: ctx)
    monkeypatch.setattr(cmd, "_can_prompt", lambda: can_prompt)
    monkeypatch.setattr(cmd, "_prompt_action", lambda: action)


def _console(ctx: CLIContext) -> MockConsole:
    assert isinstance(ctx.console, MockConsole)
    return ctx.console


def test_all_configured(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import prh.cli.commands.pre_commit as cmd

    add_manifest(workspace_root, "libs/a")
    ctx = make_ctx(workspace_root, {"a": project("libs/a", version={"versionFiles": ["x"]})})
    _install(monkeypatch, ctx)

    cmd.pre_commit(non_interactive=False, skip=False)

    assert _console(ctx).find("All publishable projects are configured")


def test_non_interactive_blocks(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import prh.cli.commands.pre_commit as cmd

    ctx = _unconfigured_ctx(workspace_root)
    _install(monkeypatch, ctx)

    with pytest.raises(typer.Exit) as exc:
        cmd.pre_commit(non_interactive=True, skip=False)

    assert exc.value.exit_code == int(ErrorCode.RELEASE_CONFIG_ERROR)
    assert _console(ctx).find("--project=ui-shared")


def test_no_tty_blocks(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import prh.cli.commands.pre_commit as cmd

    ctx = _unconfigured_ctx(workspace_root)
    _install(monkeypatch, ctx, can_prompt=False)

    with pytest.raises(typer.Exit) as exc:
        cmd.pre_commit(non_interactive=False, skip=False)

    assert exc.value.exit_code == int(ErrorCode.RELEASE_CONFIG_ERROR)


def test_skip_flag_allows_commit(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import prh.cli.commands.pre_commit as cmd

    ctx = _unconfigured_ctx(workspace_root)
    _install(monkeypatch, ctx, can_prompt=False)

    cmd.pre_commit(non_interactive=False, skip=True)

    assert _console(ctx).find("  - ui-shared")


def test_prompt_skip(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import prh.cli.commands.pre_commit as cmd

    ctx = _unconfigured_ctx(workspace_root)
    _install(monkeypatch, ctx, action="skip")

    cmd.pre_commit(non_interactive=False, skip=False)

    assert _console(ctx).find("Remember to configure these projects later")


def test_prompt_abort(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import prh.cli.commands.pre_commit as cmd

    ctx = _unconfigured_ctx(workspace_root)
    _install(monkeypatch, ctx, action="abort")

    with pytest.raises(typer.Exit) as exc:
        cmd.pre_commit(non_interactive=False, skip=False)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)


def test_prompt_cancelled(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import prh.cli.commands.pre_commit as cmd

    ctx = _unconfigured_ctx(workspace_root)
    _install(monkeypatch, ctx, action=None)

    with pytest.raises(typer.Exit) as exc:
        cmd.pre_commit(non_interactive=False, skip=False)

    assert exc.value.exit_code == int(ErrorCode.USER_ERROR)
    assert _console(ctx).find("Commit cancelled.")


def test_prompt_configure_runs_generator(
    workspace_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import prh.cli.commands.pre_commit as cmd

    ctx = _unconfigured_ctx(workspace_root)
    _install(monkeypatch, ctx, action="configure")
    calls: list[list[str]] = []

    def fake_run_streaming(command: list[str], cwd: Path) -> Result[None, ProcessError]:
        calls.append(command)
        return Ok(None)

    monkeypatch.setattr(cmd, "run_streaming", fake_run_streaming)

    cmd.pre_commit(non_interactive=False, skip=False)

    assert calls == [["npx", "nx", "g", "nx-project-release:init", "--project=ui-shared"]]
    assert _console(ctx).find("All projects configured!")


def test_prompt_configure_failure(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import prh.cli.commands.pre_commit as cmd

    ctx = _unconfigured_ctx(workspace_root)
    _install(monkeypatch, ctx, action="configure")
    monkeypatch.setattr(
        cmd,
        "run_streaming",
        lambda command, cwd: Err(ProcessError(tuple(command), 1, "", "")),
    )

    with pytest.raises(typer.Exit) as exc:
        cmd.pre_commit(non_interactive=False, skip=False)

    assert exc.value.exit_code == int(ErrorCode.ENV_ERROR)
    assert _console(ctx).find("Failed to configure ui-shared")


def test_can_prompt_false_in_ci(monkeypatch: pytest.MonkeyPatch) -> None:
    import prh.cli.commands.pre_commit as cmd

    monkeypatch.setenv("CI", "true")
    assert cmd._can_prompt() is False  # pyright: ignore[reportPrivateUsage]
