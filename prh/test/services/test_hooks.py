"""Tests for git hook installation."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

import pytest

from prh.core.result import Err, Ok
from prh.services.hooks import HOOKS, MANAGED_MARKER, HookInstaller


@pytest.fixture
def hooks_dir(tmp_path: Path) -> Path:
    (tmp_path / ".git").mkdir()
    return tmp_path / ".git" / "hooks"


def test_install_writes_all_hooks(hooks_dir: Path) -> None:
    result = HookInstaller(hooks_dir).install()

    assert isinstance(result, Ok)
    assert [p.name for p in result.value] == ["pre-commit", "pre-push"]
    content = (hooks_dir / "pre-push").read_text(encoding="utf-8")
    assert content.startswith("#!/bin/sh\n")
    assert MANAGED_MARKER in content
    assert 'exec prh pre-push "$@"' in content


def test_pre_commit_hook_reattaches_terminal(hooks_dir: Path) -> None:
    HookInstaller(hooks_dir).install()
    content = (hooks_dir / "pre-commit").read_text(encoding="utf-8")

    assert "if [ -t 1 ] && [ -r /dev/tty ]; then\n    exec < /dev/tty\nfi\n" in content
    assert content.index("exec < /dev/tty") < content.index('exec prh pre-commit "$@"')


def test_pre_push_hook_keeps_stdin(hooks_dir: Path) -> None:
    HookInstaller(hooks_dir).install()
    content = (hooks_dir / "pre-push").read_text(encoding="utf-8")

    # git feeds the pushed refs on stdin
    assert "/dev/tty" not in content


@pytest.mark.skipif(sys.platform == "win32", reason="chmod doesn't work on Windows")
def test_install_makes_hooks_executable(hooks_dir: Path) -> None:
    HookInstaller(hooks_dir).install()
    mode = os.stat(hooks_dir / "pre-commit").st_mode
    assert mode & stat.S_IXUSR


def test_install_uses_lf(hooks_dir: Path) -> None:
    HookInstaller(hooks_dir).install()
    assert b"\r\n" not in (hooks_dir / "pre-commit").read_bytes()


def test_reinstall_over_managed_hooks(hooks_dir: Path) -> None:
    installer = HookInstaller(hooks_dir)
    installer.install()
    assert isinstance(installer.install(), Ok)


def test_foreign_hook_blocks_install(hooks_dir: Path) -> None:
    hooks_dir.mkdir()
    (hooks_dir / "pre-push").write_text("#!/bin/sh\nnpm test\n", encoding="utf-8")

    result = HookInstaller(hooks_dir).install()

    assert isinstance(result, Err)
    assert "pre-push" in result.error.message
    assert not (hooks_dir / "pre-commit").exists()


def test_force_overwrites_foreign_hook(hooks_dir: Path) -> None:
    hooks_dir.mkdir()
    (hooks_dir / "pre-push").write_text("#!/bin/sh\nnpm test\n", encoding="utf-8")

    result = HookInstaller(hooks_dir).install(force=True)

    assert isinstance(result, Ok)
    assert MANAGED_MARKER in (hooks_dir / "pre-push").read_text(encoding="utf-8")


def test_not_a_git_directory(tmp_path: Path) -> None:
    result = HookInstaller(tmp_path / ".git" / "hooks").install()
    assert isinstance(result, Err)


def test_custom_executable(hooks_dir: Path) -> None:
    installer = HookInstaller(hooks_dir, executable="uvx prh")
    assert 'exec uvx prh pre-commit "$@"' in installer.render(HOOKS[0])


def test_uninstall_keeps_foreign_hooks(hooks_dir: Path) -> None:
    installer = HookInstaller(hooks_dir)
    installer.install()
    (hooks_dir / "pre-push").write_text("#!/bin/sh\nnpm test\n", encoding="utf-8")

    removed = installer.uninstall()

    assert [p.name for p in removed] == ["pre-commit"]
    assert (hooks_dir / "pre-push").exists()
