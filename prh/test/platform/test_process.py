"""Tests for prh.platform.process."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from prh.core.result import Err, Ok
from prh.platform.process import ProcessError, run, run_streaming


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(command=("npx", "nx"), returncode=1, stdout="", stderr="")
        assert str(error) == "npx nx failed (exit 1)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(
            command=("npx", "nx", "show", "project", "ui", "--json"),
            returncode=2,
            stdout="",
            stderr="",
        )
        assert str(error) == "npx nx show project ... failed (exit 2)"

    def test_frozen(self) -> None:
        error = ProcessError(("cmd",), 1, "", "")
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestRun:
    def test_success_returns_stdout(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "print('[]')"], cwd=tmp_path)
        assert isinstance(result, Ok)
        assert result.value.strip() == "[]"

    def test_failure_returns_error(self, tmp_path: Path) -> None:
        result = run(
            [sys.executable, "-c", "import sys; sys.stderr.write('nope'); sys.exit(3)"],
            cwd=tmp_path,
        )
        assert isinstance(result, Err)
        assert result.error.returncode == 3
        assert "nope" in result.error.stderr

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run(["nonexistent_command_12345"], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == -1

    def test_timeout(self, tmp_path: Path) -> None:
        result = run([sys.executable, "-c", "import time; time.sleep(5)"], cwd=tmp_path, timeout=0.2)
        assert isinstance(result, Err)
        assert "timed out" in result.error.stderr


class TestRunStreaming:
    def test_success(self, tmp_path: Path) -> None:
        assert isinstance(run_streaming([sys.executable, "-c", "pass"], cwd=tmp_path), Ok)

    def test_failure(self, tmp_path: Path) -> None:
        result = run_streaming([sys.executable, "-c", "raise SystemExit(4)"], cwd=tmp_path)
        assert isinstance(result, Err)
        assert result.error.returncode == 4
