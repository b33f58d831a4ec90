"""Git hook script generator.

Writes `pre-commit` and `pre-push` scripts into `.git/hooks` that call back
into `prh`. Scripts are POSIX sh (git runs hooks through sh on every
platform), written with LF line endings and made executable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from prh.core.result import Err, Ok, Result

__all__ = ["HOOKS", "HookInstallError", "HookInstaller", "HookSpec", "MANAGED_MARKER"]

MANAGED_MARKER = "# managed by prh"


@dataclass(frozen=True, slots=True)
class HookSpec:
    """A git hook and the prh subcommand it runs.

    Attributes:
        name: Hook file name (e.g., "pre-push")
        subcommand: prh subcommand invoked by the hook
        attach_tty: Reconnect stdin to the terminal before running, since git
            starts pre-commit with stdin closed
    """

    name: str
    subcommand: str
    attach_tty: bool = False


HOOKS: tuple[HookSpec, ...] = (
    HookSpec(name="pre-commit", subcommand="pre-commit", attach_tty=True),
    HookSpec(name="pre-push", subcommand="pre-push"),
)


@dataclass(frozen=True, slots=True)
class HookInstallError:
    message: str
    path: Path | None = None


class HookInstaller:
    def __init__(self, hooks_dir: Path, *, executable: str = "prh") -> None:
        self._hooks_dir = hooks_dir
        self._executable = executable

    def render(self, spec: HookSpec) -> str:
        lines = ["#!/bin/sh", MANAGED_MARKER, ""]
        if spec.attach_tty:
            lines += [
                "if [ -t 1 ] && [ -r /dev/tty ]; then",
                "    exec < /dev/tty",
                "fi",
                "",
            ]
        lines.append(f'exec {self._executable} {spec.subcommand} "$@"')
        return "\n".join(lines) + "\n"

    def is_managed(self, path: Path) -> bool:
        """Return True if the hook at path was written by prh."""
        try:
            return MANAGED_MARKER in path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return False

    def install(self, *, force: bool = False) -> Result[list[Path], HookInstallError]:
        """Write every hook script.

        Existing hooks not written by prh are left untouched unless
        `force` is set; nothing is written if any of them would block.
        """
        if not self._hooks_dir.parent.is_dir():
            return Err(
                HookInstallError(
                    f"Not a git directory: {self._hooks_dir.parent}",
                    path=self._hooks_dir.parent,
                )
            )

        if not force:
            for spec in HOOKS:
                path = self._hooks_dir / spec.name
                if path.exists() and not self.is_managed(path):
                    return Err(
                        HookInstallError(
                            f"{spec.name} hook already exists (use --force to overwrite)",
                            path=path,
                        )
                    )

        written: list[Path] = []
        try:
            self._hooks_dir.mkdir(parents=True, exist_ok=True)
            for spec in HOOKS:
                path = self._hooks_dir / spec.name
                path.write_text(self.render(spec), encoding="utf-8", newline="\n")
                path.chmod(0o755)
                written.append(path)
        except OSError as e:
            return Err(HookInstallError(f"Failed to write hooks: {e}", path=self._hooks_dir))
        return Ok(written)

    def uninstall(self) -> list[Path]:
        """Remove prh-managed hooks; foreign hooks are kept."""
        removed: list[Path] = []
        for spec in HOOKS:
            path = self._hooks_dir / spec.name
            if path.exists() and self.is_managed(path):
                path.unlink()
                removed.append(path)
        return removed
