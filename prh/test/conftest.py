from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    """A temporary Nx workspace root."""
    (tmp_path / "nx.json").write_text("{}", encoding="utf-8")
    return tmp_path
