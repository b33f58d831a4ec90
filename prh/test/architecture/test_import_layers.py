from __future__ import annotations

import pytest

from ._utils import iter_python_files, matches_prefix, parse_imports, prh_root

# package -> prefixes it must never import
FORBIDDEN = {
    "release": ("prh.cli", "prh.output", "prh.services", "prh.platform", "subprocess", "typer", "rich"),
    "inventory": ("prh.cli", "prh.output", "prh.services", "prh.release", "typer", "rich"),
    "services": ("prh.cli", "prh.output", "typer"),
    "core": ("prh.cli", "prh.output", "prh.services", "prh.release", "prh.inventory"),
}


@pytest.mark.parametrize("package", sorted(FORBIDDEN))
def test_layer_does_not_import_upper_layers(package: str) -> None:
    root = prh_root()
    offenders: list[str] = []

    for file_path in iter_python_files(root / package):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if any(matches_prefix(item.module, prefix) for prefix in FORBIDDEN[package]):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, f"{package} dependency violations:\n" + "\n".join(offenders)
