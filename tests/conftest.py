from __future__ import annotations

import importlib
import sys
import textwrap
from pathlib import Path
from typing import Callable, Iterator

import pytest


@pytest.fixture(autouse=True)
def _restore_argv(monkeypatch: pytest.MonkeyPatch) -> None:
    # Invoking an entry point rewrites sys.argv.
    monkeypatch.setattr(sys, "argv", list(sys.argv))


@pytest.fixture
def make_module(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Callable[[str, str], str]]:
    """Write an importable module into ``tmp_path`` and return its name."""

    created: list[str] = []
    module_dir = tmp_path / "modules"
    module_dir.mkdir()
    monkeypatch.syspath_prepend(str(module_dir))

    def _make(name: str, source: str) -> str:
        (module_dir / f"{name}.py").write_text(
            textwrap.dedent(source), encoding="utf-8"
        )
        importlib.invalidate_caches()
        created.append(name)
        return name

    yield _make

    for name in created:
        sys.modules.pop(name, None)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write launch config text to a file and return its path."""

    def _write(text: str, name: str = "launch.cfg") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
