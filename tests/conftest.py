from __future__ import annotations

import os
from pathlib import Path

import pytest

from pagebake import PagebakeSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PAGEBAKE_* variables from the outer shell out of the tests."""

    for key in list(os.environ):
        if key.upper().startswith("PAGEBAKE_"):
            monkeypatch.delenv(key)


@pytest.fixture()
def settings() -> PagebakeSettings:
    return PagebakeSettings()


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    path = tmp_path / "templates"
    path.mkdir()
    return path


@pytest.fixture()
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "static"


def write_template(template_dir: Path, name: str, body: str) -> Path:
    path = template_dir / f"{name}.j2"
    path.write_text(body, encoding="utf-8")
    return path


def build_tree(root: Path, files: dict[str, bytes]) -> None:
    for relative, data in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)


def read_tree(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }
