from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[str], Path]:
    """Write a dedented response document into tmp_path and return its path."""

    def _write(content: str, name: str = "response.md") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    return _write
