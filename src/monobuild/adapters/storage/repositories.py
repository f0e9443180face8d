"""Filesystem helpers for package inputs and build outputs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def list_directories(path: Path) -> List[Path]:
    entries = (entry for entry in path.iterdir() if entry.is_dir() and not entry.is_symlink())
    return sorted(entries, key=lambda p: p.name)
