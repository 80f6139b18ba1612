"""Filesystem helpers."""

from __future__ import annotations

import sys
from pathlib import Path

from exposures.common.errors import InputError


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_yaml(path: Path):
    import yaml

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def read_text(source: str) -> str:
    """Read a feed payload from a path, or from stdin when ``source`` is ``-``."""

    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            return f.read()
    except OSError as exc:
        raise InputError(f"could not read file: {path}") from exc
