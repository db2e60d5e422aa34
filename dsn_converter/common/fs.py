"""Filesystem helpers."""

from __future__ import annotations

import json
from pathlib import Path


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_yaml(path: Path):
    import yaml

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def write_json(path: Path, payload) -> None:
    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2, sort_keys=True)
        f.write("\n")


def list_dir_sorted(path: Path) -> list[Path]:
    return sorted(path.iterdir(), key=lambda entry: entry.name)


def read_bytes(path: Path) -> bytes:
    with path.open("rb") as f:
        return f.read()


def write_bytes(path: Path, payload: bytes) -> None:
    with path.open("wb") as f:
        f.write(payload)
