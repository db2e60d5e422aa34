"""Run summary report."""

from __future__ import annotations

from pathlib import Path

from dsn_converter.common.fs import write_json
from dsn_converter.common.models import ConversionResult


def write_run_summary(path: Path, result: ConversionResult, status: str = "success") -> Path:
    payload = result.to_dict()
    payload["status"] = status
    payload["archive_count"] = len(result.archives)
    payload["duplicate_entries"] = sum(archive.duplicate_entries for archive in result.archives)
    write_json(path, payload)
    return path
