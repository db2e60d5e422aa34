"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class RawFile:
    path: Path
    content: bytes


@dataclass(frozen=True)
class Segments:
    header: str
    records: list[str]


@dataclass(frozen=True)
class ExtractedFields:
    pay_period: str
    establishment_id: str
    activity_code: str


@dataclass(frozen=True)
class MonthlyDeclaration:
    organization_key: str
    period_key: str
    content: str
    source: str | None = None


@dataclass(frozen=True)
class ArchiveResult:
    organization_key: str
    path: Path
    entries: list[str]
    duplicate_entries: int = 0

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["path"] = str(self.path)
        return payload


@dataclass(frozen=True)
class ConversionResult:
    run_id: str
    input_files: list[str]
    skipped_entries: int
    declaration_count: int
    archives: list[ArchiveResult] = field(default_factory=list)
    duration_ms: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "run_id": self.run_id,
            "input_files": list(self.input_files),
            "skipped_entries": self.skipped_entries,
            "declaration_count": self.declaration_count,
            "archives": [archive.to_dict() for archive in self.archives],
            "duration_ms": self.duration_ms,
        }
