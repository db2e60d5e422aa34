"""Per-organization zip archive generation."""

from __future__ import annotations

import io
import zipfile
from pathlib import Path

from dsn_converter.common.constants import (
    DEFAULT_ARCHIVE_SUFFIX,
    DEFAULT_ENCODING,
    DEFAULT_ENTRY_EXTENSION,
    ZIP_ENTRY_DATE_TIME,
)
from dsn_converter.common.errors import OutputIOError
from dsn_converter.common.fs import ensure_dir, write_bytes
from dsn_converter.common.models import ArchiveResult, MonthlyDeclaration
from dsn_converter.pipeline.codec import encode_text


def archive_filename(organization_key: str, suffix: str = DEFAULT_ARCHIVE_SUFFIX) -> str:
    return f"{organization_key}{suffix}"


def entry_filename(organization_key: str, period_key: str, extension: str = DEFAULT_ENTRY_EXTENSION) -> str:
    return f"{organization_key}_{period_key}{extension}"


def is_safe_organization_key(organization_key: str) -> bool:
    # Keys become file names directly, so they must not carry a directory part.
    return "/" not in organization_key and "\\" not in organization_key


def collect_entries(
    organization_key: str,
    declarations: list[MonthlyDeclaration],
    extension: str = DEFAULT_ENTRY_EXTENSION,
) -> tuple[dict[str, str], int]:
    """Map entry names to content, last declaration wins on a name clash.

    An overwritten entry keeps the position of its first occurrence. Returns the
    entries and the number of declarations that were collapsed.
    """
    entries: dict[str, str] = {}
    duplicates = 0
    for declaration in declarations:
        name = entry_filename(organization_key, declaration.period_key, extension)
        if name in entries:
            duplicates += 1
        entries[name] = declaration.content
    return entries, duplicates


def build_archive_bytes(entries: dict[str, str], encoding: str = DEFAULT_ENCODING) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, content in entries.items():
            info = zipfile.ZipInfo(name, date_time=ZIP_ENTRY_DATE_TIME)
            info.compress_type = zipfile.ZIP_DEFLATED
            info.external_attr = 0o644 << 16
            archive.writestr(info, encode_text(content, encoding))
    return buffer.getvalue()


def write_organization_archive(
    output_dir: Path,
    organization_key: str,
    declarations: list[MonthlyDeclaration],
    *,
    encoding: str = DEFAULT_ENCODING,
    archive_suffix: str = DEFAULT_ARCHIVE_SUFFIX,
    entry_extension: str = DEFAULT_ENTRY_EXTENSION,
) -> ArchiveResult:
    """Write ``{organization_key}_dsn.zip`` holding one entry per month.

    The archive is built in memory and flushed with a single write.
    """
    if not is_safe_organization_key(organization_key):
        raise OutputIOError(f"Organization key {organization_key!r} cannot be used as an archive name")

    entries, duplicates = collect_entries(organization_key, declarations, entry_extension)
    payload = build_archive_bytes(entries, encoding)
    out_path = output_dir / archive_filename(organization_key, archive_suffix)

    try:
        ensure_dir(output_dir)
    except OSError as exc:
        raise OutputIOError(f"Unable to create output directory {output_dir}") from exc
    try:
        write_bytes(out_path, payload)
    except OSError as exc:
        raise OutputIOError(f"Unable to write archive {out_path}") from exc

    return ArchiveResult(
        organization_key=organization_key,
        path=out_path,
        entries=list(entries),
        duplicate_entries=duplicates,
    )
