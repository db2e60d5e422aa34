"""Conversion run: per-file stages, then grouping and archive writing."""

from __future__ import annotations

import logging
from pathlib import Path

from dsn_converter.common.config_loader import ConversionConfig
from dsn_converter.common.errors import InputIOError
from dsn_converter.common.fs import list_dir_sorted, read_bytes
from dsn_converter.common.logging import log_event, log_warning
from dsn_converter.common.models import ArchiveResult, ConversionResult, MonthlyDeclaration, RawFile
from dsn_converter.common.time_utils import elapsed_ms, monotonic_ms
from dsn_converter.pipeline.archive import write_organization_archive
from dsn_converter.pipeline.assemble import assemble_declaration
from dsn_converter.pipeline.codec import decode_bytes
from dsn_converter.pipeline.extract import extract_fields
from dsn_converter.pipeline.group import group_by_organization
from dsn_converter.pipeline.segment import split_segments

_LOGGER = logging.getLogger("dsn_converter")


def list_input_files(input_dir: Path, extension: str) -> tuple[list[Path], int]:
    """Return eligible input files sorted by name and the count of skipped entries.

    Eligibility is an exact, case-sensitive suffix match on regular files.
    """
    try:
        entries = list_dir_sorted(input_dir)
    except OSError as exc:
        raise InputIOError(f"Unable to list input directory {input_dir}") from exc

    eligible = [entry for entry in entries if entry.suffix == extension and entry.is_file()]
    return eligible, len(entries) - len(eligible)


def read_raw_file(path: Path) -> RawFile:
    try:
        return RawFile(path=path, content=read_bytes(path))
    except OSError as exc:
        raise InputIOError(f"Unable to read input file {path}") from exc


def convert_text(text: str, config: ConversionConfig, source: str | None = None) -> list[MonthlyDeclaration]:
    segments = split_segments(text, config.separator)
    declarations = []
    for record in segments.records:
        fields = extract_fields(record, config.markers, config.marker_delimiter)
        declarations.append(assemble_declaration(segments.header, config.separator, record, fields, source=source))
    return declarations


def convert_file(path: Path, config: ConversionConfig) -> list[MonthlyDeclaration]:
    raw = read_raw_file(path)
    text = decode_bytes(raw.content, config.encoding)
    return convert_text(text, config, source=str(path))


def write_archives(
    grouped: dict[str, list[MonthlyDeclaration]],
    output_dir: Path,
    config: ConversionConfig,
    *,
    logger: logging.Logger,
    run_id: str | None = None,
) -> list[ArchiveResult]:
    results = []
    for organization_key, declarations in grouped.items():
        result = write_organization_archive(
            output_dir,
            organization_key,
            declarations,
            encoding=config.encoding,
            archive_suffix=config.archive_suffix,
            entry_extension=config.entry_extension,
        )
        if result.duplicate_entries:
            log_warning(
                logger,
                f"{result.duplicate_entries} duplicate period entries replaced in {result.path.name}",
                run_id=run_id,
                stage="archive",
                organization=organization_key,
                event="DUPLICATE_ENTRY",
                status="warning",
            )
        log_event(
            logger,
            f"archive written: {result.path}",
            run_id=run_id,
            stage="archive",
            organization=organization_key,
            event="ARCHIVE_WRITTEN",
            status="ok",
            records_out=len(result.entries),
        )
        results.append(result)
    return results


def run_conversion(
    input_dir: Path,
    output_dir: Path,
    config: ConversionConfig,
    *,
    logger: logging.Logger | None = None,
    run_id: str | None = None,
) -> ConversionResult:
    logger = logger or _LOGGER
    start = monotonic_ms()

    log_event(logger, "stage start", run_id=run_id, stage="list-files", event="STAGE_START", status="ok")
    input_files, skipped = list_input_files(input_dir, config.extension)
    log_event(
        logger,
        "stage end",
        run_id=run_id,
        stage="list-files",
        event="STAGE_END",
        status="ok",
        files_in=len(input_files),
    )

    log_event(logger, "stage start", run_id=run_id, stage="convert", event="STAGE_START", status="ok")
    declarations: list[MonthlyDeclaration] = []
    for path in input_files:
        converted = convert_file(path, config)
        declarations.extend(converted)
        log_event(
            logger,
            f"file converted: {path.name}",
            run_id=run_id,
            stage="convert",
            source=str(path),
            event="FILE_CONVERTED",
            status="ok",
            records_out=len(converted),
        )
    log_event(
        logger,
        "stage end",
        run_id=run_id,
        stage="convert",
        event="STAGE_END",
        status="ok",
        files_in=len(input_files),
        records_out=len(declarations),
    )

    log_event(logger, "stage start", run_id=run_id, stage="group", event="STAGE_START", status="ok")
    grouped = group_by_organization(declarations)
    log_event(logger, "stage end", run_id=run_id, stage="group", event="STAGE_END", status="ok", records_out=len(grouped))

    log_event(logger, "stage start", run_id=run_id, stage="archive", event="STAGE_START", status="ok")
    archives = write_archives(grouped, output_dir, config, logger=logger, run_id=run_id)
    log_event(logger, "stage end", run_id=run_id, stage="archive", event="STAGE_END", status="ok", records_out=len(archives))

    return ConversionResult(
        run_id=run_id or "",
        input_files=[str(path) for path in input_files],
        skipped_entries=skipped,
        declaration_count=len(declarations),
        archives=archives,
        duration_ms=elapsed_ms(start),
    )
