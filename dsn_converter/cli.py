"""CLI entrypoint for the payroll declaration splitter."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dsn_converter.common.config_loader import load_conversion_config
from dsn_converter.common.constants import EXIT_HARD_FAIL, EXIT_SUCCESS
from dsn_converter.common.errors import ArgumentError, PipelineError
from dsn_converter.common.ids import generate_run_id
from dsn_converter.common.logging import build_logger, log_event
from dsn_converter.common.time_utils import elapsed_ms, monotonic_ms
from dsn_converter.pipeline.orchestrator import run_conversion
from dsn_converter.pipeline.reports import write_run_summary


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input_folder")
    parser.add_argument("output_folder")
    parser.add_argument("--config-dir", default=None)
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--log-dir", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--summary-path", default=None)
    return parser.parse_args(argv)


def resolve_folders(args: argparse.Namespace) -> tuple[Path, Path]:
    input_folder = args.input_folder or ""
    output_folder = args.output_folder or ""
    if not input_folder or not output_folder:
        raise ArgumentError("Invalid arguments: input and output folders are required")
    return Path(os.path.normpath(input_folder)), Path(os.path.normpath(output_folder))


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    logger = build_logger(run_id, level=args.log_level, log_dir=Path(args.log_dir) if args.log_dir else None)
    start = monotonic_ms()
    log_event(logger, "conversion start", run_id=run_id, event="RUN_START", status="ok")

    exit_code = EXIT_SUCCESS
    try:
        input_dir, output_dir = resolve_folders(args)
        config = load_conversion_config(
            Path(args.config_dir) if args.config_dir else None,
            overlay_config_dir=Path(args.overlay_config_dir) if args.overlay_config_dir else None,
        )
        log_event(
            logger,
            f"parameters read: input={input_dir} output={output_dir}",
            run_id=run_id,
            event="PARAMETERS",
            status="ok",
        )
        result = run_conversion(input_dir, output_dir, config, logger=logger, run_id=run_id)
        if args.summary_path:
            write_run_summary(Path(args.summary_path), result)
    except PipelineError as exc:
        exit_code = EXIT_HARD_FAIL
        detail = f"{exc}: {exc.cause}" if exc.cause is not None else str(exc)
        log_event(logger, detail, run_id=run_id, event="STAGE_FAIL", status="error", error_code=exc.error_code)
    except Exception as exc:
        exit_code = EXIT_HARD_FAIL
        log_event(
            logger,
            f"unexpected failure: {exc!r}",
            run_id=run_id,
            event="STAGE_FAIL",
            status="error",
            error_code="UNEXPECTED_ERROR",
        )
    finally:
        duration = elapsed_ms(start)
        log_event(
            logger,
            f"conversion end in {duration} ms",
            run_id=run_id,
            event="RUN_END",
            status="ok" if exit_code == EXIT_SUCCESS else "error",
            duration_ms=duration,
        )
    return exit_code


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return run_command(args)
    except PipelineError:
        return EXIT_HARD_FAIL
    except Exception:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
